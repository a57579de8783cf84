"""Utilities for Qodana Runner."""

from .path_finder import PathFinder

__all__ = [
    'PathFinder'
]
