"""Qodana Runner - Run Qodana inspections in a Docker container from your build."""

__version__ = "0.1.0"

# Export main CLI for convenience
from .cli.main import cli

__all__ = ['cli']
