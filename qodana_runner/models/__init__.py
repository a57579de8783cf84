"""Models for Qodana Runner."""

from .extension import QodanaExtension
from .invocation import Binding, Invocation
from .settings import RunnerSettings

__all__ = [
    'QodanaExtension',
    'Binding',
    'Invocation',
    'RunnerSettings'
]
