"""Service layer exceptions shared by the core and the CLI."""

from .exceptions import (
    QodanaRunnerError,
    ConfigurationError,
    UnknownTaskError,
    ProcessFailure,
)

__all__ = [
    "QodanaRunnerError",
    "ConfigurationError",
    "UnknownTaskError",
    "ProcessFailure",
]
