"""Custom exceptions for Qodana Runner."""

from typing import List, Optional


class QodanaRunnerError(Exception):
    """Base exception for all Qodana Runner errors."""

    pass


class ConfigurationError(QodanaRunnerError):
    """Exception raised when a required setting is missing or invalid."""

    pass


class UnknownTaskError(QodanaRunnerError):
    """Exception raised when a task name is not registered in the graph."""

    pass


class ProcessFailure(QodanaRunnerError):
    """Exception raised when an external process exits with a non-zero status."""

    def __init__(self, command: List[str], exit_code: int, output: Optional[str] = None):
        self.command = command
        self.exit_code = exit_code
        self.output = output or ""
        super().__init__(
            f"Command '{' '.join(command)}' failed with exit code {exit_code}"
        )
