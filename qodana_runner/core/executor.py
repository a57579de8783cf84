"""Process execution for container runtime invocations."""

import logging
import shutil
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from ..models.invocation import Invocation
from .constants import COMMAND_NOT_EXECUTABLE_EXIT_CODE, COMMAND_NOT_FOUND_EXIT_CODE

logger = logging.getLogger(__name__)


@dataclass
class ExecResult:
    """Outcome of a single process launch."""

    command: List[str]
    exit_code: int
    output: str = ""

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


class ProcessExecutor:
    """Runs invocations as blocking child processes and removes output directories."""

    def execute(self, invocation: Invocation) -> ExecResult:
        """Run the invocation and wait for it to exit.

        Args:
            invocation: The command to run

        Returns:
            ExecResult with the exit status and combined stdout/stderr
        """
        command = invocation.to_command()
        logger.debug(f"Executing: {' '.join(command)}")
        try:
            result = subprocess.run(command, capture_output=True, text=True)
        except FileNotFoundError as e:
            return ExecResult(command, COMMAND_NOT_FOUND_EXIT_CODE, str(e))
        except OSError as e:
            return ExecResult(command, COMMAND_NOT_EXECUTABLE_EXIT_CODE, str(e))

        output = (result.stdout or "") + (result.stderr or "")
        return ExecResult(command, result.returncode, output)

    def remove_directory(self, path: Path) -> None:
        shutil.rmtree(path)


@dataclass
class DryRunExecutor:
    """Records invocations instead of launching them."""

    invocations: List[Invocation] = field(default_factory=list)
    removed: List[Path] = field(default_factory=list)

    def execute(self, invocation: Invocation) -> ExecResult:
        self.invocations.append(invocation)
        return ExecResult(invocation.to_command(), 0, "")

    def remove_directory(self, path: Path) -> None:
        self.removed.append(path)
