"""Inspection tasks and the invocations they build."""

import logging
from pathlib import Path
from typing import Callable, List, Optional

from ..models.invocation import Binding, Invocation, render_bindings
from ..services.exceptions import ConfigurationError, ProcessFailure
from ..utils.path_finder import PathFinder
from .constants import (
    CHANGES_ARGUMENT,
    CONTAINER_CACHE_DIR,
    CONTAINER_DISABLED_PLUGINS_PATH,
    CONTAINER_PROFILE_PATH,
    CONTAINER_PROJECT_DIR,
    CONTAINER_REPORT_PORT,
    CONTAINER_RESULTS_DIR,
    GROUP_NAME,
    IDE_PROPERTIES_VARIABLE,
    SAVE_REPORT_FLAG,
    SHOW_REPORT_FLAG,
)
from .convention import ListProperty, Property
from .executor import ExecResult

logger = logging.getLogger(__name__)


class Task:
    """A node in the task graph.

    ``depends_on`` orders execution; ``only_if`` predicates are checked when
    the task is about to run and skip it without touching the edges.
    """

    def __init__(self, name: str, description: str = "", group: str = GROUP_NAME):
        self.name = name
        self.description = description
        self.group = group
        self.depends_on: List['Task'] = []
        self.only_if: List[Callable[[], bool]] = []
        self.ignore_exit_value = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    def add_dependency(self, task: 'Task') -> None:
        if task not in self.depends_on:
            self.depends_on.append(task)

    def add_only_if(self, predicate: Callable[[], bool]) -> None:
        self.only_if.append(predicate)

    def should_run(self) -> bool:
        return all(predicate() for predicate in self.only_if)

    def execute(self, executor) -> Optional[ExecResult]:
        raise NotImplementedError


class ExecTask(Task):
    """A task that launches one container runtime process."""

    def build_invocation(self) -> Invocation:
        raise NotImplementedError

    def execute(self, executor) -> ExecResult:
        """Build the invocation, run it and apply the exit status policy.

        Raises:
            ProcessFailure: If the process exits non-zero and the task does
                not ignore its exit value
        """
        invocation = self.build_invocation()
        logger.info(f"{self.name}: {invocation}")
        result = executor.execute(invocation)

        if not result.succeeded:
            if self.ignore_exit_value:
                logger.warning(
                    f"{self.name}: ignoring exit code {result.exit_code}"
                )
            else:
                raise ProcessFailure(result.command, result.exit_code, result.output)
        return result


class UpdateInspectionsTask(ExecTask):
    """Pulls the inspections image."""

    def __init__(self, name: str, description: str = ""):
        super().__init__(name, description)
        self.docker_executable: Property[str] = Property('dockerExecutable')
        self.docker_image_name: Property[str] = Property('dockerImageName')

    def build_invocation(self) -> Invocation:
        return Invocation(
            executable=self.docker_executable.get(),
            action='pull',
            target=self.docker_image_name.get(),
        )


class RunInspectionsTask(ExecTask):
    """Starts the inspections container against the project."""

    def __init__(self, name: str, description: str = "", base_dir: Optional[Path] = None):
        super().__init__(name, description)
        self.base_dir = base_dir or Path.cwd()

        self.docker_executable: Property[str] = Property('dockerExecutable')
        self.docker_container_name: Property[str] = Property('dockerContainerName')
        self.docker_image_name: Property[str] = Property('dockerImageName')
        self.project_dir: Property[str] = Property('projectDir')
        self.results_dir: Property[str] = Property('resultsDir')
        self.cache_dir: Property[str] = Property('cacheDir')
        self.profile_path: Property[str] = Property('profilePath')
        self.disabled_plugins_path: Property[str] = Property('disabledPluginsPath')
        self.jvm_parameters: ListProperty[str] = ListProperty('jvmParameters')
        self.save_report: Property[bool] = Property('saveReport', False)
        self.show_report: Property[bool] = Property('showReport', False)
        self.show_report_port: Property[int] = Property('showReportPort')
        self.changes: Property[bool] = Property('changes', False)

    def host_path(self, path: Optional[str]) -> Optional[str]:
        """Canonicalize a host path, resolving relative paths against base_dir."""
        return PathFinder.host_path(path, self.base_dir)

    def port_bindings(self) -> List[str]:
        return list(render_bindings([
            Binding(self.show_report_port.get(), CONTAINER_REPORT_PORT),
        ]))

    def volume_bindings(self) -> List[str]:
        return list(render_bindings([
            Binding(self.host_path(self.project_dir.get()), CONTAINER_PROJECT_DIR),
            Binding(self.host_path(self.results_dir.get()), CONTAINER_RESULTS_DIR),
            Binding.optional(self.host_path(self.cache_dir.get_or_none()), CONTAINER_CACHE_DIR),
            Binding.optional(self.host_path(self.profile_path.get_or_none()), CONTAINER_PROFILE_PATH),
            Binding.optional(
                self.host_path(self.disabled_plugins_path.get_or_none()),
                CONTAINER_DISABLED_PLUGINS_PATH,
            ),
        ]))

    def env_parameters(self) -> List[str]:
        params = []
        if self.save_report.get():
            params.append(SAVE_REPORT_FLAG)
        if self.show_report.get():
            params.append(SHOW_REPORT_FLAG)
        jvm_parameters = self.jvm_parameters.get()
        if jvm_parameters:
            params.append(f"{IDE_PROPERTIES_VARIABLE}={' '.join(jvm_parameters)}")
        return params

    def arguments(self) -> List[str]:
        return [CHANGES_ARGUMENT] if self.changes.get() else []

    def build_invocation(self) -> Invocation:
        return Invocation(
            executable=self.docker_executable.get(),
            action='run',
            target=self.docker_image_name.get(),
            options=('--rm', '--name', self.docker_container_name.get()),
            arguments=tuple(self.arguments()),
            env_parameters=tuple(self.env_parameters()),
            volume_bindings=tuple(self.volume_bindings()),
            port_bindings=tuple(self.port_bindings()),
        )


class StopInspectionsTask(ExecTask):
    """Stops the inspections container. Never fails the caller."""

    def __init__(self, name: str, description: str = ""):
        super().__init__(name, description)
        self.ignore_exit_value = True
        self.docker_executable: Property[str] = Property('dockerExecutable')
        self.docker_container_name: Property[str] = Property('dockerContainerName')

    def build_invocation(self) -> Invocation:
        return Invocation(
            executable=self.docker_executable.get(),
            action='stop',
            target=self.docker_container_name.get(),
        )


class CleanInspectionsTask(Task):
    """Deletes the inspections results directory."""

    def __init__(self, name: str, description: str = "", base_dir: Optional[Path] = None):
        super().__init__(name, description)
        self.base_dir = base_dir or Path.cwd()
        self.results_dir: Property[str] = Property('resultsDir')

    def execute(self, executor) -> None:
        """Remove the results directory, if there is one.

        Raises:
            ConfigurationError: If the results path exists but is not a directory
        """
        results_dir = Path(PathFinder.host_path(self.results_dir.get(), self.base_dir))
        if not results_dir.exists():
            logger.info(f"{self.name}: nothing to clean at {results_dir}")
            return
        if not results_dir.is_dir():
            raise ConfigurationError(
                f"Results path '{results_dir}' is not a directory"
            )
        executor.remove_directory(results_dir)
        logger.info(f"{self.name}: removed {results_dir}")
