"""Task graph wiring for the inspection lifecycle."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from ..models.extension import QodanaExtension
from ..services.exceptions import UnknownTaskError
from .constants import (
    CLEAN_INSPECTIONS_TASK_NAME,
    DOCKER_CONTAINER_NAME_INSPECTIONS,
    DOCKER_IMAGE_NAME_INSPECTIONS,
    RUN_INSPECTIONS_TASK_NAME,
    STOP_INSPECTIONS_TASK_NAME,
    UPDATE_INSPECTIONS_TASK_NAME,
)
from .tasks import (
    CleanInspectionsTask,
    RunInspectionsTask,
    StopInspectionsTask,
    Task,
    UpdateInspectionsTask,
)

logger = logging.getLogger(__name__)


@dataclass
class TaskOutcome:
    """What happened to one task during ``TaskGraph.execute``."""

    task: str
    skipped: bool
    exit_code: Optional[int] = None
    output: str = ""
    command: Optional[List[str]] = None


class TaskGraph:
    """The four inspection tasks and the edges between them."""

    def __init__(self, extension: QodanaExtension):
        self.extension = extension
        project_dir = extension.project_dir

        self.update = UpdateInspectionsTask(
            UPDATE_INSPECTIONS_TASK_NAME,
            "Pulls the latest Qodana Inspections Docker container",
        )
        self.run = RunInspectionsTask(
            RUN_INSPECTIONS_TASK_NAME,
            "Starts Qodana Inspections in Docker container",
            base_dir=project_dir,
        )
        self.stop = StopInspectionsTask(
            STOP_INSPECTIONS_TASK_NAME,
            "Stops Qodana Inspections Docker container",
        )
        self.clean = CleanInspectionsTask(
            CLEAN_INSPECTIONS_TASK_NAME,
            "Cleans up Qodana Inspections output directory",
            base_dir=project_dir,
        )

        self._configure_update()
        self._configure_run()
        self._configure_stop()
        self._configure_clean()

        self._tasks: Dict[str, Task] = {
            task.name: task for task in (self.update, self.run, self.stop, self.clean)
        }

    def _configure_update(self) -> None:
        self.update.docker_image_name.convention(self.run.docker_image_name)
        self.update.docker_executable.convention(self.extension.executable)

    def _configure_run(self) -> None:
        ext = self.extension
        run = self.run

        run.docker_executable.convention(ext.executable)
        run.docker_container_name.convention(DOCKER_CONTAINER_NAME_INSPECTIONS)
        run.docker_image_name.convention(DOCKER_IMAGE_NAME_INSPECTIONS)
        run.project_dir.convention(lambda: str(ext.resolve_file(ext.project_path.get())))
        run.results_dir.convention(lambda: str(ext.resolve_file(ext.results_path.get())))
        run.cache_dir.convention(lambda: _optional_str(ext.resolve_file(ext.cache_path.get_or_none())))
        run.save_report.convention(ext.save_report)
        run.show_report.convention(ext.show_report)
        run.show_report_port.convention(ext.show_report_port)

        run.add_dependency(self.update)
        self.update.add_only_if(lambda: ext.auto_update.get())

    def _configure_stop(self) -> None:
        self.stop.docker_container_name.convention(self.run.docker_container_name)
        self.stop.docker_executable.convention(self.extension.executable)

    def _configure_clean(self) -> None:
        self.clean.results_dir.convention(self.run.results_dir)

    def names(self) -> List[str]:
        return list(self._tasks)

    def tasks(self) -> List[Task]:
        return list(self._tasks.values())

    def get(self, name: str) -> Task:
        try:
            return self._tasks[name]
        except KeyError:
            raise UnknownTaskError(f"Task '{name}' not found") from None

    def execution_plan(self, name: str) -> List[Task]:
        """Return the task and its dependencies, dependencies first."""
        plan: List[Task] = []
        visiting = set()

        def visit(task: Task) -> None:
            if task in plan or task.name in visiting:
                return
            visiting.add(task.name)
            for dependency in task.depends_on:
                visit(dependency)
            plan.append(task)

        visit(self.get(name))
        return plan

    def execute(self, name: str, executor) -> List[TaskOutcome]:
        """Run a task after its dependencies, sequentially.

        Tasks whose ``only_if`` predicates fail are skipped; a ProcessFailure
        from any task stops the remaining plan.
        """
        outcomes = []
        for task in self.execution_plan(name):
            if not task.should_run():
                logger.info(f"Skipping {task.name}: condition not met")
                outcomes.append(TaskOutcome(task.name, skipped=True))
                continue

            logger.info(f"Running {task.name}")
            result = task.execute(executor)
            if result is None:
                outcomes.append(TaskOutcome(task.name, skipped=False))
            else:
                outcomes.append(
                    TaskOutcome(task.name, False, result.exit_code, result.output, result.command)
                )
        return outcomes


def _optional_str(path: Optional[Path]) -> Optional[str]:
    return None if path is None else str(path)


def create_task_graph(project_dir: Optional[Path] = None) -> TaskGraph:
    """Create the extension and the inspection tasks for a project directory."""
    extension = QodanaExtension(project_dir or Path.cwd())
    return TaskGraph(extension)
