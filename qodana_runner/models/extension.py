"""Project-wide configuration for the inspection tasks."""

from pathlib import Path
from typing import Optional

from ..core.constants import (
    DEFAULT_RESULTS_SUBPATH,
    DEFAULT_SHOW_REPORT_PORT,
    EXECUTABLE,
)
from ..core.convention import Property
from ..utils.path_finder import PathFinder


class QodanaExtension:
    """The ``qodana`` configuration block shared by all tasks.

    Every field is a ``Property``: assign with ``set()``, read with ``get()``.
    Defaults are conventions, so ``results_path`` keeps following
    ``project_path`` until it is set explicitly.
    """

    def __init__(self, project_dir: Path):
        self.project_dir = project_dir

        self.executable: Property[str] = Property('executable', EXECUTABLE)
        self.project_path: Property[str] = Property(
            'projectPath', lambda: PathFinder.canonical_path(self.project_dir)
        )
        self.results_path: Property[str] = Property(
            'resultsPath',
            lambda: f"{self.project_path.get()}/{DEFAULT_RESULTS_SUBPATH}",
        )
        self.cache_path: Property[str] = Property('cachePath')
        self.save_report: Property[bool] = Property('saveReport', False)
        self.show_report: Property[bool] = Property('showReport', False)
        self.show_report_port: Property[int] = Property('showReportPort', DEFAULT_SHOW_REPORT_PORT)
        self.auto_update: Property[bool] = Property('autoUpdate', True)

    def resolve_file(self, path: Optional[str]) -> Optional[Path]:
        """Resolve a possibly relative path against the project directory."""
        if path is None:
            return None
        candidate = Path(path).expanduser()
        if not candidate.is_absolute():
            candidate = self.project_dir / candidate
        return candidate
