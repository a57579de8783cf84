"""Utilities for finding and normalizing paths."""

from pathlib import Path
from typing import Optional, Union

from ..core.constants import CONFIG_FILE_NAME


class PathFinder:
    """Utility class for finding and normalizing paths."""

    @staticmethod
    def canonical_path(path: Union[str, Path]) -> str:
        """Return the absolute, symlink-resolved form of a host path."""
        return str(Path(path).expanduser().resolve())

    @staticmethod
    def host_path(path: Optional[Union[str, Path]], base_dir: Path) -> Optional[str]:
        """Canonicalize a host path, resolving relative paths against base_dir."""
        if path is None:
            return None
        candidate = Path(path).expanduser()
        if not candidate.is_absolute():
            candidate = base_dir / candidate
        return PathFinder.canonical_path(candidate)

    @staticmethod
    def find_config_file(project_dir: Path) -> Optional[Path]:
        """Find the runner configuration file in the project directory."""
        candidate = project_dir / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        return None
