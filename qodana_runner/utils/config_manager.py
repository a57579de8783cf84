"""Configuration file loading."""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from ..models.settings import RunnerSettings
from ..services.exceptions import ConfigurationError
from .path_finder import PathFinder

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads ``qodana-runner.yaml`` and applies it to a task graph."""

    def __init__(self, project_dir: Path, config_file: Optional[Path] = None):
        """Initialize config manager.

        Args:
            project_dir: The project directory to look for a config file in
            config_file: Explicit config file, overrides the lookup
        """
        self.project_dir = project_dir
        self.config_file = config_file or PathFinder.find_config_file(project_dir)

    def load_settings(self) -> RunnerSettings:
        """Read and validate the configuration file.

        Returns:
            The parsed settings, empty when there is no config file

        Raises:
            ConfigurationError: If the file is unreadable, not valid YAML or
                contains unknown or mistyped keys
        """
        if self.config_file is None:
            return RunnerSettings()

        try:
            data = yaml.safe_load(self.config_file.read_text())
        except OSError as e:
            raise ConfigurationError(f"Cannot read {self.config_file}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {self.config_file}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"{self.config_file} must contain a mapping")

        try:
            settings = RunnerSettings.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration in {self.config_file}: {e}") from e

        logger.info(f"Loaded configuration from {self.config_file}")
        return settings

    @staticmethod
    def apply(settings: RunnerSettings, graph) -> None:
        """Assign every value present in ``settings`` as an explicit value."""
        ext = graph.extension
        run = graph.run

        for name in (
            'executable',
            'project_path',
            'results_path',
            'cache_path',
            'save_report',
            'show_report',
            'show_report_port',
            'auto_update',
        ):
            value = getattr(settings, name)
            if value is not None:
                getattr(ext, name).set(value)

        if settings.image_name is not None:
            run.docker_image_name.set(settings.image_name)
        if settings.container_name is not None:
            run.docker_container_name.set(settings.container_name)
        if settings.profile_path is not None:
            run.profile_path.set(settings.profile_path)
        if settings.disabled_plugins_path is not None:
            run.disabled_plugins_path.set(settings.disabled_plugins_path)
        if settings.jvm_parameters:
            run.jvm_parameters.set(list(settings.jvm_parameters))
