"""Configuration file models."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RunnerSettings(BaseModel):
    """Settings read from ``qodana-runner.yaml``.

    Keys may be written in camelCase (as in a build-file extension block) or
    snake_case. Absent keys leave the corresponding convention in place.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    executable: Optional[str] = None
    project_path: Optional[str] = Field(None, alias="projectPath")
    results_path: Optional[str] = Field(None, alias="resultsPath")
    cache_path: Optional[str] = Field(None, alias="cachePath")
    save_report: Optional[bool] = Field(None, alias="saveReport")
    show_report: Optional[bool] = Field(None, alias="showReport")
    show_report_port: Optional[int] = Field(None, alias="showReportPort", ge=1, le=65535)
    auto_update: Optional[bool] = Field(None, alias="autoUpdate")

    # Task-level overrides for runInspections
    image_name: Optional[str] = Field(None, alias="imageName")
    container_name: Optional[str] = Field(None, alias="containerName")
    profile_path: Optional[str] = Field(None, alias="profilePath")
    disabled_plugins_path: Optional[str] = Field(None, alias="disabledPluginsPath")
    jvm_parameters: List[str] = Field(default_factory=list, alias="jvmParameters")
