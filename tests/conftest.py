import pytest
from click.testing import CliRunner
from unittest.mock import MagicMock

from qodana_runner.core.executor import ExecResult
from qodana_runner.core.graph import create_task_graph


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def temp_project_dir(tmp_path):
    """Creates a temporary project directory with basic structure."""
    project_path = tmp_path / "project"
    project_path.mkdir()
    (project_path / "src").mkdir()
    (project_path / "src" / "Main.java").write_text("class Main {}")
    return project_path


@pytest.fixture
def graph(temp_project_dir):
    """Provides a task graph for the temporary project."""
    return create_task_graph(temp_project_dir)


@pytest.fixture
def mock_executor():
    """Provides an executor whose processes always succeed."""
    executor = MagicMock()
    executor.execute.side_effect = lambda invocation: ExecResult(
        invocation.to_command(), 0, ""
    )
    return executor
