"""Tests for task graph wiring."""

from unittest.mock import MagicMock

import pytest

from qodana_runner.core.executor import ExecResult, ProcessExecutor
from qodana_runner.core.graph import TaskGraph, create_task_graph
from qodana_runner.services.exceptions import ProcessFailure, UnknownTaskError


class TestTaskGraphWiring:
    """Test cases for conventions shared between tasks."""

    def test_task_names(self, graph):
        assert graph.names() == [
            'updateInspections',
            'runInspections',
            'stopInspections',
            'cleanInspections',
        ]

    def test_all_tasks_in_group(self, graph):
        assert {task.group for task in graph.tasks()} == {'qodana'}

    def test_run_defaults(self, graph, temp_project_dir):
        project = temp_project_dir.resolve()
        invocation = graph.run.build_invocation()

        assert invocation.executable == 'docker'
        assert invocation.target == 'jetbrains/qodana'
        assert invocation.options == ('--rm', '--name', 'idea-inspections')
        assert invocation.port_bindings == ('8080:8080',)
        assert invocation.volume_bindings == (
            f"{project}:/data/project",
            f"{project}/build/results:/data/results",
        )
        assert invocation.env_parameters == ()
        assert invocation.arguments == ()

    def test_update_image_follows_run(self, graph):
        assert graph.update.docker_image_name.get() == 'jetbrains/qodana'
        graph.run.docker_image_name.set('jetbrains/qodana:2021.2')
        assert graph.update.build_invocation().to_command() == [
            'docker', 'pull', 'jetbrains/qodana:2021.2'
        ]

    def test_stop_container_follows_run(self, graph):
        assert graph.stop.docker_container_name.get() == graph.run.docker_container_name.get()
        graph.run.docker_container_name.set('my-inspections')
        assert graph.stop.docker_container_name.get() == 'my-inspections'

    def test_clean_results_follow_run(self, graph, tmp_path):
        assert graph.clean.results_dir.get() == graph.run.results_dir.get()

        graph.extension.results_path.set(str(tmp_path / "out"))
        assert graph.clean.results_dir.get() == str(tmp_path / "out")

        graph.run.results_dir.set(str(tmp_path / "other"))
        assert graph.clean.results_dir.get() == str(tmp_path / "other")

    def test_executable_follows_extension(self, graph):
        graph.extension.executable.set('podman')
        assert graph.update.docker_executable.get() == 'podman'
        assert graph.run.docker_executable.get() == 'podman'
        assert graph.stop.docker_executable.get() == 'podman'

    def test_results_path_follows_project_path(self, graph, tmp_path):
        other = tmp_path / "other-project"
        graph.extension.project_path.set(str(other))
        assert graph.run.results_dir.get() == f"{other}/build/results"

    def test_extension_flags_flow_to_run(self, graph):
        graph.extension.save_report.set(True)
        graph.extension.show_report_port.set(9090)
        assert graph.run.env_parameters() == ['--save-report']
        assert graph.run.port_bindings() == ['9090:8080']

    def test_cache_path_binding(self, graph, tmp_path):
        graph.extension.cache_path.set(str(tmp_path / "cache"))
        assert graph.run.volume_bindings()[2] == f"{tmp_path.resolve()}/cache:/data/cache"

    def test_relative_cache_path_resolves_against_project(self, graph, temp_project_dir):
        graph.extension.cache_path.set(".cache")
        assert graph.run.volume_bindings()[2] == (
            f"{temp_project_dir.resolve()}/.cache:/data/cache"
        )

    def test_stop_and_clean_resolve_without_run(self, graph):
        executor = MagicMock()
        executor.execute.return_value = ExecResult(['docker', 'stop', 'idea-inspections'], 1, "")

        graph.execute('stopInspections', executor)
        graph.execute('cleanInspections', executor)

        invocation = executor.execute.call_args[0][0]
        assert invocation.action == 'stop'
        executor.remove_directory.assert_not_called()


class TestTaskGraphExecution:
    """Test cases for ordering and conditional execution."""

    def test_run_depends_on_update(self, graph):
        assert graph.run.depends_on == [graph.update]
        assert graph.stop.depends_on == []
        assert graph.clean.depends_on == []

    def test_execution_plan(self, graph):
        plan = graph.execution_plan('runInspections')
        assert [task.name for task in plan] == ['updateInspections', 'runInspections']

    def test_unknown_task(self, graph):
        with pytest.raises(UnknownTaskError, match="nope"):
            graph.execution_plan('nope')

    def test_update_runs_before_run(self, graph, mock_executor):
        outcomes = graph.execute('runInspections', mock_executor)

        actions = [call[0][0].action for call in mock_executor.execute.call_args_list]
        assert actions == ['pull', 'run']
        assert [outcome.skipped for outcome in outcomes] == [False, False]

    def test_auto_update_disabled_skips_update(self, graph, mock_executor):
        graph.extension.auto_update.set(False)

        outcomes = graph.execute('runInspections', mock_executor)

        actions = [call[0][0].action for call in mock_executor.execute.call_args_list]
        assert actions == ['run']
        assert outcomes[0].task == 'updateInspections'
        assert outcomes[0].skipped is True
        # The edge is still there
        assert graph.run.depends_on == [graph.update]

    def test_auto_update_predicate_evaluated_at_execution(self, graph, mock_executor):
        assert graph.update.should_run() is True
        graph.extension.auto_update.set(False)
        assert graph.update.should_run() is False

    def test_failed_update_aborts_run(self, graph):
        executor = MagicMock()
        executor.execute.return_value = ExecResult(['docker', 'pull', 'jetbrains/qodana'], 1, "denied")

        with pytest.raises(ProcessFailure):
            graph.execute('runInspections', executor)

        assert executor.execute.call_count == 1

    def test_no_retries(self, graph):
        executor = MagicMock()
        executor.execute.return_value = ExecResult(['docker', 'run'], 2, "")
        graph.extension.auto_update.set(False)

        with pytest.raises(ProcessFailure):
            graph.execute('runInspections', executor)

        assert executor.execute.call_count == 1

    def test_clean_removes_results(self, graph, temp_project_dir, mock_executor):
        results = temp_project_dir / "build" / "results"
        results.mkdir(parents=True)

        graph.execute('cleanInspections', mock_executor)

        mock_executor.remove_directory.assert_called_once()
        removed = mock_executor.remove_directory.call_args[0][0]
        assert removed.resolve() == results.resolve()


def test_create_task_graph_defaults_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    graph = create_task_graph()
    assert isinstance(graph, TaskGraph)
    assert graph.extension.project_path.get() == str(tmp_path.resolve())


def test_clean_and_run_agree_on_relative_results_dir(graph, temp_project_dir, mock_executor, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    results = temp_project_dir / "qodana-out"
    results.mkdir()
    graph.run.results_dir.set("qodana-out")

    assert f"{results.resolve()}:/data/results" in graph.run.volume_bindings()
    graph.execute('cleanInspections', mock_executor)

    mock_executor.remove_directory.assert_called_once_with(results.resolve())


def test_stop_with_unlaunchable_executable_does_not_fail(graph, tmp_path):
    graph.extension.executable.set(str(tmp_path))

    outcomes = graph.execute('stopInspections', ProcessExecutor())

    assert outcomes[0].exit_code == 126
