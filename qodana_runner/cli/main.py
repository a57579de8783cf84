"""Main CLI entry point for Qodana Runner."""

import logging
from pathlib import Path

import click

from ..core.graph import create_task_graph
from ..services.exceptions import ConfigurationError
from ..utils.config_manager import ConfigManager
from .commands.clean import clean
from .commands.run import run
from .commands.stop import stop
from .commands.tasks import tasks
from .commands.update import update


@click.group()
@click.option('--project-dir', type=click.Path(file_okay=False, path_type=Path),
              default=None, help='Project directory (default: current directory)')
@click.option('--config', 'config_file', type=click.Path(dir_okay=False, path_type=Path),
              default=None, help='Configuration file (default: qodana-runner.yaml)')
@click.option('--executable', default=None, help='Container runtime executable')
@click.option('--results-path', default=None, help='Directory for inspection results')
@click.option('--cache-path', default=None, help='Directory for the inspections cache')
@click.option('--save-report/--no-save-report', default=None, help='Save the HTML report')
@click.option('--show-report/--no-show-report', default=None, help='Serve the HTML report')
@click.option('--port', 'show_report_port', type=click.IntRange(1, 65535), default=None,
              help='Host port for the report server')
@click.option('--auto-update/--no-auto-update', default=None,
              help='Pull the image before running inspections')
@click.option('--dry-run', is_flag=True, help='Print commands instead of running them')
@click.option('--verbose', '-v', is_flag=True, help='Enable info logging')
@click.pass_context
def cli(ctx, project_dir, config_file, executable, results_path, cache_path,
        save_report, show_report, show_report_port, auto_update, dry_run, verbose):
    """Qodana Runner - Run Qodana inspections in a Docker container"""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    project_dir = (project_dir or Path.cwd()).resolve()
    graph = create_task_graph(project_dir)

    try:
        manager = ConfigManager(project_dir, config_file)
        ConfigManager.apply(manager.load_settings(), graph)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    overrides = {
        'executable': executable,
        'results_path': results_path,
        'cache_path': cache_path,
        'save_report': save_report,
        'show_report': show_report,
        'show_report_port': show_report_port,
        'auto_update': auto_update,
    }
    for name, value in overrides.items():
        if value is not None:
            getattr(graph.extension, name).set(value)

    ctx.obj = {'graph': graph, 'dry_run': dry_run}


# Register commands
cli.add_command(update)
cli.add_command(run)
cli.add_command(stop)
cli.add_command(clean)
cli.add_command(tasks)


if __name__ == '__main__':
    cli()
