"""Shared utility functions for CLI commands."""

import click

from ..core.executor import DryRunExecutor, ProcessExecutor
from ..services.exceptions import ConfigurationError, ProcessFailure


def execute_task(ctx, name):
    """Execute a task and its dependencies, reporting errors the CLI way."""
    graph = ctx.obj['graph']
    dry_run = ctx.obj['dry_run']
    executor = DryRunExecutor() if dry_run else ProcessExecutor()

    try:
        outcomes = graph.execute(name, executor)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
    except ProcessFailure as e:
        click.echo(f"Error: {e}", err=True)
        if e.output.strip():
            click.echo(e.output.strip(), err=True)
        ctx.exit(1)
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    for outcome in outcomes:
        if outcome.skipped:
            click.echo(f"> {outcome.task} SKIPPED")
            continue
        click.echo(f"> {outcome.task}")
        if dry_run and outcome.command:
            click.echo(" ".join(outcome.command))
        if outcome.output.strip():
            click.echo(outcome.output.strip())

    if dry_run:
        for path in executor.removed:
            click.echo(f"rm -r {path}")

    return outcomes
