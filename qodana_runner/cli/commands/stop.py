"""Stop command for Qodana Runner."""

import click

from ...core.constants import STOP_INSPECTIONS_TASK_NAME
from ..util import execute_task


@click.command()
@click.pass_context
def stop(ctx):
    """Stop the Qodana Inspections Docker container"""
    execute_task(ctx, STOP_INSPECTIONS_TASK_NAME)
