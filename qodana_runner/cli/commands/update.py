"""Update command for Qodana Runner."""

import click

from ...core.constants import UPDATE_INSPECTIONS_TASK_NAME
from ..util import execute_task


@click.command()
@click.pass_context
def update(ctx):
    """Pull the latest Qodana Inspections Docker image"""
    execute_task(ctx, UPDATE_INSPECTIONS_TASK_NAME)
