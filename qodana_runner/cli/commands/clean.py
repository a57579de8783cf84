"""Clean command for Qodana Runner."""

import click

from ...core.constants import CLEAN_INSPECTIONS_TASK_NAME
from ..util import execute_task


@click.command()
@click.pass_context
def clean(ctx):
    """Clean up the Qodana Inspections output directory"""
    execute_task(ctx, CLEAN_INSPECTIONS_TASK_NAME)
