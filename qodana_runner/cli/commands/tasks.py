"""Tasks command for Qodana Runner."""

import click
from rich.console import Console
from rich.table import Table


@click.command()
@click.pass_context
def tasks(ctx):
    """List the inspection tasks and how they depend on each other"""
    console = Console()
    graph = ctx.obj['graph']

    table = Table(title="Qodana tasks")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Group", style="green")
    table.add_column("Depends on", style="white")
    table.add_column("Description", style="white")

    for task in graph.tasks():
        depends_on = ", ".join(dependency.name for dependency in task.depends_on)
        table.add_row(task.name, task.group, depends_on or "-", task.description)

    console.print(table)
