"""Run command for Qodana Runner."""

import click

from ...core.constants import RUN_INSPECTIONS_TASK_NAME
from ..util import execute_task


@click.command()
@click.option('--changes', is_flag=True, help='Inspect only changed files')
@click.option('--jvm-param', 'jvm_params', multiple=True,
              help='JVM parameter for the IDE inside the container (repeatable)')
@click.option('--profile', 'profile_path', default=None,
              help='Inspection profile XML to mount into the container')
@click.option('--disabled-plugins', 'disabled_plugins_path', default=None,
              help='disabled_plugins.txt to mount into the container')
@click.option('--image', 'image_name', default=None, help='Inspections image name')
@click.option('--name', 'container_name', default=None, help='Container name')
@click.pass_context
def run(ctx, changes, jvm_params, profile_path, disabled_plugins_path, image_name, container_name):
    """Start Qodana Inspections in a Docker container"""
    task = ctx.obj['graph'].run

    if changes:
        task.changes.set(True)
    if jvm_params:
        task.jvm_parameters.set(list(jvm_params))
    if profile_path:
        task.profile_path.set(profile_path)
    if disabled_plugins_path:
        task.disabled_plugins_path.set(disabled_plugins_path)
    if image_name:
        task.docker_image_name.set(image_name)
    if container_name:
        task.docker_container_name.set(container_name)

    execute_task(ctx, RUN_INSPECTIONS_TASK_NAME)
