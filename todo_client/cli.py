#!/usr/bin/env python3
"""
CLI interface for the todo task API
"""
import sys

import click
from tabulate import tabulate

from todo_app.constants import TaskStatus
from .api_client import ApiError, TodoApiClient
from .config import Config


class ClientContext:
    """Shared context for CLI commands"""

    def __init__(self, data_dir=None, server=None, api=None):
        self.config = Config(config_dir=data_dir)
        self.server = server or self.config.server_url
        self.api = api or TodoApiClient(self.server, timeout=self.config.timeout)


pass_context = click.make_pass_decorator(ClientContext)


def _fail(error: ApiError):
    click.echo(f"Error: {error.message}", err=True)
    sys.exit(1)


@click.group()
@click.option('--data-dir', default=None,
              help='Data directory for client files (default: ~/.todo-client)')
@click.option('--server', default=None, help='API server URL (default: from config)')
@click.pass_context
def cli(ctx, data_dir, server):
    """Todo Task Client"""
    if ctx.obj is None:
        ctx.obj = ClientContext(data_dir=data_dir, server=server)


@cli.command(name='list')
@pass_context
def list_tasks(ctx):
    """List tasks, highest priority first"""
    try:
        tasks = ctx.api.list_tasks()
    except ApiError as e:
        _fail(e)

    if not tasks:
        click.echo("No tasks.")
        return

    rows = [[t['id'], t['name'], t['priority'], t['status']] for t in tasks]
    click.echo(tabulate(rows, headers=['ID', 'Name', 'Priority', 'Status']))


@cli.command()
@click.argument('task_id', type=int)
@pass_context
def show(ctx, task_id):
    """Show a single task"""
    try:
        task = ctx.api.get_task(task_id)
    except ApiError as e:
        _fail(e)

    click.echo(tabulate([[k, task[k]] for k in ('id', 'name', 'priority', 'status')]))


@cli.command()
@click.argument('name')
@click.option('--priority', '-p', type=click.IntRange(1, 10), required=True,
              help='1 (highest) to 10')
@click.option('--status', type=click.Choice(TaskStatus.all()), default=None,
              help='Initial status (default: NotStarted)')
@pass_context
def add(ctx, name, priority, status):
    """Add a task"""
    try:
        task = ctx.api.add_task(name, priority, status)
    except ApiError as e:
        _fail(e)

    click.echo(f"✓ Created task {task['id']}: {task['name']}")


@cli.command()
@click.argument('task_id', type=int)
@click.option('--name', default=None, help='New name')
@click.option('--priority', '-p', type=click.IntRange(1, 10), default=None, help='New priority')
@click.option('--status', type=click.Choice(TaskStatus.all()), default=None, help='New status')
@pass_context
def update(ctx, task_id, name, priority, status):
    """Change a task's name, priority or status"""
    try:
        task = ctx.api.get_task(task_id)
        if name is not None:
            task['name'] = name
        if priority is not None:
            task['priority'] = priority
        if status is not None:
            task['status'] = status
        ctx.api.update_task(task)
    except ApiError as e:
        _fail(e)

    click.echo(f"✓ Updated task {task_id}")


@cli.command()
@click.argument('task_id', type=int)
@pass_context
def delete(ctx, task_id):
    """Delete a completed task"""
    try:
        ctx.api.delete_task(task_id)
    except ApiError as e:
        _fail(e)

    click.echo(f"✓ Deleted task {task_id}")


@cli.command()
@click.option('--server', 'server_url', default=None, help='Save this API server URL')
@pass_context
def config(ctx, server_url):
    """Show or change client configuration"""
    if server_url:
        ctx.config.server_url = server_url
        click.echo(f"✓ Server set to {ctx.config.server_url}")
        return

    click.echo(f"  Server: {ctx.config.server_url}")
    click.echo(f"  Config file: {ctx.config.config_file}")


if __name__ == '__main__':
    cli()
