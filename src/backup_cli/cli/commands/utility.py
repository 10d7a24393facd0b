"""Utility command implementation - prints the path of a system utility."""

import click

from backup_cli.cli.output import machine_output, render_error
from backup_cli.core.context import BackupContext
from backup_cli.core.errors import UtilityNotFoundError


@click.command("utility")
@click.argument("name")
@click.pass_obj
def utility_cmd(ctx: BackupContext, name: str) -> None:
    """Print the absolute path of utility NAME."""
    try:
        path = ctx.resolver.utility(name)
    except UtilityNotFoundError as e:
        render_error(e)
        raise SystemExit(1) from e

    machine_output(path)
