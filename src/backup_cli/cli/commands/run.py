"""Run command implementation - executes a system command line."""

import click

from backup_cli.cli.output import machine_output, render_error
from backup_cli.core.context import BackupContext
from backup_cli.core.errors import SystemCallError


@click.command("run")
@click.argument("command")
@click.pass_obj
def run_cmd(ctx: BackupContext, command: str) -> None:
    """Run COMMAND through the shell and print its output.

    COMMAND is passed to the shell as-is; quote it as one argument.
    """
    try:
        output = ctx.runner.run(command)
    except SystemCallError as e:
        render_error(e)
        raise SystemExit(1) from e

    if output:
        machine_output(output)
