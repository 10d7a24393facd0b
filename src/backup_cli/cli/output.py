"""Output utilities for CLI commands with clear intent.

user_output() goes to stderr for humans, machine_output() goes to stdout so
results can be captured by shell scripts.
"""

import click
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from backup_cli.core.errors import BackupCliError, SystemCallError, UtilityNotFoundError


def user_output(message: str) -> None:
    click.echo(message, err=True)


def machine_output(message: str) -> None:
    click.echo(message)


def format_error_panel(error: BackupCliError) -> Panel:
    """Format a failed utility call as a red panel.

    Args:
        error: Error raised by the runner or resolver

    Returns:
        Rich Panel with the error message and, for exit failures, the status
    """
    if isinstance(error, SystemCallError):
        title = "System Call Failed" if error.exit_status is not None else "System Call Error"
    elif isinstance(error, UtilityNotFoundError):
        title = "Utility Not Found"
    else:
        title = "Error"

    lines = [Text(line, style="red") for line in str(error).splitlines()]
    return Panel(Text("\n").join(lines), title=title, border_style="red", padding=(1, 2))


def render_error(error: BackupCliError, console: Console | None = None) -> None:
    """Print an error panel to stderr."""
    if console is None:
        console = Console(stderr=True)
    console.print(format_error_panel(error))
