import click

from backup_cli.cli.commands.run import run_cmd
from backup_cli.cli.commands.utility import utility_cmd
from backup_cli.cli.output import user_output
from backup_cli.core.context import create_context
from backup_cli.integrations.logger.real import configure_logging

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="backup-cli")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Run system utilities the way backup jobs do."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ValueError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from e
        configure_logging(ctx.obj.config.log_level)


cli.add_command(run_cmd)
cli.add_command(utility_cmd)


def main() -> None:
    """CLI entry point used by the `backup-cli` console script."""
    cli()
