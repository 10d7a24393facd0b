"""Run system utilities and resolve their paths for backup tooling."""

from backup_cli.core.command_name import command_name
from backup_cli.core.errors import (
    BackupCliError,
    NonZeroExit,
    SpawnFailure,
    SystemCallError,
    UtilityNotFoundError,
)
from backup_cli.core.runner import CommandRunner, RealCommandRunner
from backup_cli.core.utility import UtilityPathCache, UtilityResolver

__version__ = "0.1.0"

__all__ = [
    # Command execution
    "CommandRunner",
    "RealCommandRunner",
    "command_name",
    # Utility resolution
    "UtilityPathCache",
    "UtilityResolver",
    # Errors
    "BackupCliError",
    "NonZeroExit",
    "SpawnFailure",
    "SystemCallError",
    "UtilityNotFoundError",
]
