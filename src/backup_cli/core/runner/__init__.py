"""Command runner subpackage.

Executes shell command lines, logs their output and classifies failures.
"""

from backup_cli.core.runner.abc import CommandRunner, ProcessResult
from backup_cli.core.runner.real import RealCommandRunner, platform_identifier

__all__ = [
    "CommandRunner",
    "ProcessResult",
    "RealCommandRunner",
    "platform_identifier",
]
