"""Production command runner using subprocess."""

import logging
import platform
import subprocess

from backup_cli.core.command_name import command_name
from backup_cli.core.errors import NonZeroExit, SpawnFailure, SystemCallError
from backup_cli.core.runner.abc import CommandRunner, ProcessResult
from backup_cli.integrations.logger.abc import Logger

logger = logging.getLogger(__name__)


def platform_identifier() -> str:
    """Describe the host platform for failure diagnostics."""
    return platform.platform()


class RealCommandRunner(CommandRunner):
    """Runs commands with subprocess.run through the system shell.

    stdin is connected to an empty pipe that is closed as soon as the process
    starts, so commands that read input see EOF instead of blocking. stdout
    and stderr are drained together by subprocess.run before the exit status
    is read, so a child filling both pipes cannot deadlock the caller.
    """

    def __init__(self, logger: Logger) -> None:
        self._logger = logger

    def run(self, command: str) -> str:
        name = command_name(command)
        self._logger.message(f"Running system utility '{name}'...")

        result = self._execute(command)
        logger.debug("'%s' exited with status %d", name, result.exit_status)

        if result.exit_status != 0:
            raise SystemCallError(
                _format_exit_failure(name, command, result),
                command=command,
                failure=NonZeroExit(
                    exit_status=result.exit_status,
                    stdout=result.stdout,
                    stderr=result.stderr,
                ),
            )

        if result.stdout:
            for line in result.stdout.splitlines():
                self._logger.message(f"{name}:STDOUT: {line}")

        if result.stderr:
            for line in result.stderr.splitlines():
                self._logger.warn(f"{name}:STDERR: {line}")

        return result.stdout

    def _execute(self, command: str) -> ProcessResult:
        try:
            completed = subprocess.run(
                command,
                shell=True,
                input="",
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=False,
            )
        except (OSError, ValueError, subprocess.SubprocessError) as e:
            error_msg = f"Failed to execute system command on {platform_identifier()}"
            error_msg += f"\nCommand was: {command}"
            error_msg += f"\nReason: {type(e).__name__}: {e}"
            raise SystemCallError(error_msg, command=command, failure=SpawnFailure(cause=e)) from e

        return ProcessResult(
            stdout=completed.stdout.strip(),
            stderr=completed.stderr.strip(),
            exit_status=completed.returncode,
        )


def _format_exit_failure(name: str, command: str, result: ProcessResult) -> str:
    stdout = f"\n{result.stdout}" if result.stdout else "None"
    stderr = f"\n{result.stderr}" if result.stderr else "None"
    return (
        f"'{name}' Failed on {platform_identifier()}\n"
        f"The following information should help to determine the problem:\n"
        f"Command was: {command}\n"
        f"Exit Status: {result.exit_status}\n"
        f"STDOUT Messages: {stdout}\n"
        f"STDERR Messages: {stderr}"
    )
