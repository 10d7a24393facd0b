"""Fake CommandRunner implementation for testing.

FakeCommandRunner returns canned output for known command lines and records
every command it was asked to run.
"""

from backup_cli.core.errors import NonZeroExit, SystemCallError
from backup_cli.core.runner.abc import CommandRunner


class FakeCommandRunner(CommandRunner):
    """In-memory fake implementation that never spawns processes.

    Constructor Injection:
    - Command outputs and failures are provided via constructor parameters
    - Only the call log changes after construction

    Examples:
        >>> runner = FakeCommandRunner(outputs={"tar --version": "tar 1.34"})
        >>> runner.run("tar --version")
        'tar 1.34'
        >>> runner.commands
        ['tar --version']
    """

    def __init__(
        self,
        *,
        outputs: dict[str, str] | None = None,
        failures: dict[str, NonZeroExit] | None = None,
    ) -> None:
        """Initialize fake with predetermined results.

        Args:
            outputs: Mapping of command line to stdout returned by run().
                Commands not listed return an empty string.
            failures: Mapping of command line to the NonZeroExit that run()
                raises for it as a SystemCallError
        """
        self._outputs = outputs or {}
        self._failures = failures or {}
        self._commands: list[str] = []

    def run(self, command: str) -> str:
        self._commands.append(command)
        if command in self._failures:
            failure = self._failures[command]
            raise SystemCallError(
                f"Command was: {command}\nExit Status: {failure.exit_status}",
                command=command,
                failure=failure,
            )
        return self._outputs.get(command, "")

    @property
    def commands(self) -> list[str]:
        """Get the command lines passed to run(), in order.

        This property is for test assertions only.
        """
        return self._commands.copy()
