"""Error types raised by the system utility layer.

Two error kinds reach callers:

- SystemCallError: a command could not be executed, or it ran and exited
  with a non-zero status. The ``failure`` attribute tells the two apart.
- UtilityNotFoundError: a utility name was empty or is not on the search path.
"""

from dataclasses import dataclass


class BackupCliError(Exception):
    """Base class for errors raised by backup_cli."""


@dataclass(frozen=True)
class SpawnFailure:
    """The process could not be started or communicated with.

    Attributes:
        cause: The underlying exception raised by the process machinery
    """

    cause: BaseException


@dataclass(frozen=True)
class NonZeroExit:
    """The process ran to completion and returned a non-zero exit status.

    Attributes:
        exit_status: Exit status reported for the process
        stdout: Captured standard output, whitespace-trimmed
        stderr: Captured standard error, whitespace-trimmed
    """

    exit_status: int
    stdout: str
    stderr: str


class SystemCallError(BackupCliError):
    """A system command failed to execute or returned a non-zero exit status."""

    def __init__(self, message: str, *, command: str, failure: SpawnFailure | NonZeroExit) -> None:
        super().__init__(message)
        self.command = command
        self.failure = failure

    def __reduce__(self) -> tuple[object, ...]:
        return (_rebuild_system_call_error, (str(self), self.command, self.failure))

    @property
    def exit_status(self) -> int | None:
        """Exit status of the process, or None if it never ran to completion."""
        if isinstance(self.failure, NonZeroExit):
            return self.failure.exit_status
        return None

    @property
    def is_spawn_failure(self) -> bool:
        return isinstance(self.failure, SpawnFailure)


class UtilityNotFoundError(BackupCliError):
    """A utility name was empty or could not be found on the search path."""

    def __init__(self, message: str, *, name: str) -> None:
        super().__init__(message)
        self.name = name

    def __reduce__(self) -> tuple[object, ...]:
        return (_rebuild_utility_not_found_error, (str(self), self.name))


# Exception pickling only replays ``args``; these restore the keyword fields.
def _rebuild_system_call_error(
    message: str, command: str, failure: SpawnFailure | NonZeroExit
) -> SystemCallError:
    return SystemCallError(message, command=command, failure=failure)


def _rebuild_utility_not_found_error(message: str, name: str) -> UtilityNotFoundError:
    return UtilityNotFoundError(message, name=name)
