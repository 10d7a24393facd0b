"""Display names for command lines, used as log-line prefixes."""

import re

_WHITESPACE = re.compile(r"\s")


def command_name(command: str) -> str:
    """Return the short name of the program a command line invokes.

    Takes the token before the first whitespace character and returns its
    final path segment. The result is only used to label log output.

    Example:
        >>> command_name("/usr/bin/tar -czf x")
        'tar'
        >>> command_name("ls")
        'ls'
    """
    match = _WHITESPACE.search(command)
    if match is not None:
        command = command[: match.start()]
    return command.rstrip("/").rsplit("/", 1)[-1]
