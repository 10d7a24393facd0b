"""Tests for FakeCommandRunner test infrastructure."""

import pytest

from backup_cli.core.errors import NonZeroExit, SystemCallError
from backup_cli.core.runner.fake import FakeCommandRunner


def test_fake_runner_returns_configured_output() -> None:
    runner = FakeCommandRunner(outputs={"tar --version": "tar 1.34"})

    assert runner.run("tar --version") == "tar 1.34"
    assert runner.run("gzip --version") == ""
    assert runner.commands == ["tar --version", "gzip --version"]


def test_fake_runner_raises_configured_failure() -> None:
    failure = NonZeroExit(exit_status=2, stdout="", stderr="no space left")
    runner = FakeCommandRunner(failures={"tar -czf x": failure})

    with pytest.raises(SystemCallError) as exc_info:
        runner.run("tar -czf x")

    assert exc_info.value.failure is failure
    assert exc_info.value.exit_status == 2
    assert runner.commands == ["tar -czf x"]
