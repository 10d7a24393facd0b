"""Application context with dependency injection."""

from dataclasses import dataclass

from backup_cli.core.config_store import BackupConfig, ConfigStore, FilesystemConfigStore
from backup_cli.core.runner.abc import CommandRunner
from backup_cli.core.runner.real import RealCommandRunner
from backup_cli.core.shell import RealShell, Shell
from backup_cli.core.utility import UtilityPathCache, UtilityResolver
from backup_cli.integrations.logger.abc import Logger
from backup_cli.integrations.logger.real import RealLogger


@dataclass(frozen=True)
class BackupContext:
    """Immutable context holding all dependencies for running utilities.

    Created at CLI entry point and threaded through the application.
    """

    logger: Logger
    shell: Shell
    runner: CommandRunner
    resolver: UtilityResolver
    config: BackupConfig

    @staticmethod
    def for_test(
        logger: Logger | None = None,
        shell: Shell | None = None,
        runner: CommandRunner | None = None,
        config: BackupConfig | None = None,
    ) -> "BackupContext":
        """Create a context for tests, defaulting every dependency to a fake.

        Args:
            logger: Logger to record output. Defaults to an empty FakeLogger.
            shell: Shell for utility lookups. Defaults to a FakeShell with no
                installed tools.
            runner: Command runner. Defaults to a FakeCommandRunner with no
                configured outputs.
            config: Config to use. Defaults to BackupConfig().
        """
        from backup_cli.core.runner.fake import FakeCommandRunner
        from backup_cli.integrations.logger.fake import FakeLogger
        from tests.fakes.shell import FakeShell

        logger = logger if logger is not None else FakeLogger()
        shell = shell if shell is not None else FakeShell()
        config = config if config is not None else BackupConfig()
        return BackupContext(
            logger=logger,
            shell=shell,
            runner=runner if runner is not None else FakeCommandRunner(),
            resolver=UtilityResolver(shell, UtilityPathCache(config.utility_paths)),
            config=config,
        )


def load_config(config_store: ConfigStore) -> BackupConfig:
    """Load config from the store, falling back to defaults when none exists."""
    if not config_store.exists():
        return BackupConfig()
    return config_store.load()


def create_context(config_store: ConfigStore | None = None) -> BackupContext:
    """Create production context with real implementations.

    Called once at CLI entry point.

    Raises:
        ValueError: If the config file is malformed
    """
    config = load_config(config_store if config_store is not None else FilesystemConfigStore())
    logger = RealLogger()
    shell = RealShell()
    return BackupContext(
        logger=logger,
        shell=shell,
        runner=RealCommandRunner(logger),
        resolver=UtilityResolver(shell, UtilityPathCache(config.utility_paths)),
        config=config,
    )
