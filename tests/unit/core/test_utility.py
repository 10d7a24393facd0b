"""Tests for UtilityResolver and its path cache."""

import threading

import pytest

from backup_cli.core.errors import UtilityNotFoundError
from backup_cli.core.utility import UtilityPathCache, UtilityResolver
from tests.fakes.shell import FakeShell


def test_utility_returns_path_from_search() -> None:
    shell = FakeShell(installed_tools={"tar": "/usr/bin/tar"})
    resolver = UtilityResolver(shell)

    assert resolver.utility("tar") == "/usr/bin/tar"


def test_utility_trims_name() -> None:
    shell = FakeShell(installed_tools={"tar": "/usr/bin/tar"})
    resolver = UtilityResolver(shell)

    assert resolver.utility("  tar\n") == "/usr/bin/tar"
    assert shell.lookup_calls == ["tar"]


def test_utility_trims_trailing_whitespace_from_result() -> None:
    shell = FakeShell(installed_tools={"gpg": "/usr/bin/gpg\n"})
    resolver = UtilityResolver(shell)

    assert resolver.utility("gpg") == "/usr/bin/gpg"


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_utility_empty_name_raises(name: str) -> None:
    shell = FakeShell()
    resolver = UtilityResolver(shell)

    with pytest.raises(UtilityNotFoundError, match="Utility Name Empty"):
        resolver.utility(name)

    assert shell.lookup_calls == []


def test_utility_second_call_hits_cache() -> None:
    shell = FakeShell(installed_tools={"rsync": "/usr/bin/rsync"})
    resolver = UtilityResolver(shell)

    first = resolver.utility("rsync")
    second = resolver.utility("rsync")

    assert first == second == "/usr/bin/rsync"
    assert shell.lookup_calls == ["rsync"]


def test_utility_not_found_raises() -> None:
    shell = FakeShell()
    resolver = UtilityResolver(shell)

    with pytest.raises(UtilityNotFoundError) as exc_info:
        resolver.utility("definitely-not-a-real-binary-xyz")

    message = str(exc_info.value)
    assert "Could not locate 'definitely-not-a-real-binary-xyz'." in message
    assert "Make sure the specified utility is installed" in message
    assert "$PATH" in message
    assert exc_info.value.name == "definitely-not-a-real-binary-xyz"


def test_utility_not_found_is_not_cached() -> None:
    shell = FakeShell()
    resolver = UtilityResolver(shell)

    for _ in range(2):
        with pytest.raises(UtilityNotFoundError):
            resolver.utility("gtar")

    assert shell.lookup_calls == ["gtar", "gtar"]
    assert "gtar" not in resolver.cache


def test_utility_uses_preseeded_cache_without_search() -> None:
    shell = FakeShell(installed_tools={"tar": "/usr/bin/tar"})
    resolver = UtilityResolver(shell, UtilityPathCache({"tar": "/usr/local/bin/gtar"}))

    assert resolver.utility("tar") == "/usr/local/bin/gtar"
    assert shell.lookup_calls == []


def test_resolvers_do_not_share_caches() -> None:
    first = UtilityResolver(FakeShell(installed_tools={"tar": "/usr/bin/tar"}))
    second = UtilityResolver(FakeShell(installed_tools={"tar": "/opt/bin/tar"}))

    assert first.utility("tar") == "/usr/bin/tar"
    assert second.utility("tar") == "/opt/bin/tar"


def test_cache_store_keeps_first_value() -> None:
    cache = UtilityPathCache()

    assert cache.store("tar", "/usr/bin/tar") == "/usr/bin/tar"
    assert cache.store("tar", "/opt/bin/tar") == "/usr/bin/tar"
    assert cache.get("tar") == "/usr/bin/tar"
    assert len(cache) == 1


def test_concurrent_callers_search_once() -> None:
    shell = FakeShell(installed_tools={"tar": "/usr/bin/tar"})
    resolver = UtilityResolver(shell)
    results: list[str] = []
    barrier = threading.Barrier(8)

    def resolve() -> None:
        barrier.wait()
        results.append(resolver.utility("tar"))

    threads = [threading.Thread(target=resolve) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert results == ["/usr/bin/tar"] * 8
    assert shell.lookup_calls == ["tar"]
