"""Shared fixtures for CLI tests.

Commands look up the process-wide registry; ``use_registry`` swaps in a
registry over temporary candidate paths for the duration of a test.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence

import pytest
from click.testing import CliRunner

from unvim.cli import installations_cmd, open_cmd, resolve_cmd
from unvim.discovery import installation_registry as registry_module
from unvim.discovery.installation_registry import InstallationRegistry, default_registry


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def use_registry(
    monkeypatch: pytest.MonkeyPatch,
) -> Callable[[Sequence[str]], InstallationRegistry]:
    """Point every command at a registry over the given candidates."""

    def _use(candidates: Sequence[str]) -> InstallationRegistry:
        registry = InstallationRegistry(candidates)
        for module in (installations_cmd, open_cmd, resolve_cmd):
            monkeypatch.setattr(module, "default_registry", lambda: registry)
        return registry

    return _use


@pytest.fixture
def env_registry(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Use the real process-wide registry, seeded only from the environment.

    Platform candidates are emptied so results depend on
    ``UNVIM_EXTRA_CANDIDATES`` alone; the cached registry is rebuilt
    before and after the test.
    """
    monkeypatch.setattr(registry_module, "platform_candidates", lambda: [])
    monkeypatch.delenv("UNVIM_EXTRA_CANDIDATES", raising=False)
    default_registry.cache_clear()
    yield
    default_registry.cache_clear()
