"""Shared fixtures for unvim tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def make_binary(tmp_path: Path) -> Callable[[str], str]:
    """Create an empty executable-looking file under tmp_path.

    Returns a factory taking a relative path and returning the absolute
    path string of the created file.
    """

    def _make(relative: str) -> str:
        target = tmp_path / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text("")
        return str(target)

    return _make


@pytest.fixture
def unity_project(tmp_path: Path) -> Path:
    """Create a minimal Unity project with one script and one texture."""
    scripts = tmp_path / "project" / "Assets" / "Scripts"
    scripts.mkdir(parents=True)
    (scripts / "Player.cs").write_text("public class Player {}\n")
    (scripts / "Icon.png").write_bytes(b"\x89PNG")
    return tmp_path / "project"
