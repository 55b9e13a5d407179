"""Static table of places Neovim is commonly installed, per platform.

Each ``CandidateProfile`` lists absolute binary paths for one operating
system. Windows installs live under per-user or per-machine folders, so
those entries are expressed as an environment variable plus a suffix and
expanded at lookup time. The resulting list feeds ``PathScanner``.

Platform Notes:
    macOS Homebrew installs to ``/opt/homebrew/bin`` on Apple Silicon and
    ``/usr/local/bin`` on Intel. Linux distributions use ``/usr/bin``;
    snaps and source builds land in ``/snap/bin`` and ``/usr/local/bin``.
    Windows MSI installs go to ``%ProgramFiles%\\Neovim``.
"""

from __future__ import annotations

import os
import platform
from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CandidateProfile:
    """Candidate Neovim binary locations for one platform.

    Attributes:
        platform: Target platform ("macos", "linux" or "windows").
        paths: Absolute candidate paths, in probe order.
        env_paths: ``(ENV_VAR, suffix)`` pairs expanded at lookup time.
    """

    platform: str
    paths: tuple[str, ...] = ()
    env_paths: tuple[tuple[str, str], ...] = field(default_factory=tuple)


def _build_profiles() -> list[CandidateProfile]:
    return [
        CandidateProfile(
            platform="macos",
            paths=(
                "/opt/homebrew/bin/nvim",
                "/usr/local/bin/nvim",
            ),
        ),
        CandidateProfile(
            platform="linux",
            paths=(
                "/usr/bin/nvim",
                "/usr/local/bin/nvim",
                "/snap/bin/nvim",
            ),
        ),
        CandidateProfile(
            platform="windows",
            env_paths=(
                ("ProgramFiles", "/Neovim/bin/nvim.exe"),
                ("LOCALAPPDATA", "/Programs/Neovim/bin/nvim.exe"),
            ),
        ),
    ]


CANDIDATE_PROFILES: list[CandidateProfile] = _build_profiles()


def current_platform(system: str | None = None) -> str:
    """Return the platform identifier used by ``CandidateProfile``."""
    system = (system if system is not None else platform.system()).lower()
    if system == "darwin":
        return "macos"
    return "windows" if system == "windows" else "linux"


def platform_candidates(
    system: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> list[str]:
    """Build the candidate path list for a platform.

    Args:
        system: Override ``platform.system()`` (for testing).
        environ: Override ``os.environ`` (for testing).

    Returns:
        Ordered, de-duplicated absolute paths. Env-derived entries whose
        variable is unset are skipped.
    """
    env = environ if environ is not None else os.environ
    target = current_platform(system)
    candidates: list[str] = []
    for profile in CANDIDATE_PROFILES:
        if profile.platform != target:
            continue
        candidates.extend(profile.paths)
        for var, suffix in profile.env_paths:
            base = env.get(var)
            if not base:
                continue
            candidates.append(base.replace("\\", "/") + suffix)
    return list(dict.fromkeys(candidates))
