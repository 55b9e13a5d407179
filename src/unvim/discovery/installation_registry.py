"""Process-wide registry of Neovim installations.

The registry scans the platform candidate paths once, on first use, and
serves the result for the life of the process. Installations are labeled
by what distinguishes their paths: the longest common prefix of all
discovered paths is trimmed, and the remainder becomes the label suffix.

Labeling Policy:
    Two or more installations: ``"Neovim (<path minus common prefix>)"``.
    The common prefix may swallow a whole path, e.g. ``/bin/nvim`` next to
    ``/bin/nvim-old`` yields ``"Neovim ()"`` and ``"Neovim (-old)"``.

    Exactly one installation: no trimming, the label is plain ``"Neovim"``.
    The prefix of a single path is the path itself, so the suffix would
    always be empty.

Resolution:
    ``resolve()`` accepts any path whose filename is a Neovim binary name
    and always returns a record, falling back to a synthesized one. For
    other filenames it returns None so the host can skip the path.
"""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Sequence
from functools import lru_cache

from unvim.config import extra_candidates_from_env
from unvim.discovery.candidates import platform_candidates
from unvim.discovery.models import DEFAULT_NAME, Installation
from unvim.discovery.path_scanner import PathScanner

logger = logging.getLogger(__name__)

# Binary basenames this integration takes responsibility for, compared
# lowercased with whitespace removed.
SUPPORTED_FILENAMES: frozenset[str] = frozenset({"nvim", "nvim.exe"})

_SEPARATORS = re.compile(r"[\\/]")
_WHITESPACE = re.compile(r"\s+")


def editor_filename(path: str) -> str:
    """Normalize the filename component of ``path`` for allow-list checks."""
    name = _SEPARATORS.split(path)[-1]
    return _WHITESPACE.sub("", name.lower())


def is_supported_path(path: str) -> bool:
    """Check whether ``path`` names a recognized Neovim binary."""
    return editor_filename(path) in SUPPORTED_FILENAMES


def longest_common_prefix(paths: Sequence[str]) -> str:
    """Character-wise longest common prefix of ``paths``.

    Returns an empty string for an empty sequence.
    """
    if not paths:
        return ""
    first = paths[0]
    length = len(first)
    for other in paths[1:]:
        length = min(length, len(other))
        for i in range(length):
            if other[i] != first[i]:
                length = i
                break
    return first[:length]


def label_installations(paths: Sequence[str]) -> list[Installation]:
    """Attach display names to discovered paths, preserving order."""
    if len(paths) == 1:
        return [Installation(name=DEFAULT_NAME, path=paths[0])]
    prefix = longest_common_prefix(paths)
    return [
        Installation(name=f"{DEFAULT_NAME} ({path[len(prefix):]})", path=path)
        for path in paths
    ]


class InstallationRegistry:
    """Lazily discovers and serves known Neovim installations.

    Usage::

        registry = InstallationRegistry(["/usr/bin/nvim"])
        for inst in registry.list_installations():
            print(f"{inst.name}: {inst.path}")
        inst = registry.resolve("/usr/bin/nvim")

    Args:
        candidates: Paths to probe. None means the current platform's
            candidate list, read at first population.
        scanner: Existence prober (defaults to ``PathScanner``).
    """

    def __init__(
        self,
        candidates: Sequence[str] | None = None,
        scanner: PathScanner | None = None,
    ) -> None:
        self._candidates = tuple(candidates) if candidates is not None else None
        self._scanner = scanner if scanner is not None else PathScanner()
        self._installations: list[Installation] | None = None
        self._lock = threading.Lock()

    @property
    def is_populated(self) -> bool:
        return self._installations is not None

    def _populate(self) -> list[Installation]:
        installations = self._installations
        if installations is not None:
            return installations
        with self._lock:
            if self._installations is None:
                candidates = (
                    self._candidates
                    if self._candidates is not None
                    else tuple(platform_candidates())
                )
                found = self._scanner.scan(candidates)
                self._installations = label_installations(found)
                logger.debug(
                    "Discovered %d Neovim installation(s)", len(self._installations),
                )
            return self._installations

    def list_installations(self) -> list[Installation]:
        """Return all discovered installations (possibly empty).

        The first call triggers the scan; later calls reuse its result.
        Callers receive a new list each time.
        """
        return list(self._populate())

    def resolve(self, path: str) -> Installation | None:
        """Resolve a chosen editor path to an installation.

        Args:
            path: Editor path as stored by the host.

        Returns:
            None when the filename is not a Neovim binary. Otherwise the
            discovered record with exactly this path, or a synthesized
            ``Installation("Neovim", path)`` when there is none.
        """
        if not is_supported_path(path):
            logger.debug("Not a Neovim binary: %s", path)
            return None

        installations = self._populate()
        for installation in installations:
            if installation.path == path:
                return installation
        return Installation.synthesize(path)

    def invalidate(self) -> None:
        """Drop the cached scan so the next query probes the disk again."""
        with self._lock:
            self._installations = None


@lru_cache(maxsize=1)
def default_registry() -> InstallationRegistry:
    """Return the process-wide registry.

    Probes the current platform's candidates plus any paths listed in
    ``UNVIM_EXTRA_CANDIDATES``.
    """
    candidates = list(
        dict.fromkeys([*platform_candidates(), *extra_candidates_from_env()])
    )
    return InstallationRegistry(candidates)
