"""Existence probing for candidate Neovim binaries."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


class PathScanner:
    """Filters candidate paths down to the regular files present on disk.

    Usage::

        scanner = PathScanner()
        found = scanner.scan(["/usr/bin/nvim", "/snap/bin/nvim"])
    """

    def _is_file(self, candidate: str) -> bool:
        """Probe one path; any OS failure counts as absent."""
        try:
            return Path(candidate).is_file()
        except (OSError, ValueError):
            logger.debug("Cannot probe candidate: %s", candidate, exc_info=True)
            return False

    def scan(self, candidates: Sequence[str]) -> list[str]:
        """Return the candidates that exist as regular files.

        Args:
            candidates: Absolute paths, assumed distinct.

        Returns:
            The existing subset, in input order.
        """
        found = [c for c in candidates if self._is_file(c)]
        logger.debug("Found %d of %d candidate paths", len(found), len(candidates))
        return found
