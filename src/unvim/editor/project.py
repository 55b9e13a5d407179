"""Boundary to the host's IDE project-file generator.

The editor integration does not write solution or project files itself;
the host supplies a ``ProjectGenerator`` that does.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ProjectGenerator(ABC):
    """Generates and refreshes IDE project files for the host project."""

    @abstractmethod
    def sync(self) -> None:
        """Regenerate all project files."""

    @abstractmethod
    def sync_if_needed(
        self, changed_files: list[str], imported_files: list[str],
    ) -> None:
        """Regenerate project files affected by the given asset changes."""

    @abstractmethod
    def solution_exists(self) -> bool:
        """Return True if the solution file is already on disk."""

    def reset_package_info_cache(self) -> None:
        """Forget cached package metadata before a sync. Optional."""
