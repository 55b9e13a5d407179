"""Data models for the discovery module.

Contains the record type produced by ``InstallationRegistry``: one
Neovim binary paired with the name shown in Unity's External Tools list.
"""

from __future__ import annotations

from dataclasses import dataclass

# Display name used when no distinguishing label can be derived.
DEFAULT_NAME = "Neovim"


@dataclass(frozen=True)
class Installation:
    """A discovered (or user-specified) Neovim binary.

    Attributes:
        name: Human-readable display name (e.g., "Neovim (-nightly)").
        path: Absolute path to the binary. Identity key for matching.
    """

    name: str
    path: str

    @classmethod
    def synthesize(cls, path: str) -> Installation:
        """Build the fallback record for a path the registry does not know."""
        return cls(name=DEFAULT_NAME, path=path)
