"""Discovery of Neovim installations on the local machine.

Public API::

    from unvim.discovery import default_registry

    registry = default_registry()
    for inst in registry.list_installations():
        print(f"{inst.name}: {inst.path}")
"""

from __future__ import annotations

from unvim.discovery.candidates import CANDIDATE_PROFILES, platform_candidates
from unvim.discovery.installation_registry import (
    SUPPORTED_FILENAMES,
    InstallationRegistry,
    default_registry,
    longest_common_prefix,
)
from unvim.discovery.models import Installation
from unvim.discovery.path_scanner import PathScanner

__all__ = [
    "CANDIDATE_PROFILES",
    "Installation",
    "InstallationRegistry",
    "PathScanner",
    "SUPPORTED_FILENAMES",
    "default_registry",
    "longest_common_prefix",
    "platform_candidates",
]
