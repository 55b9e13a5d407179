"""Runtime settings for the Neovim editor integration.

Every setting can be overridden through an ``UNVIM_*`` environment
variable; blank values fall back to the defaults.

Variables:
    UNVIM_REMOTE            Remote-control executable (default ``nvr``).
    UNVIM_SERVER_NAME       Neovim server socket (default ``~/.cache/nvimsocket``).
    UNVIM_EXTENSIONS        ``;``-separated file extensions to open in Neovim.
    UNVIM_FOCUS_APP         macOS application to bring forward after opening.
    UNVIM_EXTRA_CANDIDATES  Extra binary paths to probe, ``os.pathsep``-separated.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_REMOTE = "nvr"
DEFAULT_SERVER_NAME = "~/.cache/nvimsocket"


@dataclass(frozen=True)
class EditorSettings:
    """Resolved editor settings.

    Attributes:
        remote_executable: Command used to talk to a running Neovim.
        server_name: Socket path passed via ``--servername``.
        user_extensions: Raw ``;``-separated extension list, or None to
            use the built-in defaults.
        focus_app: Application to activate after opening a file, or None.
        extra_candidates: Additional binary paths for discovery.
    """

    remote_executable: str = DEFAULT_REMOTE
    server_name: str = DEFAULT_SERVER_NAME
    user_extensions: str | None = None
    focus_app: str | None = None
    extra_candidates: tuple[str, ...] = ()

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EditorSettings:
        """Build settings from ``UNVIM_*`` environment variables.

        Values are stored as given; ``UNVIM_EXTENSIONS`` is validated by
        ``handled_extensions`` when a file is about to be opened.
        """
        env = environ if environ is not None else os.environ

        def _get(name: str) -> str | None:
            value = env.get(name, "").strip()
            return value or None

        return cls(
            remote_executable=_get("UNVIM_REMOTE") or DEFAULT_REMOTE,
            server_name=_get("UNVIM_SERVER_NAME") or DEFAULT_SERVER_NAME,
            user_extensions=_get("UNVIM_EXTENSIONS"),
            focus_app=_get("UNVIM_FOCUS_APP"),
            extra_candidates=extra_candidates_from_env(env),
        )


def extra_candidates_from_env(environ: Mapping[str, str] | None = None) -> tuple[str, ...]:
    """Read ``UNVIM_EXTRA_CANDIDATES`` as a tuple of paths.

    Discovery only needs this one setting, so it is read on its own and
    never fails on unrelated variables.
    """
    env = environ if environ is not None else os.environ
    extra = env.get("UNVIM_EXTRA_CANDIDATES", "")
    return tuple(p.strip() for p in extra.split(os.pathsep) if p.strip())
