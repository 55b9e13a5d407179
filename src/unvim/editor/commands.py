"""External command execution for opening files in a running Neovim.

Files are sent to an already-running Neovim through ``nvr``
(neovim-remote) and its ``--servername`` socket, with the cursor placed
via an ex command. After that, an optional terminal application can be
brought to the foreground (macOS only).
"""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Sequence

from unvim.config import EditorSettings
from unvim.discovery.candidates import current_platform
from unvim.exceptions import EditorCommandError

logger = logging.getLogger(__name__)


def build_open_command(
    file_path: str, line: int, column: int, settings: EditorSettings,
) -> list[str]:
    """Build the argv that opens ``file_path`` at ``line``/``column``.

    An empty ``file_path`` only moves the cursor in the current buffer.
    """
    args = [
        settings.remote_executable,
        "--servername",
        os.path.expanduser(settings.server_name),
        "-c",
        f"call cursor({line}, {column})",
    ]
    if file_path:
        args.append(file_path)
    return args


def focus_command(app: str, system: str | None = None) -> list[str] | None:
    """Build the argv that brings ``app`` forward, or None off macOS."""
    if current_platform(system) != "macos":
        return None
    return ["open", app]


class CommandRunner:
    """Runs external commands synchronously and returns their stdout."""

    def run(self, args: Sequence[str]) -> str:
        """Run ``args`` to completion.

        Returns:
            Captured standard output. A non-zero exit is logged, not raised.

        Raises:
            EditorCommandError: If the command cannot be started.
        """
        logger.debug("Running: %s", " ".join(args))
        try:
            proc = subprocess.run(
                list(args), capture_output=True, text=True, check=False,
            )
        except OSError as exc:
            raise EditorCommandError(f"Cannot run {args[0]!r}: {exc}") from exc
        if proc.returncode != 0:
            logger.warning(
                "%s exited with status %d: %s",
                args[0], proc.returncode, proc.stderr.strip(),
            )
        return proc.stdout
