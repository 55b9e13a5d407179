"""Unity external-editor adapter backed by a running Neovim.

Public API::

    from unvim.editor import NeovimCodeEditor, register_editor
"""

from __future__ import annotations

from unvim.editor.code_editor import NeovimCodeEditor, register_editor
from unvim.editor.commands import CommandRunner, build_open_command
from unvim.editor.project import ProjectGenerator

__all__ = [
    "CommandRunner",
    "NeovimCodeEditor",
    "ProjectGenerator",
    "build_open_command",
    "register_editor",
]
