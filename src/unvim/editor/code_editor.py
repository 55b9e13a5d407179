"""Neovim adapter for Unity's external code editor contract.

``NeovimCodeEditor`` exposes the operations Unity calls on its chosen
external editor: listing installations, claiming a stored editor path,
opening a file at a cursor position, and keeping IDE project files in
sync. Discovery is delegated to ``InstallationRegistry``, process
spawning to ``CommandRunner`` and project files to a host-supplied
``ProjectGenerator``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Sequence

from unvim.config import EditorSettings
from unvim.discovery.installation_registry import (
    InstallationRegistry,
    default_registry,
)
from unvim.discovery.models import Installation
from unvim.editor.commands import CommandRunner, build_open_command, focus_command
from unvim.editor.extensions import handled_extensions, supports_extension
from unvim.editor.project import ProjectGenerator

logger = logging.getLogger(__name__)


class NeovimCodeEditor:
    """Neovim as an external code editor.

    Args:
        registry: Source of known installations.
        project_generator: Host project-file generator. Sync operations
            are skipped when None.
        settings: Editor settings (defaults to ``EditorSettings.from_env()``).
        runner: Command runner (defaults to ``CommandRunner``).
    """

    def __init__(
        self,
        registry: InstallationRegistry,
        project_generator: ProjectGenerator | None = None,
        settings: EditorSettings | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        self.registry = registry
        self.project_generator = project_generator
        self.settings = settings if settings is not None else EditorSettings.from_env()
        self.runner = runner if runner is not None else CommandRunner()

    @property
    def installations(self) -> list[Installation]:
        return self.registry.list_installations()

    def try_get_installation_for_path(self, editor_path: str) -> Installation | None:
        """Claim ``editor_path`` if it is a Neovim binary; None otherwise."""
        return self.registry.resolve(editor_path)

    def initialize(self, editor_installation_path: str) -> None:
        """Called by the host when this editor is picked in preferences."""
        logger.debug("Selected Neovim at %s", editor_installation_path)

    def open_project(self, file_path: str = "", line: int = -1, column: int = -1) -> bool:
        """Open ``file_path`` in the running Neovim at ``line``/``column``.

        An empty ``file_path`` (the host's "Open C# Project") only focuses
        the editor. Line -1 means the first line, column -1 the first column.

        Returns:
            False if the file is missing or its extension is not handled,
            True once the open command has been run.

        Raises:
            EditorCommandError: If the remote-control command cannot start.
            ConfigError: If ``UNVIM_EXTENSIONS`` lists no usable extension.
        """
        if file_path and (
            not supports_extension(file_path, handled_extensions(self.settings))
            or not os.path.isfile(file_path)
        ):
            logger.debug("Not opening %s", file_path)
            return False

        if line == -1:
            line = 1
        if column == -1:
            column = 0

        self.runner.run(build_open_command(file_path, line, column, self.settings))

        if self.settings.focus_app:
            command = focus_command(self.settings.focus_app)
            if command is not None:
                self.runner.run(command)
        return True

    def sync_all(self) -> None:
        """Regenerate all project files."""
        if self.project_generator is None:
            logger.debug("No project generator configured; skipping sync")
            return
        self.project_generator.reset_package_info_cache()
        self.project_generator.sync()

    def sync_if_needed(
        self,
        added_files: Sequence[str],
        deleted_files: Sequence[str],
        moved_files: Sequence[str],
        moved_from_files: Sequence[str],
        imported_files: Sequence[str],
    ) -> None:
        """Regenerate project files touched by an asset database change."""
        if self.project_generator is None:
            logger.debug("No project generator configured; skipping sync")
            return
        changed = list(dict.fromkeys(
            [*added_files, *deleted_files, *moved_files, *moved_from_files]
        ))
        self.project_generator.reset_package_info_cache()
        self.project_generator.sync_if_needed(changed, list(imported_files))

    def create_if_doesnt_exist(self) -> None:
        """Generate the solution on first load if it is missing."""
        if self.project_generator is None:
            return
        if not self.project_generator.solution_exists():
            self.project_generator.sync()


def register_editor(
    host_register: Callable[[NeovimCodeEditor], None],
    project_generator: ProjectGenerator,
    settings: EditorSettings | None = None,
) -> NeovimCodeEditor:
    """Create the editor on the process-wide registry and hand it to the host.

    Args:
        host_register: Host callback that records the editor as available.
        project_generator: Generator for the host project's IDE files.
        settings: Editor settings (defaults to the environment).

    Returns:
        The registered editor.
    """
    editor = NeovimCodeEditor(default_registry(), project_generator, settings)
    host_register(editor)
    editor.create_if_doesnt_exist()
    return editor
