"""``unvim open <file>`` -- Open a file in the running Neovim.

Exit Codes:
    0 -- The open command was sent.
    1 -- The file's extension is not handled.
    2 -- ``UNVIM_EXTENSIONS`` is set but invalid.
    3 -- The remote-control command could not be started.
"""

from __future__ import annotations

import sys

import click

from unvim.discovery.installation_registry import default_registry
from unvim.editor.code_editor import NeovimCodeEditor
from unvim.exceptions import ConfigError, UnvimError


@click.command("open")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--line", type=int, default=-1, help="1-based line (default: first).")
@click.option("--column", type=int, default=-1, help="Column (default: first).")
def open_command(file: str, line: int, column: int) -> None:
    """Open FILE in Neovim with the cursor at LINE/COLUMN."""
    try:
        editor = NeovimCodeEditor(default_registry())
        opened = editor.open_project(file, line, column)
    except ConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)
    except UnvimError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(3)
    if not opened:
        click.echo(f"Not a handled file type: {file}", err=True)
        sys.exit(1)
