"""``unvim extensions`` -- List the file extensions opened in Neovim.

Exit Codes:
    0 -- Extensions listed.
    2 -- ``UNVIM_EXTENSIONS`` is set but invalid.
"""

from __future__ import annotations

import sys

import click

from unvim.config import EditorSettings
from unvim.editor.extensions import handled_extensions
from unvim.exceptions import ConfigError


@click.command("extensions")
def extensions_command() -> None:
    """List handled file extensions, one per line."""
    try:
        extensions = handled_extensions(EditorSettings.from_env())
    except ConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)
    for extension in extensions:
        click.echo(extension)
