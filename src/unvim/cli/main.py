"""unvim CLI -- Neovim as Unity's external script editor.

Entry point for the ``unvim`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    installations -- List discovered Neovim binaries.
    resolve       -- Resolve an editor path to an installation.
    open          -- Open a file at a line/column in the running Neovim.
    extensions    -- List file extensions handled by the integration.

Usage::

    unvim installations
    unvim installations --format json
    unvim resolve /usr/bin/nvim
    unvim open Assets/Scripts/Player.cs --line 42 --column 8
    unvim extensions
"""

from __future__ import annotations

import logging

import click
from rich.logging import RichHandler

from unvim import __version__
from unvim.cli.extensions_cmd import extensions_command
from unvim.cli.installations_cmd import installations_command
from unvim.cli.open_cmd import open_command
from unvim.cli.resolve_cmd import resolve_command


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """unvim: Neovim as the external script editor for Unity.

    Discover Neovim installations, resolve the editor path Unity stores,
    and open files at a cursor position through neovim-remote.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_time=False, show_path=False)],
    )


# Register all subcommands
cli.add_command(installations_command)
cli.add_command(resolve_command)
cli.add_command(open_command)
cli.add_command(extensions_command)
