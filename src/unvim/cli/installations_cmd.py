"""``unvim installations`` -- List Neovim installations found on this machine.

Exit Codes:
    0 -- Always (an empty result is not an error).
"""

from __future__ import annotations

import click

from unvim.cli.output import installations_to_json, print_installations
from unvim.discovery.installation_registry import default_registry


@click.command("installations")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]), default="text", show_default=True,
    help="Output format.",
)
def installations_command(output_format: str) -> None:
    """List discovered Neovim binaries and their display names."""
    installations = default_registry().list_installations()
    if output_format == "json":
        click.echo(installations_to_json(installations))
    else:
        print_installations(installations)
