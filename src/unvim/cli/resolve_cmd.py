"""``unvim resolve <path>`` -- Resolve an editor path to an installation.

Exit Codes:
    0 -- The path names a Neovim binary (known or synthesized).
    1 -- The path is not a Neovim binary.
"""

from __future__ import annotations

import json
import sys
from dataclasses import asdict

import click

from unvim.discovery.installation_registry import default_registry


@click.command("resolve")
@click.argument("path")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]), default="text", show_default=True,
    help="Output format.",
)
def resolve_command(path: str, output_format: str) -> None:
    """Show which installation Unity would use for PATH."""
    installation = default_registry().resolve(path)
    if output_format == "json":
        click.echo(json.dumps(
            {"supported": installation is not None,
             "installation": asdict(installation) if installation else None}
        ))
    elif installation is None:
        click.echo(f"Unsupported editor: {path}")
    else:
        click.echo(f"{installation.name}\t{installation.path}")
    sys.exit(0 if installation is not None else 1)
