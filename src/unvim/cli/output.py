"""Rich output formatting helpers for the unvim CLI."""

from __future__ import annotations

import json
from dataclasses import asdict

from rich.console import Console
from rich.table import Table

from unvim.discovery.models import Installation

console = Console()


def installations_to_json(installations: list[Installation]) -> str:
    """Serialize installations as a JSON array of ``{name, path}`` objects."""
    return json.dumps([asdict(i) for i in installations], indent=2)


def print_installations(installations: list[Installation]) -> None:
    """Print a table of discovered installations.

    Args:
        installations: Records from the registry, in discovery order.
    """
    if not installations:
        console.print("[dim]No Neovim installations found.[/dim]")
        return

    table = Table(title="Neovim Installations", show_header=True, header_style="bold")
    table.add_column("Name", style="bold")
    table.add_column("Path", style="dim")
    for inst in installations:
        table.add_row(inst.name, inst.path)
    console.print(table)
