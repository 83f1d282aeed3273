"""
Render command for the boxui CLI.

Draws an element tree, read from a JSON description or the built-in demo tree,
to standard output.
"""

from __future__ import annotations

import click
from rich.console import Console

from ..core.elements import render_to_string
from ..core.styles import strip_styles
from .utils import load_root_element


@click.command()
@click.argument("tree_file", type=click.Path(exists=True, dir_okay=False), required=False)
@click.option("--plain", is_flag=True, help="Strip bold and other styling sequences.")
def render(tree_file, plain):
    """Draw an element tree (the demo tree when TREE_FILE is omitted)."""
    console = Console(stderr=True)
    root = load_root_element(tree_file)

    try:
        output = render_to_string(root)
    except Exception as exc:
        console.print(f"[red]Error: {exc}[/red]")
        raise click.Abort() from exc

    if plain:
        output = strip_styles(output)
    # Styling is part of the output even when stdout is not a terminal.
    click.echo(output, nl=False, color=not plain)
