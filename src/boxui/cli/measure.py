"""
Measure command for the boxui CLI.

Reports the width and height of every element in a tree, either as a Rich
table or as JSON.
"""

from __future__ import annotations

import json

import click
from rich.console import Console

from ..services.display import collect_measurements, create_measurement_table
from ..services.json_serializer import serialize_element
from .utils import load_root_element

FormatChoice = click.Choice(["table", "json"])


@click.command()
@click.argument("tree_file", type=click.Path(exists=True, dir_okay=False), required=False)
@click.option(
    "--format",
    "output_format",
    type=FormatChoice,
    default="table",
    show_default=True,
    help="Output format.",
)
def measure(tree_file, output_format):
    """Show the measured size of every element in a tree."""
    console = Console()
    error_console = Console(stderr=True)
    root = load_root_element(tree_file)

    try:
        if output_format == "json":
            click.echo(json.dumps(serialize_element(root), indent=2))
            return
        console.print(create_measurement_table(collect_measurements(root)))
    except Exception as exc:
        error_console.print(f"[red]Error: {exc}[/red]")
        raise click.Abort() from exc
