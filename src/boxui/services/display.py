"""
Display helpers for element trees.

This module flattens an element tree into measurement rows and builds the Rich
table the ``measure`` command prints.
"""

from __future__ import annotations

from typing import Any, Dict, List

from rich.table import Table

from ..core.elements import Container, Element, Heading, Text

_LABEL_LIMIT = 40


def element_kind(element: Element) -> str:
    """Return the lowercase type name used in tree descriptions."""
    if isinstance(element, Heading):
        return "heading"
    if isinstance(element, Text):
        return "text"
    if isinstance(element, Container):
        return "container"
    return type(element).__name__.lower()


def describe_element(element: Element) -> str:
    """Build a short, human-readable label for an element."""
    if isinstance(element, Text):
        content = element.content
        if len(content) > _LABEL_LIMIT:
            content = content[: _LABEL_LIMIT - 3] + "..."
        return f"{type(element).__name__} {content!r}"
    if isinstance(element, Container):
        return f"Container ({len(element.children)})"
    return type(element).__name__


def collect_measurements(root: Element) -> List[Dict[str, Any]]:
    """Measure every element depth first, tagging each with its index path."""
    rows: List[Dict[str, Any]] = []

    def visit(element: Element, path: str) -> None:
        dims = element.measure()
        rows.append(
            {
                "path": path,
                "kind": element_kind(element),
                "label": describe_element(element),
                "width": dims.width,
                "height": dims.height,
            }
        )
        if isinstance(element, Container):
            for index, child in enumerate(element.children):
                child_path = str(index) if path == "root" else f"{path}.{index}"
                visit(child, child_path)

    visit(root, "root")
    return rows


def create_measurement_table(rows: List[Dict[str, Any]]) -> Table:
    """Create a Rich table listing the measured size of each element."""
    table = Table(title="Element Measurements")
    table.add_column("Path", style="cyan")
    table.add_column("Element", style="magenta")
    table.add_column("Width", justify="right")
    table.add_column("Height", justify="right")

    for row in rows:
        depth = 0 if row["path"] == "root" else row["path"].count(".") + 1
        table.add_row(
            row["path"],
            f"{'  ' * depth}{row['label']}",
            str(row["width"]),
            str(row["height"]),
        )

    return table
