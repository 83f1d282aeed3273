"""
Shared CLI utilities and helper functions.

This module contains common utilities used across CLI commands.
"""

from __future__ import annotations

from typing import Optional

import click

from ..core.elements import Element
from ..core.parser import TreeValidationError, load_tree
from ..services.demo import build_demo_tree


def load_root_element(tree_file: Optional[str]) -> Element:
    """Load the tree described by ``tree_file``, or the demo tree when omitted."""
    if tree_file is None:
        return build_demo_tree()
    try:
        return load_tree(tree_file)
    except TreeValidationError as e:
        raise click.BadParameter(str(e), param_hint="TREE_FILE") from e
