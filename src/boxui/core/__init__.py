"""Core element types, layout and tree parsing."""

from .elements import (
    Container,
    Element,
    Heading,
    LayoutInvariantError,
    Text,
    render_to_string,
)
from .models import Dimensions
from .parser import TreeValidationError, build_element, load_tree, parse_tree
from .styles import BOLD, RESET, balance_styles, emphasize, strip_styles, visible_width

__all__ = [
    "BOLD",
    "RESET",
    "Container",
    "Dimensions",
    "Element",
    "Heading",
    "LayoutInvariantError",
    "Text",
    "TreeValidationError",
    "balance_styles",
    "build_element",
    "emphasize",
    "load_tree",
    "parse_tree",
    "render_to_string",
    "strip_styles",
    "visible_width",
]
