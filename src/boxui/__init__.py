"""
boxui - Minimal terminal UI composition.

Build a tree of :class:`Text`, :class:`Heading` and :class:`Container` elements,
then call ``render`` on the root to draw it as a bordered box.
"""

__version__ = "0.1.0"

from . import logging_config  # noqa: F401  (disables boxui logging until configured)
from .core.elements import (
    Container,
    Element,
    Heading,
    LayoutInvariantError,
    Text,
    render_to_string,
)
from .core.models import Dimensions
from .core.parser import TreeValidationError, load_tree, parse_tree
from .services.demo import build_demo_tree

__all__ = [
    "Container",
    "Dimensions",
    "Element",
    "Heading",
    "LayoutInvariantError",
    "Text",
    "TreeValidationError",
    "build_demo_tree",
    "load_tree",
    "parse_tree",
    "render_to_string",
]
