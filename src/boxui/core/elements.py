"""
Renderable elements and the vertical box layout.

Every element reports its own :class:`~boxui.core.models.Dimensions` through
``measure`` and draws itself onto a writable text stream through ``render``.
Leaves (:class:`Text`, :class:`Heading`) write their content without framing;
:class:`Container` stacks its children inside a ``+---+`` / ``|...|`` box whose
width is driven by the widest child. Measurements are never cached, so each
``measure`` call on a container walks its whole subtree again.
"""

from __future__ import annotations

import io
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List, Optional, TextIO, Tuple

from loguru import logger

from .models import Dimensions
from .styles import balance_styles, emphasize, visible_width

__all__ = [
    "Container",
    "Element",
    "Heading",
    "LayoutInvariantError",
    "Text",
    "render_to_string",
]


class LayoutInvariantError(RuntimeError):
    """Raised when a child does not fit the box its container computed."""


def _resolve_sink(sink: Optional[TextIO]) -> TextIO:
    return sys.stdout if sink is None else sink


class Element(ABC):
    """A node of the UI tree that can size and draw itself."""

    @abstractmethod
    def measure(self) -> Dimensions:
        """Return the columns and rows the element occupies."""

    @abstractmethod
    def render(self, sink: Optional[TextIO] = None) -> None:
        """Write the element to ``sink`` (standard output when omitted)."""


@dataclass(frozen=True)
class Text(Element):
    """Single row of unstyled text."""

    content: str

    def measure(self) -> Dimensions:
        return Dimensions(width=len(self.content), height=1)

    def render(self, sink: Optional[TextIO] = None) -> None:
        _resolve_sink(sink).write(self.content)


@dataclass(frozen=True)
class Heading(Text):
    """Text drawn in bold; the style markers take up no columns."""

    def render(self, sink: Optional[TextIO] = None) -> None:
        _resolve_sink(sink).write(emphasize(self.content))


@dataclass(frozen=True)
class Container(Element):
    """Stacks owned children vertically inside a bordered box."""

    children: Tuple[Element, ...] = ()

    def __init__(self, children: Iterable[Element] = ()) -> None:
        object.__setattr__(self, "children", tuple(children))

    def measure(self) -> Dimensions:
        max_width = 0
        total_height = 0
        for child in self.children:
            child_dims = child.measure()
            max_width = max(max_width, child_dims.width)
            total_height += child_dims.height
        return Dimensions(width=max_width + 2, height=total_height)

    def render(self, sink: Optional[TextIO] = None) -> None:
        out = _resolve_sink(sink)
        dims = self.measure()
        inner_width = dims.inner_width
        border = f"+{'-' * inner_width}+\n"
        logger.debug(
            "Rendering container {}x{} with {} children",
            dims.width,
            dims.height,
            len(self.children),
        )

        out.write(border)
        for index, child in enumerate(self.children):
            child_dims = child.measure()
            if child_dims.width > inner_width:
                _invariant_violation(
                    f"child {index} is {child_dims.width} columns wide "
                    f"but the container only has {inner_width}"
                )
            for row in _render_rows(child):
                padding = inner_width - visible_width(row)
                if padding < 0:
                    _invariant_violation(
                        f"child {index} rendered a row of {visible_width(row)} columns "
                        f"but the container only has {inner_width}"
                    )
                out.write(f"|{row}{' ' * padding}|\n")
        out.write(border)


def _render_rows(element: Element) -> List[str]:
    """Render an element into a buffer and split it into physical rows."""
    buffer = io.StringIO()
    element.render(buffer)
    rendered = buffer.getvalue()
    if rendered.endswith("\n"):
        rendered = rendered[:-1]
    return balance_styles(rendered.split("\n"))


def _invariant_violation(message: str) -> None:
    logger.error("Layout invariant violated: {}", message)
    raise LayoutInvariantError(message)


def render_to_string(element: Element) -> str:
    """Render an element into memory and return the output."""
    buffer = io.StringIO()
    element.render(buffer)
    return buffer.getvalue()
