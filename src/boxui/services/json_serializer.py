"""JSON serialization utilities for element trees."""

from __future__ import annotations

from typing import Any, Dict

from ..core.elements import Container, Element, Text
from ..core.models import Dimensions
from .display import element_kind


def serialize_dimensions(dims: Dimensions) -> Dict[str, int]:
    """Serialize a Dimensions value for JSON output."""
    return {"width": dims.width, "height": dims.height}


def serialize_element(element: Element) -> Dict[str, Any]:
    """Serialize an element, its measured size and its children."""
    payload: Dict[str, Any] = {"type": element_kind(element)}
    if isinstance(element, Text):
        payload["content"] = element.content
    payload["dimensions"] = serialize_dimensions(element.measure())
    if isinstance(element, Container):
        payload["children"] = [serialize_element(child) for child in element.children]
    return payload
