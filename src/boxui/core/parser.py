"""
Tree description parsing.

Element trees can be described as JSON documents, for example::

    {"type": "container", "children": [
        {"type": "heading", "content": "Hello world"},
        {"type": "text", "content": "This is a long string of text"}
    ]}

The helpers in this module validate such documents with Pydantic and build the
corresponding :mod:`boxui.core.elements` tree.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any, List, Literal, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .elements import Container, Element, Heading, Text


class TreeValidationError(ValueError):
    """Raised when a tree description cannot be turned into elements."""


class TextSpec(BaseModel):
    """Description of a plain text leaf."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["text"]
    content: str


class HeadingSpec(BaseModel):
    """Description of a bold heading leaf."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["heading"]
    content: str


class ContainerSpec(BaseModel):
    """Description of a bordered container and its children."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["container"]
    children: List["ElementSpec"] = Field(default_factory=list)


ElementSpec = Annotated[
    Union[TextSpec, HeadingSpec, ContainerSpec],
    Field(discriminator="type"),
]

ContainerSpec.model_rebuild()


class TreeSpec(BaseModel):
    """Root wrapper used to validate a single element description."""

    root: ElementSpec


def _format_validation_error(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        # Drop the wrapper field and discriminator tags from the location.
        location = [
            str(part)
            for part in error.get("loc", ())[1:]
            if part not in {"text", "heading", "container"}
        ]
        where = ".".join(location) or "<root>"
        problems.append(f"{where}: {error.get('msg', 'invalid value')}")
    return "Invalid tree description: " + "; ".join(problems)


def build_element(spec: Union[TextSpec, HeadingSpec, ContainerSpec]) -> Element:
    """Convert a validated description into an element tree."""
    if isinstance(spec, HeadingSpec):
        return Heading(spec.content)
    if isinstance(spec, TextSpec):
        return Text(spec.content)
    return Container(build_element(child) for child in spec.children)


def parse_tree(data: Any) -> Element:
    """Validate decoded JSON data and build the element tree it describes."""
    try:
        tree = TreeSpec.model_validate({"root": data})
    except ValidationError as exc:
        raise TreeValidationError(_format_validation_error(exc)) from exc
    return build_element(tree.root)


def load_tree(path: Union[str, Path]) -> Element:
    """Read a JSON tree description from disk."""
    source = Path(path)
    logger.debug("Loading tree description from {}", source)
    try:
        data = json.loads(source.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise TreeValidationError(
            f"{source} is not valid JSON: {exc.msg} (line {exc.lineno})"
        ) from exc
    return parse_tree(data)
