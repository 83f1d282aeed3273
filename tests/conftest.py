"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from boxui.core.elements import Container, Heading, Text
from boxui.logging_config import LOG_LEVEL_ENV_VAR

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def isolated_log_level(monkeypatch):
    """Keep a developer's BOXUI_LOG_LEVEL from leaking into tests."""
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.fixture
def demo_tree_path():
    """Path to the JSON description of the demo tree."""
    return FIXTURES_DIR / "demo_tree.json"


@pytest.fixture
def nested_tree_path():
    """Path to a tree with a container nested inside another."""
    return FIXTURES_DIR / "nested_tree.json"


@pytest.fixture
def nested_tree():
    """Container holding a heading and a two-row inner container."""
    return Container(
        [
            Heading("Outer"),
            Container([Text("inner one"), Text("two")]),
        ]
    )
