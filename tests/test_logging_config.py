"""Tests for logging configuration."""

import pytest
from loguru import logger

from boxui.core.elements import Container, Text, render_to_string
from boxui.logging_config import (
    LOG_LEVEL_ENV_VAR,
    LogConfig,
    configure_logging,
    resolve_log_level,
    teardown_logging,
)


def test_resolve_log_level_defaults():
    assert resolve_log_level() is None
    assert resolve_log_level(verbose=True) == "DEBUG"


def test_resolve_log_level_prefers_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "warning")

    assert resolve_log_level(verbose=True) == "WARNING"


def test_resolve_log_level_rejects_unknown_level(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "chatty")

    with pytest.raises(ValueError, match=LOG_LEVEL_ENV_VAR):
        resolve_log_level()


def test_configure_logging_writes_render_records(tmp_path):
    log_path = tmp_path / "render.log"
    handler_ids = configure_logging(LogConfig(console=False, file=str(log_path)))
    try:
        render_to_string(Container([Text("abc")]))
    finally:
        teardown_logging(handler_ids)

    assert len(handler_ids) == 1
    assert "Rendering container 5x1 with 1 children" in log_path.read_text(encoding="utf-8")


def test_teardown_disables_logging(tmp_path):
    records = []
    sink_id = logger.add(records.append, filter="boxui")
    try:
        teardown_logging(configure_logging(LogConfig(console=False)))
        render_to_string(Container())
    finally:
        logger.remove(sink_id)

    assert records == []
