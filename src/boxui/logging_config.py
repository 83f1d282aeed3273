"""Logging configuration for boxui.

Library code logs through loguru. Logging is disabled by default and enabled
by :func:`configure_logging`, which the CLI calls for ``--verbose`` runs or
when ``BOXUI_LOG_LEVEL`` is set.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Literal, Optional, get_args

from loguru import logger

logger.disable("boxui")

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LOG_LEVEL_ENV_VAR = "BOXUI_LOG_LEVEL"

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


@dataclass(frozen=True)
class LogConfig:
    """Logging configuration.

    Attributes:
        level: Minimum log level for console output.
        file: Optional path; when set every record is also written there.
        console: Whether to log to stderr.
    """

    level: LogLevel = "INFO"
    file: Optional[str] = None
    console: bool = True


def resolve_log_level(verbose: bool = False) -> Optional[LogLevel]:
    """Pick the log level from the environment, falling back to ``--verbose``."""
    override = (os.environ.get(LOG_LEVEL_ENV_VAR) or "").strip().upper()
    if override:
        if override not in get_args(LogLevel):
            raise ValueError(
                f"{LOG_LEVEL_ENV_VAR} must be one of {', '.join(get_args(LogLevel))}, "
                f"got {override!r}"
            )
        return override  # type: ignore[return-value]
    return "DEBUG" if verbose else None


def configure_logging(config: LogConfig) -> list[int]:
    """Enable boxui logging and return the handler IDs that were added."""
    logger.enable("boxui")
    handler_ids: list[int] = []

    if config.console:
        handler_ids.append(
            logger.add(
                sys.stderr,
                level=config.level,
                format=CONSOLE_FORMAT,
                colorize=True,
                filter="boxui",
            )
        )

    if config.file:
        handler_ids.append(
            logger.add(
                config.file,
                level="DEBUG",
                format=FILE_FORMAT,
                filter="boxui",
            )
        )

    return handler_ids


def teardown_logging(handler_ids: list[int]) -> None:
    """Remove the given handlers and disable boxui logging again."""
    for hid in handler_ids:
        logger.remove(hid)
    logger.disable("boxui")
