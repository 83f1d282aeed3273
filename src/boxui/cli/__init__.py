"""Command-line interface for boxui."""

from .commands import main

__all__ = ["main"]
