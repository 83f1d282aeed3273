"""Terminal styling sequences and helpers for measuring styled text."""

from __future__ import annotations

import re
from typing import List

ESCAPE = "\x1b"
BOLD = f"{ESCAPE}[1m"
RESET = f"{ESCAPE}[0m"

_SGR_PATTERN = re.compile(r"\x1b\[[0-9;]*m")


def emphasize(text: str) -> str:
    """Wrap text in bold start/reset sequences."""
    return f"{BOLD}{text}{RESET}"


def strip_styles(text: str) -> str:
    """Remove SGR escape sequences, leaving only the visible characters."""
    return _SGR_PATTERN.sub("", text)


def visible_width(text: str) -> int:
    """Return the column count of text once styling sequences are removed."""
    return len(strip_styles(text))


def balance_styles(rows: List[str]) -> List[str]:
    """Close styling left open at the end of a row and reopen it on the next."""
    balanced: List[str] = []
    active: List[str] = []
    for row in rows:
        row = "".join(active) + row
        for sequence in _SGR_PATTERN.findall(row):
            if sequence in (RESET, f"{ESCAPE}[m"):
                active = []
            else:
                active.append(sequence)
        if active:
            row += RESET
        balanced.append(row)
    return balanced
