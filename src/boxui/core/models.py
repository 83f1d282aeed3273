"""
Core value types for element layout.

This module defines the Pydantic model describing how much of the terminal grid
an element occupies.
"""

from pydantic import BaseModel, ConfigDict, Field


class Dimensions(BaseModel):
    """Width and height of an element in terminal columns and rows."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(..., ge=0, description="Display columns")
    height: int = Field(..., ge=0, description="Display rows")

    @property
    def inner_width(self) -> int:
        """Columns left once one border column is taken from each side."""
        return max(self.width - 2, 0)
