"""Tests for the Dimensions value type."""

import pytest
from pydantic import ValidationError

from boxui.core.models import Dimensions


def test_dimensions_compare_by_value():
    assert Dimensions(width=3, height=1) == Dimensions(width=3, height=1)
    assert Dimensions(width=3, height=1) != Dimensions(width=3, height=2)


def test_dimensions_reject_negative_values():
    with pytest.raises(ValidationError):
        Dimensions(width=-1, height=0)
    with pytest.raises(ValidationError):
        Dimensions(width=0, height=-1)


def test_dimensions_are_frozen():
    dims = Dimensions(width=4, height=2)

    with pytest.raises(ValidationError):
        dims.width = 10


def test_inner_width_excludes_borders():
    assert Dimensions(width=31, height=2).inner_width == 29
    assert Dimensions(width=2, height=0).inner_width == 0
    assert Dimensions(width=0, height=0).inner_width == 0
