"""Services built on top of the core element tree."""

from .demo import build_demo_tree
from .display import collect_measurements, create_measurement_table, describe_element, element_kind
from .json_serializer import serialize_dimensions, serialize_element

__all__ = [
    "build_demo_tree",
    "collect_measurements",
    "create_measurement_table",
    "describe_element",
    "element_kind",
    "serialize_dimensions",
    "serialize_element",
]
