"""Composite classification.

Decides whether a value is walked as a list, walked as a mapping, or passed
through untouched.

Rules:
- LIST: exactly ``list``. Subclasses, tuples and other sequences are atomic.
- MAP: any ``collections.abc.Mapping``. The produced copy is always a plain dict.
- ATOMIC: everything else (scalars, bytes, datetimes, compiled patterns, ...).
"""

from enum import Enum
from collections.abc import Mapping
from typing import Any


class Kind(str, Enum):
    """Classification of a value for traversal."""

    ATOMIC = "ATOMIC"
    LIST = "LIST"
    MAP = "MAP"


def classify(value: Any) -> Kind:
    """Classify a value by exact type for lists and by ABC for mappings.

    Args:
        value: Any Python object

    Returns:
        Kind.LIST, Kind.MAP or Kind.ATOMIC
    """
    if type(value) is list:
        return Kind.LIST
    elif isinstance(value, Mapping):
        return Kind.MAP
    else:
        return Kind.ATOMIC
