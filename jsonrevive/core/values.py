"""
Value kinds produced by the parser.

Parsed documents use native Python values; ValueKind names which of the six
JSON variants a value is so consumers can dispatch on one discriminator.
"""

from enum import Enum
from typing import Any, Optional


class ValueKind(Enum):
    """The six JSON value variants."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    TEXT = "text"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def is_container(self) -> bool:
        return self in (ValueKind.ARRAY, ValueKind.OBJECT)


def kind_of(value: Any) -> Optional[ValueKind]:
    """
    Classify a value.

    Returns None for objects that are not JSON values, for example values a
    reviver substituted into the tree.
    """
    if value is None:
        return ValueKind.NULL
    # bool before number: bool is a subclass of int
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    return None
