"""
Resource limits for jsonrevive.

A LimitValidator follows one Parser through a document. It reads offsets from
the parser's Cursor, so a violation points at the same place a
JSONSyntaxError raised there would.
"""

from typing import TYPE_CHECKING, Any, Optional

from ..utils.config import ParseLimits
from .exceptions import SecurityError

if TYPE_CHECKING:
    from ..core.cursor import Cursor


class LimitValidator:
    """Checks a document against ParseLimits while it is being scanned."""

    def __init__(self, limits: ParseLimits, cursor: Optional["Cursor"] = None):
        self.limits = limits
        self.cursor = cursor
        self.depth = 0

    def check_input(self, text: str) -> None:
        """Reject a source longer than max_input_size before scanning starts."""
        self._check_count("Input size", len(text), self.limits.max_input_size, 0)

    def check_string(self, string: str, start: int) -> None:
        """Check a decoded string literal that began at ``start``."""
        self._check_count("String length", len(string), self.limits.max_string_length, start)

    def check_number(self, literal: str, start: int) -> None:
        """Check number literal text that began at ``start``; unlimited by default."""
        self._check_count("Number length", len(literal), self.limits.max_number_length, start)

    def enter(self) -> None:
        """Open an array or object at the lookahead position."""
        self.depth += 1
        self._check_count("Nesting depth", self.depth, self.limits.max_nesting_depth)

    def leave(self) -> None:
        """Close the innermost array or object."""
        self.depth -= 1

    def check_members(self, container: Any) -> None:
        """Check the size of an array or object that just gained a member."""
        if isinstance(container, dict):
            self._check_count("Object key count", len(container), self.limits.max_object_keys)
        else:
            self._check_count("Array item count", len(container), self.limits.max_array_items)

    def _check_count(
        self, what: str, count: int, limit: Optional[int], at: Optional[int] = None
    ) -> None:
        if limit is None or count <= limit:
            return
        if at is None and self.cursor is not None:
            at = self.cursor.offset
        raise SecurityError(f"{what} {count} exceeds limit {limit}", at=at)
