"""
Character cursor for jsonrevive - the scan position shared by every grammar rule.
"""

from typing import Optional

from ..security.exceptions import ErrorReporter, JSONSyntaxError
from .constants import WHITESPACE_CEILING


class Cursor:
    """
    Scan position over one source string.

    ``ch`` holds the lookahead character and ``at`` the offset of the next
    character to read, so the lookahead itself sits at ``at - 1``. The
    lookahead starts as a synthetic space; the first advance() reads the
    real first character. At end of input the lookahead is "".
    """

    def __init__(self, text: str, error_reporter: Optional[ErrorReporter] = None):
        self.text = text
        self.at = 0
        self.ch = " "
        self.error_reporter = error_reporter

    @property
    def offset(self) -> int:
        """Zero-based offset of the lookahead character."""
        return max(self.at - 1, 0)

    def advance(self, expected: Optional[str] = None) -> str:
        """Move to the next character and return it.

        When ``expected`` is given the current lookahead must equal it.
        """
        if expected and expected != self.ch:
            raise self.error(f"Expect '{expected}' instead of '{self.ch}'")

        if self.at < len(self.text):
            self.ch = self.text[self.at]
            self.at += 1
        else:
            self.ch = ""
            self.at = len(self.text) + 1
        return self.ch

    def skip_whitespace(self) -> None:
        """Skip every character at or below U+0020, control characters included."""
        while self.ch and self.ch <= WHITESPACE_CEILING:
            self.advance()

    def error(self, message: str) -> JSONSyntaxError:
        """Build a syntax error at the lookahead position."""
        if self.error_reporter:
            return self.error_reporter.create_syntax_error(message, self.offset)
        return JSONSyntaxError(message, self.offset, self.text)
