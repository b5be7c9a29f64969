"""
Exception classes and error reporting for jsonrevive.

Every grammar violation surfaces as a JSONSyntaxError carrying the fixed
message, the zero-based offset where scanning stopped and the full source
text. ErrorReporter turns that offset into line/column information and a
highlighted snippet for callers that want to show where parsing failed.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Position:
    """Position in source text (line and column, both 1-based)."""

    line: int
    column: int


@dataclass
class ErrorContext:
    """Snippet of source text around an error location."""

    text: str
    position: Position
    context_before: str
    context_after: str
    error_char: str
    line_text: str
    column_indicator: str


def position_for(text: str, offset: int) -> Position:
    """Translate a zero-based character offset into a line/column Position."""
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset) + 1
    line_start = text.rfind("\n", 0, offset) + 1
    return Position(line, offset - line_start + 1)


class jsonreviveError(Exception):
    """Base exception for all jsonrevive errors."""


class ParseError(jsonreviveError):
    """Raised when the input cannot be parsed."""

    def __init__(
        self,
        message: str,
        position: Optional[Position] = None,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.context = context
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]
        if self.position:
            parts[0] += f" at line {self.position.line}, column {self.position.column}"

        if self.context:
            parts.append(f"  {self.context.line_text}")
            parts.append(f"  {self.context.column_indicator}")

        if self.suggestions:
            parts.append("Suggestions:")
            parts.extend(f"  - {suggestion}" for suggestion in self.suggestions)

        return "\n".join(parts)


class JSONSyntaxError(ParseError, ValueError):
    """
    The single grammar error raised by the parser.

    Attributes:
        name: Always "SyntaxError".
        message: One of the fixed parser messages ("Bad string", ...).
        at: Zero-based offset of the lookahead character when parsing stopped.
        text: The complete source that was being parsed.
    """

    name = "SyntaxError"

    def __init__(
        self,
        message: str,
        at: int,
        text: str,
        context: Optional[ErrorContext] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.at = at
        self.text = text
        super().__init__(message, position_for(text, at), context, suggestions)


class SecurityError(jsonreviveError):
    """Raised when a configured resource limit is exceeded.

    ``at`` is the zero-based offset the limit was hit at, counted the same
    way as JSONSyntaxError.at, or None when no position applies.
    """

    def __init__(self, message: str, at: Optional[int] = None):
        self.message = message
        self.at = at
        if at is not None:
            message = f"{message} at offset {at}"
        super().__init__(message)


class ErrorSuggestionEngine:
    """Short hints attached to syntax errors when context is enabled."""

    _SUGGESTIONS = {
        "Bad number": [
            "Numbers need at least one digit",
            "An exponent marker must be followed by digits",
        ],
        "Bad string": [
            "Check for a missing closing quote",
            "Only \\\" \\\\ \\/ \\b \\f \\n \\r \\t and \\uXXXX escapes are allowed",
        ],
        "Bad array": ["Check for a missing closing bracket ']'"],
        "Bad object": ["Check for a missing closing brace '}'"],
        "Syntax error": ["Only one JSON value is allowed per document"],
    }

    @classmethod
    def suggest(cls, message: str) -> list[str]:
        """Return hints for a parser message."""
        if message.startswith("Expect "):
            return ["Check for a missing separator or closing character"]
        if message.startswith("Unexpected "):
            return [
                "Values must be objects, arrays, strings, numbers, "
                "true, false or null",
                "Trailing commas are not allowed",
            ]
        return list(cls._SUGGESTIONS.get(message, []))


class ErrorReporter:
    """Builds JSONSyntaxError instances with surrounding source context."""

    def __init__(self, text: str, max_context: int = 50):
        self.text = text
        self.max_context = max_context

    def create_context(self, offset: int) -> ErrorContext:
        """Build an ErrorContext for the given offset."""
        offset = max(0, min(offset, len(self.text)))
        position = position_for(self.text, offset)

        line_start = self.text.rfind("\n", 0, offset) + 1
        line_end = self.text.find("\n", offset)
        if line_end == -1:
            line_end = len(self.text)

        half = self.max_context // 2
        return ErrorContext(
            text=self.text,
            position=position,
            context_before=self.text[max(0, offset - half) : offset],
            context_after=self.text[offset + 1 : offset + 1 + half],
            error_char=self.text[offset] if offset < len(self.text) else "",
            line_text=self.text[line_start:line_end],
            column_indicator=" " * (position.column - 1) + "^",
        )

    def create_syntax_error(self, message: str, offset: int) -> JSONSyntaxError:
        """Create a JSONSyntaxError with context and suggestions."""
        return JSONSyntaxError(
            message,
            offset,
            self.text,
            context=self.create_context(offset),
            suggestions=ErrorSuggestionEngine.suggest(message),
        )
