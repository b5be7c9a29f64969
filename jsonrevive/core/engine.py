"""
Parser for jsonrevive - converts JSON text into Python data structures.
"""

import logging
from typing import Any, NoReturn, Optional, TextIO, Union

from ..security.exceptions import ErrorReporter
from ..security.limits import LimitValidator
from ..utils.config import ParseConfig
from .constants import HEX_DIGITS, JSON_ESCAPE_MAP, WORD_LITERALS
from .cursor import Cursor
from .reviver import Reviver, ReviverWalker

logger = logging.getLogger(__name__)


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Parser:
    """Predictive recursive-descent parser over a single Cursor.

    One Parser handles one document. The lookahead character alone selects
    the grammar rule, and the first violation raises JSONSyntaxError.
    """

    def __init__(
        self,
        text: str,
        config: Optional[ParseConfig] = None,
        error_reporter: Optional[ErrorReporter] = None,
    ):
        self.config = config or ParseConfig()
        self.cursor = Cursor(text, error_reporter)
        self.validator = LimitValidator(self.config.limits, self.cursor)

    def parse(self) -> Any:
        """Parse the whole source as exactly one JSON value."""
        result = self.parse_value()
        self.cursor.skip_whitespace()
        if self.cursor.ch:
            self._fail("Syntax error")
        return result

    def parse_value(self) -> Any:
        """Parse a JSON value (object, array, string, number or word)."""
        cursor = self.cursor
        cursor.skip_whitespace()

        if cursor.ch == "{":
            return self.parse_object()
        if cursor.ch == "[":
            return self.parse_array()
        if cursor.ch == '"':
            return self.parse_string()
        if cursor.ch == "-" or _is_digit(cursor.ch):
            return self.parse_number()
        return self.parse_word()

    def parse_word(self) -> Any:
        """Parse one of the literals true, false or null."""
        cursor = self.cursor
        if cursor.ch in WORD_LITERALS:
            spelling, value = WORD_LITERALS[cursor.ch]
            for expected in spelling:
                cursor.advance(expected)
            return value

        self._fail(f"Unexpected '{cursor.ch}'")

    def parse_number(self) -> float:
        """Parse a number literal into a float."""
        cursor = self.cursor
        start = cursor.offset
        literal = ""

        if cursor.ch == "-":
            literal = "-"
            cursor.advance("-")

        while _is_digit(cursor.ch):
            literal += cursor.ch
            cursor.advance()

        if cursor.ch == ".":
            literal += "."
            while cursor.advance() and _is_digit(cursor.ch):
                literal += cursor.ch

        if cursor.ch in ("e", "E"):
            literal += cursor.ch
            cursor.advance()
            if cursor.ch in ("-", "+"):
                literal += cursor.ch
                cursor.advance()
            while _is_digit(cursor.ch):
                literal += cursor.ch
                cursor.advance()

        self.validator.check_number(literal, start)
        try:
            return float(literal)
        except ValueError:
            self._fail("Bad number")

    def parse_string(self) -> str:
        """Parse a double-quoted string literal, decoding escapes."""
        cursor = self.cursor
        start = cursor.offset
        chars: list[str] = []

        if cursor.ch == '"':
            while cursor.advance():
                if cursor.ch == '"':
                    cursor.advance()
                    string = "".join(chars)
                    self.validator.check_string(string, start)
                    return string

                if cursor.ch == "\\":
                    cursor.advance()
                    if cursor.ch == "u":
                        code_unit = self._read_code_unit()
                        if code_unit is None:
                            break
                        chars.append(chr(code_unit))
                    elif cursor.ch in JSON_ESCAPE_MAP:
                        chars.append(JSON_ESCAPE_MAP[cursor.ch])
                    else:
                        break
                else:
                    chars.append(cursor.ch)

        self._fail("Bad string")

    def _read_code_unit(self) -> Optional[int]:
        """Read the four hex digits of a \\u escape as one UTF-16 code unit."""
        code_unit = 0
        for _ in range(4):
            digit = self.cursor.advance()
            if not digit or digit not in HEX_DIGITS:
                return None
            code_unit = code_unit * 16 + int(digit, 16)
        return code_unit

    def parse_array(self) -> list[Any]:
        """Parse a JSON array into a Python list."""
        cursor = self.cursor
        array: list[Any] = []

        if cursor.ch == "[":
            self.validator.enter()
            cursor.advance("[")
            cursor.skip_whitespace()
            if cursor.ch == "]":
                cursor.advance("]")
                self.validator.leave()
                return array

            while cursor.ch:
                array.append(self.parse_value())
                self.validator.check_members(array)
                cursor.skip_whitespace()
                if cursor.ch == "]":
                    cursor.advance("]")
                    self.validator.leave()
                    return array
                cursor.advance(",")
                cursor.skip_whitespace()

        self._fail("Bad array")

    def parse_object(self) -> dict[str, Any]:
        """Parse a JSON object into a Python dictionary."""
        cursor = self.cursor
        obj: dict[str, Any] = {}

        if cursor.ch == "{":
            self.validator.enter()
            cursor.advance("{")
            cursor.skip_whitespace()
            if cursor.ch == "}":
                cursor.advance("}")
                self.validator.leave()
                return obj

            while cursor.ch:
                key = self.parse_string()
                cursor.skip_whitespace()
                cursor.advance(":")
                # Last duplicate wins
                obj[key] = self.parse_value()
                self.validator.check_members(obj)
                cursor.skip_whitespace()
                if cursor.ch == "}":
                    cursor.advance("}")
                    self.validator.leave()
                    return obj
                cursor.advance(",")
                cursor.skip_whitespace()

        self._fail("Bad object")

    def _fail(self, message: str) -> NoReturn:
        raise self.cursor.error(message)


def parse(
    source: str,
    reviver: Optional[Reviver] = None,
    *,
    config: Optional[ParseConfig] = None,
) -> Any:
    """
    Parse JSON text into a Python value.

    Args:
        source: The JSON text. The whole string must be exactly one value,
            optionally surrounded by whitespace.
        reviver: Optional callable applied bottom-up to every key/value pair
            after parsing. The holder (the array or object that owns the
            key) is an explicit positional argument, never an implicit
            receiver: with ``config.pass_holder`` set the reviver is called
            as ``reviver(holder, key, value)``. By default the holder is left
            out and the call is ``reviver(key, value)``. Array keys are int
            indices and the root key is "". Returning ``ABSENT`` deletes the
            key from its container.
        config: Optional ParseConfig for limits and error reporting.

    Returns:
        The parsed (and possibly revived) value. Numbers are floats.

    Raises:
        JSONSyntaxError: If the text is not valid JSON.
        SecurityError: If a configured limit is exceeded.
        TypeError: If ``source`` is not a string or ``reviver`` is not callable.
    """
    if not isinstance(source, str):
        raise TypeError(
            f"JSON source must be str, not {type(source).__name__}"
        )
    if reviver is not None and not callable(reviver):
        raise TypeError(f"reviver must be callable, not {type(reviver).__name__}")

    config = config or ParseConfig()
    log = config.logger or logger

    LimitValidator(config.limits).check_input(source)
    error_reporter = (
        ErrorReporter(source, config.max_error_context)
        if config.include_context
        else None
    )

    log.debug("Parsing %d characters", len(source))
    result = Parser(source, config, error_reporter).parse()

    if reviver is None:
        return result

    log.debug("Applying reviver %r", reviver)
    return ReviverWalker(reviver, pass_holder=config.pass_holder).revive(result)


def loads(
    s: Union[str, bytes, bytearray],
    reviver: Optional[Reviver] = None,
    *,
    config: Optional[ParseConfig] = None,
) -> Any:
    """
    Deserialize a JSON document held in a str, bytes or bytearray.

    Bytes are decoded as UTF-8 (a leading BOM is dropped) before parsing.
    """
    if isinstance(s, (bytes, bytearray)):
        s = s.decode("utf-8-sig")
    return parse(s, reviver, config=config)


def load(
    fp: TextIO,
    reviver: Optional[Reviver] = None,
    *,
    config: Optional[ParseConfig] = None,
) -> Any:
    """
    Deserialize a JSON document from a file-like object.

    The whole stream is read before parsing starts.
    """
    return loads(fp.read(), reviver, config=config)
