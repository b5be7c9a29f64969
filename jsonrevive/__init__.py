"""
jsonrevive - a small, predictable JSON parser with reviver support.

jsonrevive turns JSON text into Python values in a single pass and can run a
reviver over the result, letting the caller replace or drop any key on the
way back up the tree.

Quick Start:
    import jsonrevive
    data = jsonrevive.parse('{"a": 1, "b": [true, null]}')

    # Revivers see every key/value pair bottom-up
    def scale(key, value):
        return value * 1000 if isinstance(value, float) else value

    jsonrevive.parse('{"a": 1, "b": 2}', scale)  # {'a': 1000.0, 'b': 2000.0}

    # Returning ABSENT removes the key
    jsonrevive.parse('{"keep": 1, "drop": 2}',
                     lambda k, v: jsonrevive.ABSENT if k == "drop" else v)

Errors:
    Malformed input raises JSONSyntaxError, whose ``message``, ``at`` and
    ``text`` attributes describe what went wrong and where.
"""

from .core.engine import Parser, load, loads, parse
from .core.reviver import ABSENT, ReviverWalker, revive
from .core.values import ValueKind, kind_of
from .security.exceptions import (
    ErrorContext,
    ErrorReporter,
    JSONSyntaxError,
    ParseError,
    Position,
    SecurityError,
    jsonreviveError,
)
from .utils.config import ErrorReporting, ParseConfig, ParseLimits, ParsingBehavior

__version__ = "0.1.0"
__author__ = "jsonrevive contributors"

__all__ = [
    # Parsing
    "parse", "loads", "load", "Parser",
    # Reviver pass
    "ABSENT", "ReviverWalker", "revive",
    # Value kinds
    "ValueKind", "kind_of",
    # Configuration classes
    "ParseConfig", "ParseLimits", "ParsingBehavior", "ErrorReporting",
    # Exception classes
    "jsonreviveError", "ParseError", "JSONSyntaxError", "SecurityError",
    "ErrorContext", "ErrorReporter", "Position",
]
