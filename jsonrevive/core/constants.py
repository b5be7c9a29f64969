"""
Common constants and mappings used across the jsonrevive parser.
"""

# Single-character escapes recognized after a backslash
JSON_ESCAPE_MAP = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

HEX_DIGITS = "0123456789abcdefABCDEF"

# Lookahead character -> (literal spelling, decoded value)
WORD_LITERALS = {
    "t": ("true", True),
    "f": ("false", False),
    "n": ("null", None),
}

# Every character at or below this one is skipped as whitespace
WHITESPACE_CEILING = " "
