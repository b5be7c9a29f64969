"""
jsonrevive Core Parsing Engine.

This module provides the scanner, the grammar rules and the reviver pass.
"""

from .cursor import Cursor
from .engine import Parser, parse
from .reviver import ABSENT, ReviverWalker
from .values import ValueKind, kind_of

__all__ = [
    'parse', 'Parser',
    'Cursor',
    'ABSENT', 'ReviverWalker',
    'ValueKind', 'kind_of'
]
