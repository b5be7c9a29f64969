"""
jsonrevive Security and Validation System.

This module provides resource limits and exception handling.
"""

from .exceptions import ParseError, JSONSyntaxError, SecurityError, ErrorReporter
from .limits import LimitValidator

__all__ = ['ParseError', 'JSONSyntaxError', 'SecurityError', 'ErrorReporter', 'LimitValidator']
