"""
jsonrevive configuration helpers.
"""

from .config import ErrorReporting, ParseConfig, ParseLimits, ParsingBehavior

__all__ = ['ParseConfig', 'ParseLimits', 'ParsingBehavior', 'ErrorReporting']
