"""
Configuration and limits for jsonrevive parsing.

This module defines resource limits, reviver behavior and error reporting
options. Every option has a default, so ``ParseConfig()`` is a complete
configuration.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class ParseLimits:
    """Resource limits applied while scanning a document."""

    max_input_size: int = 10 * 1024 * 1024
    max_string_length: int = 1024 * 1024
    # None leaves number literals unbounded
    max_number_length: Optional[int] = None
    max_nesting_depth: int = 256
    max_array_items: int = 1000000
    max_object_keys: int = 1000000

    def __post_init__(self) -> None:
        for name in (
            "max_input_size",
            "max_string_length",
            "max_number_length",
            "max_nesting_depth",
            "max_array_items",
            "max_object_keys",
        ):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ValueError(f"{name} must be positive")


@dataclass
class ParsingBehavior:
    """Behavioral options for the reviver pass."""

    # Call the reviver as reviver(holder, key, value) instead of (key, value)
    pass_holder: bool = False


@dataclass
class ErrorReporting:
    """Error reporting settings."""

    include_context: bool = True
    max_error_context: int = 50


@dataclass
class ParseConfig:
    """Configuration options for jsonrevive parsing."""

    limits: Optional[ParseLimits] = None
    behavior: Optional[ParsingBehavior] = None
    error_reporting: Optional[ErrorReporting] = None
    logger: Optional[logging.Logger] = None

    def __init__(
        self,
        *,
        limits: Optional[ParseLimits] = None,
        behavior: Optional[ParsingBehavior] = None,
        error_reporting: Optional[ErrorReporting] = None,
        logger: Optional[logging.Logger] = None,
        **config_options: Any,  # flat shortcuts for the nested settings
    ):
        unknown = set(config_options) - {
            "pass_holder",
            "include_context",
            "max_error_context",
        }
        if unknown:
            raise TypeError(f"Unknown config options: {', '.join(sorted(unknown))}")

        self.limits = limits or ParseLimits()
        self.logger = logger

        if behavior is not None:
            self.behavior = behavior
        else:
            self.behavior = ParsingBehavior(
                pass_holder=config_options.get("pass_holder", False)
            )

        if error_reporting is not None:
            self.error_reporting = error_reporting
        else:
            self.error_reporting = ErrorReporting(
                include_context=config_options.get("include_context", True),
                max_error_context=config_options.get("max_error_context", 50),
            )

    @property
    def pass_holder(self) -> bool:
        """Whether the reviver receives the holder as its first argument."""
        assert self.behavior is not None
        return self.behavior.pass_holder

    @pass_holder.setter
    def pass_holder(self, value: bool) -> None:
        assert self.behavior is not None
        self.behavior.pass_holder = value

    @property
    def include_context(self) -> bool:
        """Whether syntax errors carry a source snippet and suggestions."""
        assert self.error_reporting is not None
        return self.error_reporting.include_context

    @include_context.setter
    def include_context(self, value: bool) -> None:
        assert self.error_reporting is not None
        self.error_reporting.include_context = value

    @property
    def max_error_context(self) -> int:
        """Number of characters of source shown around an error."""
        assert self.error_reporting is not None
        return self.error_reporting.max_error_context

    @max_error_context.setter
    def max_error_context(self, value: int) -> None:
        assert self.error_reporting is not None
        self.error_reporting.max_error_context = value
