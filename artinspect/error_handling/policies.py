#!/usr/bin/env python3
"""
Error Handling Policies

Defines declarative policies for error handling strategies.

Copyright (C) 2025 Marc Rivero Lopez

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

Author: Marc Rivero Lopez
"""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from .errors import ArtInspectError


class ErrorHandlingStrategy(Enum):
    """Error handling strategies for different scenarios"""

    FAIL_FAST = "fail_fast"  # Re-raise exceptions immediately
    FALLBACK = "fallback"  # Return fallback value on error


@dataclass(frozen=True)
class ErrorPolicy:
    """
    Error handling policy configuration

    Attributes:
        strategy: Error handling strategy to apply
        fallback_value: Value to return when a handled error occurs
        fallback_factory: Builds a fresh fallback value per call; takes
            precedence over fallback_value (use it for mutable defaults)
        handled_exceptions: Exceptions converted into the fallback value
        fatal_exceptions: Exceptions that always propagate
    """

    strategy: ErrorHandlingStrategy
    fallback_value: Any = None
    fallback_factory: Callable[[], Any] | None = None
    handled_exceptions: frozenset[type[BaseException]] = field(
        default_factory=lambda: frozenset({ArtInspectError, OSError})
    )
    fatal_exceptions: frozenset[type[BaseException]] = field(default_factory=frozenset)

    def is_handled(self, exception: BaseException) -> bool:
        """
        Determine if exception should be converted into the fallback value

        Args:
            exception: Exception to evaluate

        Returns:
            True if the fallback applies
        """
        # Fatal exceptions are never handled
        if any(isinstance(exception, fatal) for fatal in self.fatal_exceptions):
            return False
        return any(isinstance(exception, handled) for handled in self.handled_exceptions)

    def make_fallback(self) -> Any:
        if self.fallback_factory is not None:
            return self.fallback_factory()
        return self.fallback_value

    def copy_with_overrides(self, **overrides: Any) -> "ErrorPolicy":
        """
        Create a copy of this policy with specific overrides

        Args:
            **overrides: Attributes to override

        Returns:
            New ErrorPolicy instance with overrides applied
        """
        for key in overrides:
            if not hasattr(self, key):
                raise AttributeError(f"ErrorPolicy has no attribute '{key}'")
        return replace(self, **overrides)
