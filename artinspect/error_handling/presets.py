#!/usr/bin/env python3
"""
Error Handling Policy Presets

Common error handling configurations used by the analyzers.

Copyright (C) 2025 Marc Rivero Lopez

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

Author: Marc Rivero Lopez
"""

from typing import Any

from .policies import ErrorHandlingStrategy, ErrorPolicy

# Fatal exceptions that should never be converted
FATAL_EXCEPTIONS: frozenset[type[BaseException]] = frozenset(
    {
        MemoryError,
        KeyboardInterrupt,
        SystemExit,
    }
)


def _empty_list() -> list:
    """Return empty list (for mutable default)"""
    return []


# Fail fast policy - re-raise all exceptions immediately
FAIL_FAST_POLICY = ErrorPolicy(
    strategy=ErrorHandlingStrategy.FAIL_FAST,
    fatal_exceptions=FATAL_EXCEPTIONS,
)

# Fallback to None (absent result)
FALLBACK_NONE_POLICY = ErrorPolicy(
    strategy=ErrorHandlingStrategy.FALLBACK,
    fallback_value=None,
    fatal_exceptions=FATAL_EXCEPTIONS,
)

# Fallback to a fresh empty list
FALLBACK_LIST_POLICY = ErrorPolicy(
    strategy=ErrorHandlingStrategy.FALLBACK,
    fallback_factory=_empty_list,
    fatal_exceptions=FATAL_EXCEPTIONS,
)

# Fallback to False
FALLBACK_FALSE_POLICY = ErrorPolicy(
    strategy=ErrorHandlingStrategy.FALLBACK,
    fallback_value=False,
    fatal_exceptions=FATAL_EXCEPTIONS,
)


def fallback_policy(fallback_value: Any = None, **kwargs: Any) -> ErrorPolicy:
    """
    Create a FALLBACK policy returning ``fallback_value``

    Example:
        policy = fallback_policy(ContainerRecord.invalid())
    """
    return ErrorPolicy(
        strategy=ErrorHandlingStrategy.FALLBACK,
        fallback_value=fallback_value,
        fatal_exceptions=FATAL_EXCEPTIONS,
    ).copy_with_overrides(**kwargs)
