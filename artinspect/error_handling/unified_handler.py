#!/usr/bin/env python3
"""
Unified Error Handler

Single decorator applying an ErrorPolicy at an operation boundary.

Copyright (C) 2025 Marc Rivero Lopez

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

Author: Marc Rivero Lopez
"""

import functools
from collections.abc import Callable
from typing import Any

from ..utils.logger import get_logger
from .errors import classify_exception
from .policies import ErrorHandlingStrategy, ErrorPolicy

logger = get_logger(__name__)


def _fallback_execution(
    func: Callable, policy: ErrorPolicy, func_args: tuple, func_kwargs: dict
) -> Any:
    """
    Execute function with fallback on error

    Args:
        func: Function to execute
        policy: Error policy configuration
        func_args: Positional arguments for function
        func_kwargs: Keyword arguments for function

    Returns:
        Function result or fallback value on a handled error
    """
    try:
        return func(*func_args, **func_kwargs)
    except Exception as e:
        if not policy.is_handled(e):
            raise
        logger.debug(
            f"Operation failed, returning fallback value: {type(e).__name__}: {e}",
            extra={"category": classify_exception(e).value},
        )
        return policy.make_fallback()


def handle_errors(policy: ErrorPolicy) -> Callable:
    """
    Unified error handling decorator

    Args:
        policy: ErrorPolicy configuration defining handling strategy

    Returns:
        Decorator function

    Example:
        @handle_errors(FALLBACK_LIST_POLICY)
        def scan(root):
            return list_entries(root)
    """

    def decorator(func: Callable) -> Callable:
        func_id = f"{func.__module__}.{func.__qualname__}"

        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            match policy.strategy:
                case ErrorHandlingStrategy.FAIL_FAST:
                    return func(*args, **kwargs)
                case ErrorHandlingStrategy.FALLBACK:
                    return _fallback_execution(func, policy, args, kwargs)
                case _:
                    raise ValueError(f"Unsupported strategy for {func_id}: {policy.strategy}")

        return wrapper

    return decorator
