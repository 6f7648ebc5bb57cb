#!/usr/bin/env python3
"""
Unified Error Handling System for artinspect

Policy-based conversion of engine errors into renderable defaults, plus the
error taxonomy shared by every analyzer.

Copyright (C) 2025 Marc Rivero Lopez

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU General Public License for more details.

Author: Marc Rivero Lopez
"""

from .errors import (
    ArtInspectError,
    CapabilityUnavailableError,
    ErrorCategory,
    ExtractionError,
    ToolExecutionError,
    UndecodableContentError,
    UnreadableInputError,
    classify_exception,
)
from .policies import ErrorHandlingStrategy, ErrorPolicy
from .presets import (
    FAIL_FAST_POLICY,
    FALLBACK_FALSE_POLICY,
    FALLBACK_LIST_POLICY,
    FALLBACK_NONE_POLICY,
    fallback_policy,
)
from .unified_handler import handle_errors

__all__ = [
    "ErrorCategory",
    "ArtInspectError",
    "UnreadableInputError",
    "UndecodableContentError",
    "CapabilityUnavailableError",
    "ToolExecutionError",
    "ExtractionError",
    "classify_exception",
    "ErrorHandlingStrategy",
    "ErrorPolicy",
    "FAIL_FAST_POLICY",
    "FALLBACK_NONE_POLICY",
    "FALLBACK_LIST_POLICY",
    "FALLBACK_FALSE_POLICY",
    "fallback_policy",
    "handle_errors",
]
