#!/usr/bin/env python3
"""
Error taxonomy for the inspection engine

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from enum import Enum
from pathlib import Path


class ErrorCategory(Enum):
    """Error categories for classification"""

    UNREADABLE_INPUT = "unreadable_input"  # Missing, unreadable or permission denied
    UNDECODABLE_CONTENT = "undecodable_content"  # Too short or structurally unrecognised
    CAPABILITY_UNAVAILABLE = "capability_unavailable"  # External tool absent
    EXTRACTION_FAILURE = "extraction_failure"  # Unpack failed or layout missing


class ArtInspectError(Exception):
    """Base class for engine errors"""

    category: ErrorCategory = ErrorCategory.UNREADABLE_INPUT

    def __init__(self, message: str, path: str | Path | None = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None

    def to_dict(self) -> dict[str, str | None]:
        return {
            "exception_type": type(self).__name__,
            "exception_message": str(self),
            "category": self.category.value,
            "path": self.path,
        }


class UnreadableInputError(ArtInspectError):
    category = ErrorCategory.UNREADABLE_INPUT


class UndecodableContentError(ArtInspectError):
    category = ErrorCategory.UNDECODABLE_CONTENT


class CapabilityUnavailableError(ArtInspectError):
    category = ErrorCategory.CAPABILITY_UNAVAILABLE


class ToolExecutionError(CapabilityUnavailableError):
    """An external tool could not be launched or did not finish in time"""


class ExtractionError(ArtInspectError):
    category = ErrorCategory.EXTRACTION_FAILURE


def classify_exception(exception: BaseException) -> ErrorCategory:
    """Map an exception onto the engine taxonomy"""
    if isinstance(exception, ArtInspectError):
        return exception.category
    if isinstance(exception, OSError):
        return ErrorCategory.UNREADABLE_INPUT
    return ErrorCategory.UNDECODABLE_CONTENT
