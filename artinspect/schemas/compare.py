#!/usr/bin/env python3
"""Comparison result types."""

from enum import Enum
from typing import NamedTuple

from pydantic import Field

from .base import RecordBase


class CompareResult(NamedTuple):
    """Outcome of a byte-exact comparison; unpacks as (identical, diff_size)."""

    identical: bool
    diff_size: int


class DiffChange(str, Enum):
    SAME = "same"
    ADDED = "added"
    REMOVED = "removed"
    CHANGED = "changed"


class DiffLine(RecordBase):
    """One positional line pair of a text diff."""

    line_number: int = Field(..., ge=1)
    change: DiffChange
    left: str | None = None
    right: str | None = None
