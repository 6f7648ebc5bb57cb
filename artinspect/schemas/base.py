#!/usr/bin/env python3
"""
Base Pydantic Schemas for Immutable Inspection Records

Every value the engine hands back to callers derives from ``RecordBase``:
frozen, strictly typed and serialisable to plain dicts or JSON.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class RecordBase(BaseModel):
    """
    Base model for all inspection records.

    Records are created once per call and never mutated afterwards, so the
    model is frozen; unknown fields are rejected to keep the shape closed.

    Example:
        >>> class Sample(RecordBase):
        ...     name: str
        >>> Sample(name="a").to_dict()
        {'name': 'a'}
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        use_enum_values=False,
    )

    def to_dict(self, **kwargs: Any) -> dict[str, Any]:
        """
        Dump the record to a plain dictionary.

        Args:
            **kwargs: Additional arguments to pass to model_dump

        Returns:
            Dictionary representation of the record (enums as values)
        """
        return self.model_dump(mode="json", **kwargs)

    def to_json(self, **kwargs: Any) -> str:
        """
        Convert the record to a JSON string.

        Args:
            **kwargs: Additional arguments to pass to model_dump_json

        Returns:
            JSON string representation
        """
        return self.model_dump_json(**kwargs)
