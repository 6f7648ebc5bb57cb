#!/usr/bin/env python3
"""Property list parsing."""

from __future__ import annotations

import plistlib
from collections.abc import Mapping
from typing import Any
from xml.parsers.expat import ExpatError

from ..error_handling.errors import UndecodableContentError


class PlistlibParser:
    """XML and binary property lists through plistlib."""

    def parse(self, data: bytes) -> Mapping[str, Any]:
        try:
            parsed = plistlib.loads(data)
        except (plistlib.InvalidFileException, ExpatError, ValueError, TypeError) as e:
            raise UndecodableContentError(f"Invalid property list: {e}") from e
        if not isinstance(parsed, Mapping):
            raise UndecodableContentError(
                f"Property list root is {type(parsed).__name__}, expected a dictionary"
            )
        return parsed
