"""Adapter for optional python-magic integration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..utils.logger import get_logger

logger = get_logger(__name__)


class MagicAdapter:
    """Thin wrapper around python-magic to keep libmagic details out of callers."""

    def __init__(self) -> None:
        self._magic: Any | None
        try:
            import magic as _magic

            self._magic = _magic
        except ImportError:
            # python-magic missing or libmagic not installed
            self._magic = None

    @property
    def available(self) -> bool:
        return self._magic is not None

    def mime_type(self, path: str | Path) -> str | None:
        if self._magic is None:
            return None
        try:
            return self._magic.from_file(str(path), mime=True)
        except (OSError, self._magic.MagicException) as e:
            logger.debug(f"libmagic could not identify {path}: {e}")
            return None
