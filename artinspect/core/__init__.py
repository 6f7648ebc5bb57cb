#!/usr/bin/env python3
"""
artinspect Core Package - engine constants and the inspection facade

This package provides:
- constants: read sizes, tool defaults and placeholder values
- inspector: ArtifactInspector, the facade wiring every analyzer together

The facade lives in ``artinspect.core.inspector`` and is re-exported from the
top-level package; it is not imported here so that the schemas can depend on
the constants without pulling the analyzers in.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .constants import (
    COMPARE_CHUNK_SIZE,
    DIGEST_CHUNK_SIZE,
    MAGIC_PROBE_SIZE,
    MAGIC_READ_SIZE,
    MAGIC_SAMPLE_SIZE,
    SUBPROCESS_TIMEOUT_SECONDS,
)

__all__ = [
    "MAGIC_READ_SIZE",
    "MAGIC_PROBE_SIZE",
    "MAGIC_SAMPLE_SIZE",
    "DIGEST_CHUNK_SIZE",
    "COMPARE_CHUNK_SIZE",
    "SUBPROCESS_TIMEOUT_SECONDS",
]
