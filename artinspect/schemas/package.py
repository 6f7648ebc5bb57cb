#!/usr/bin/env python3
"""
Application package record schema.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from pydantic import Field

from ..core.constants import (
    DEFAULT_BUNDLE_VERSION,
    DEFAULT_MINIMUM_OS_VERSION,
    UNKNOWN_BUNDLE_ID,
    UNKNOWN_DISPLAY_NAME,
)
from .base import RecordBase


class PackageRecord(RecordBase):
    """
    Facts read from an application package manifest.

    The record is always structurally complete. When the package cannot be
    unpacked or its manifest cannot be read, ``PackageRecord.stub()`` supplies
    placeholder values and ``is_stub`` is set.

    Attributes:
        bundle_id: CFBundleIdentifier
        version: CFBundleShortVersionString
        minimum_os_version: MinimumOSVersion
        display_name: CFBundleDisplayName, then CFBundleName
        has_embedded_provisioning: embedded.mobileprovision present in the bundle
        is_signed: Signature checker accepted the bundle
        executable_count: 1 when the declared main executable exists, else 0
        is_stub: Whether the values are placeholders
    """

    bundle_id: str = Field(..., min_length=1)
    version: str
    minimum_os_version: str
    display_name: str
    has_embedded_provisioning: bool = False
    is_signed: bool = False
    executable_count: int = Field(0, ge=0, le=1)
    is_stub: bool = False

    @classmethod
    def stub(cls) -> "PackageRecord":
        return cls(
            bundle_id=UNKNOWN_BUNDLE_ID,
            version=DEFAULT_BUNDLE_VERSION,
            minimum_os_version=DEFAULT_MINIMUM_OS_VERSION,
            display_name=UNKNOWN_DISPLAY_NAME,
            has_embedded_provisioning=False,
            is_signed=False,
            executable_count=1,
            is_stub=True,
        )
