#!/usr/bin/env python3
"""Application package layout and manifest helpers."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..core.constants import (
    APP_BUNDLE_SUFFIX,
    DEFAULT_BUNDLE_VERSION,
    DEFAULT_MINIMUM_OS_VERSION,
    PAYLOAD_DIRECTORY,
    UNKNOWN_BUNDLE_ID,
    UNKNOWN_DISPLAY_NAME,
)

BUNDLE_IDENTIFIER_KEY = "CFBundleIdentifier"
SHORT_VERSION_KEY = "CFBundleShortVersionString"
MINIMUM_OS_KEY = "MinimumOSVersion"
DISPLAY_NAME_KEYS = ("CFBundleDisplayName", "CFBundleName")
EXECUTABLE_KEY = "CFBundleExecutable"


def find_app_bundle(extracted_root: Path) -> Path | None:
    """First ``*.app`` directory under Payload/, by name"""
    payload = extracted_root / PAYLOAD_DIRECTORY
    if not payload.is_dir():
        return None
    for entry in sorted(payload.iterdir(), key=lambda p: p.name):
        if entry.name.endswith(APP_BUNDLE_SUFFIX) and entry.is_dir():
            return entry
    return None


def string_value(manifest: Mapping[str, Any], key: str) -> str | None:
    """Manifest value when it is a non-empty string, else None"""
    value = manifest.get(key)
    if isinstance(value, str) and value:
        return value
    return None


def bundle_identifier(manifest: Mapping[str, Any]) -> str:
    return string_value(manifest, BUNDLE_IDENTIFIER_KEY) or UNKNOWN_BUNDLE_ID


def bundle_version(manifest: Mapping[str, Any]) -> str:
    return string_value(manifest, SHORT_VERSION_KEY) or DEFAULT_BUNDLE_VERSION


def minimum_os_version(manifest: Mapping[str, Any]) -> str:
    return string_value(manifest, MINIMUM_OS_KEY) or DEFAULT_MINIMUM_OS_VERSION


def display_name(manifest: Mapping[str, Any]) -> str:
    for key in DISPLAY_NAME_KEYS:
        name = string_value(manifest, key)
        if name:
            return name
    return UNKNOWN_DISPLAY_NAME


def executable_count(bundle: Path, manifest: Mapping[str, Any]) -> int:
    """1 when the declared main executable exists inside the bundle"""
    executable = string_value(manifest, EXECUTABLE_KEY)
    if executable is None or "/" in executable:
        return 0
    return 1 if (bundle / executable).exists() else 0
