#!/usr/bin/env python3
"""
artinspect Core Constants - read sizes, tool defaults and placeholder values

This module contains the constants shared by the classifier, the analyzers
and the configuration defaults.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

# =============================================================================
# Content Sniffing
# =============================================================================
MAGIC_READ_SIZE = 32  # Bytes read once by the type classifier
MAGIC_PROBE_SIZE = 16  # Bytes read by the metadata probe
MAGIC_SAMPLE_SIZE = 8  # Bytes rendered in the FileRecord hex sample
MACHO_MAGIC_SIZE = 4
FAT_HEADER_SIZE = 8

# =============================================================================
# Streaming IO
# =============================================================================
DIGEST_CHUNK_SIZE = 8192  # Digest pipeline window
COMPARE_CHUNK_SIZE = 8192  # Comparator lock-step window

# =============================================================================
# Process Execution Constants
# =============================================================================
SUBPROCESS_TIMEOUT_SECONDS = 30  # Maximum seconds to wait for an external tool
DEFAULT_CODESIGN_TOOL = "codesign"
DEFAULT_OTOOL_TOOL = "otool"
DEFAULT_FILE_TOOL = "file"
DEFAULT_UNZIP_TOOL = "unzip"

# =============================================================================
# Package Layout
# =============================================================================
PAYLOAD_DIRECTORY = "Payload"
APP_BUNDLE_SUFFIX = ".app"
INFO_PLIST_NAME = "Info.plist"
EMBEDDED_PROVISIONING_NAME = "embedded.mobileprovision"
WORKSPACE_PREFIX = "artinspect-"

# =============================================================================
# Placeholder Values
# =============================================================================
UNKNOWN_BUNDLE_ID = "com.unknown.app"
DEFAULT_BUNDLE_VERSION = "1.0"
DEFAULT_MINIMUM_OS_VERSION = "13.0"
UNKNOWN_DISPLAY_NAME = "Unknown App"

__all__ = [
    "MAGIC_READ_SIZE",
    "MAGIC_PROBE_SIZE",
    "MAGIC_SAMPLE_SIZE",
    "MACHO_MAGIC_SIZE",
    "FAT_HEADER_SIZE",
    "DIGEST_CHUNK_SIZE",
    "COMPARE_CHUNK_SIZE",
    "SUBPROCESS_TIMEOUT_SECONDS",
    "DEFAULT_CODESIGN_TOOL",
    "DEFAULT_OTOOL_TOOL",
    "DEFAULT_FILE_TOOL",
    "DEFAULT_UNZIP_TOOL",
    "PAYLOAD_DIRECTORY",
    "APP_BUNDLE_SUFFIX",
    "INFO_PLIST_NAME",
    "EMBEDDED_PROVISIONING_NAME",
    "WORKSPACE_PREFIX",
    "UNKNOWN_BUNDLE_ID",
    "DEFAULT_BUNDLE_VERSION",
    "DEFAULT_MINIMUM_OS_VERSION",
    "UNKNOWN_DISPLAY_NAME",
]
