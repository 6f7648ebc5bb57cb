"""Semantic file kinds resolved by the type classifier."""

from __future__ import annotations

from enum import Enum


class FileKind(str, Enum):
    """Closed set of kinds; the value doubles as the display name."""

    UNKNOWN = "Unknown"
    TEXT = "Text"
    IMAGE = "Image"
    VIDEO = "Video"
    AUDIO = "Audio"
    ARCHIVE = "Archive"
    PACKAGE = "IPA"
    EXECUTABLE_CONTAINER = "Mach-O"
    PROPERTY_LIST = "Property List"
    JSON = "JSON"
    XML = "XML"
    PDF = "PDF"
    CERTIFICATE = "Certificate"
    PROVISIONING_PROFILE = "Provisioning Profile"
    DYNAMIC_LIBRARY = "Dynamic Library"

    @property
    def display_name(self) -> str:
        return self.value
