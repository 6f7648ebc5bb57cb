#!/usr/bin/env python3
"""
File-level record schemas: metadata records and digest sets.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

import re

from pydantic import Field, field_validator, model_validator

from ..domain import FileKind
from .base import RecordBase

_HEX_SAMPLE = re.compile(r"^([0-9A-F]{2}( [0-9A-F]{2}){0,7})?$")
_LOWER_HEX = re.compile(r"^[0-9a-f]+$")
_OCTAL = re.compile(r"^[0-7]{1,4}$")


class FileRecord(RecordBase):
    """
    Metadata for a single filesystem entry.

    Attributes:
        path: Path the record was produced for
        name: Last path component
        kind: Semantic kind resolved by the classifier
        size: Size in bytes
        magic: First bytes as uppercase, space separated hex octets
        is_directory: Whether the entry is a directory
        is_executable: Whether any POSIX execute bit is set
        is_signed: Whether the signature checker accepted the entry
        permissions: Permission bits rendered in octal (e.g. "755")
        mime_type: libmagic MIME type, when available

    Example:
        >>> record = FileRecord(path="/tmp/a.txt", name="a.txt", kind=FileKind.TEXT,
        ...                     size=5, magic="48 65 6C 6C 6F")
        >>> record.kind.display_name
        'Text'
    """

    path: str = Field(..., description="Path the record was produced for")
    name: str = Field(..., description="Last path component")
    kind: FileKind = Field(FileKind.UNKNOWN, description="Semantic kind")
    size: int = Field(0, ge=0, lt=2**64, description="Size in bytes")
    magic: str = Field("", description="Hex sample of the leading bytes")
    is_directory: bool = False
    is_executable: bool = False
    is_signed: bool = False
    permissions: str = Field("0", description="Permission bits in octal")
    mime_type: str | None = Field(None, description="libmagic MIME type")

    @field_validator("magic")
    @classmethod
    def validate_magic(cls, v: str) -> str:
        """Hex sample must hold at most eight uppercase octets"""
        if not _HEX_SAMPLE.match(v):
            raise ValueError(f"magic must be up to 8 uppercase hex octets, got '{v}'")
        return v

    @field_validator("permissions")
    @classmethod
    def validate_permissions(cls, v: str) -> str:
        if not _OCTAL.match(v):
            raise ValueError(f"permissions must be an octal string, got '{v}'")
        return v

    @model_validator(mode="after")
    def check_directory_shape(self) -> "FileRecord":
        """Directories carry neither a kind nor a magic sample"""
        if self.is_directory and (self.kind is not FileKind.UNKNOWN or self.magic):
            raise ValueError("directory records must have kind Unknown and an empty magic")
        return self


class DigestSet(RecordBase):
    """
    Digests of one byte stream, computed together in a single pass.

    Attributes:
        md5: 32 lowercase hex characters
        sha1: 40 lowercase hex characters
        sha256: 64 lowercase hex characters
    """

    md5: str = Field(..., min_length=32, max_length=32)
    sha1: str = Field(..., min_length=40, max_length=40)
    sha256: str = Field(..., min_length=64, max_length=64)

    @field_validator("md5", "sha1", "sha256")
    @classmethod
    def validate_lower_hex(cls, v: str) -> str:
        if not _LOWER_HEX.match(v):
            raise ValueError("digests must be lowercase hex")
        return v
