#!/usr/bin/env python3
"""Magic byte and extension tables for file kind detection.

Both tables are built once at import time and never mutated: the signature
table is a tuple of tuples and the extension table a read-only mapping.
"""

from types import MappingProxyType

from ..domain import FileKind

MACHO_32_MAGICS = (
    b"\xfe\xed\xfa\xce",  # MH_MAGIC
    b"\xce\xfa\xed\xfe",  # MH_CIGAM
)
MACHO_64_MAGICS = (
    b"\xfe\xed\xfa\xcf",  # MH_MAGIC_64
    b"\xcf\xfa\xed\xfe",  # MH_CIGAM_64
)
FAT_MAGICS = (
    b"\xca\xfe\xba\xbe",  # FAT_MAGIC
    b"\xbe\xba\xfe\xca",  # FAT_CIGAM
)
FAT_64_MAGICS = (
    b"\xca\xfe\xba\xbf",  # FAT_MAGIC_64
    b"\xbf\xba\xfe\xca",  # FAT_CIGAM_64
)

ZIP_MAGICS = (
    b"PK\x03\x04",  # ZIP / IPA
    b"PK\x05\x06",  # Empty ZIP
    b"PK\x07\x08",  # Spanned ZIP
)

# First match wins; order matters.
MAGIC_SIGNATURES: tuple[tuple[bytes, FileKind], ...] = (
    *((magic, FileKind.EXECUTABLE_CONTAINER) for magic in MACHO_32_MAGICS + MACHO_64_MAGICS),
    *((magic, FileKind.EXECUTABLE_CONTAINER) for magic in FAT_MAGICS),
    *((magic, FileKind.ARCHIVE) for magic in ZIP_MAGICS),
    (b"\xff\xd8\xff", FileKind.IMAGE),  # JPEG SOI
    (b"\x89PNG", FileKind.IMAGE),
    (b"%PDF", FileKind.PDF),
    (b"bplist", FileKind.PROPERTY_LIST),
)

FTYP_MARKER = b"ftyp"
FTYP_OFFSET = 4
FTYP_MIN_LENGTH = 12
XML_PROLOG = b"<?xml"

# Extensions whose content alone cannot be told apart from a plain zip
PACKAGE_EXTENSIONS = frozenset({"ipa", "tipa"})

TEXT_CONTROL_BYTES = frozenset({0x09, 0x0A, 0x0D})

EXTENSION_KINDS = MappingProxyType(
    {
        "json": FileKind.JSON,
        "plist": FileKind.PROPERTY_LIST,
        "xml": FileKind.XML,
        "txt": FileKind.TEXT,
        "text": FileKind.TEXT,
        "md": FileKind.TEXT,
        "log": FileKind.TEXT,
        "p12": FileKind.CERTIFICATE,
        "pfx": FileKind.CERTIFICATE,
        "mobileprovision": FileKind.PROVISIONING_PROFILE,
        "dylib": FileKind.DYNAMIC_LIBRARY,
        "mp3": FileKind.AUDIO,
        "m4a": FileKind.AUDIO,
        "wav": FileKind.AUDIO,
        "mp4": FileKind.VIDEO,
        "mov": FileKind.VIDEO,
        "m4v": FileKind.VIDEO,
        "png": FileKind.IMAGE,
        "jpg": FileKind.IMAGE,
        "jpeg": FileKind.IMAGE,
        "gif": FileKind.IMAGE,
        "heic": FileKind.IMAGE,
        "pdf": FileKind.PDF,
        "zip": FileKind.ARCHIVE,
        "ipa": FileKind.PACKAGE,
        "tipa": FileKind.PACKAGE,
    }
)
