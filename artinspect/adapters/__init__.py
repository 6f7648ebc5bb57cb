"""Adapters for external tools and IO."""

from .file_system import FileSystemAdapter, default_file_system
from .magic_adapter import MagicAdapter
from .plist_parser import PlistlibParser
from .process_runner import SubprocessRunner, tool_available
from .signature_checker import CodesignSignatureChecker, NullSignatureChecker
from .structure_dumper import NullStructureDumper, OtoolStructureDumper
from .unpackers import NullUnpacker, UnzipUnpacker, ZipfileUnpacker

__all__ = [
    "FileSystemAdapter",
    "default_file_system",
    "MagicAdapter",
    "PlistlibParser",
    "SubprocessRunner",
    "tool_available",
    "CodesignSignatureChecker",
    "NullSignatureChecker",
    "OtoolStructureDumper",
    "NullStructureDumper",
    "UnzipUnpacker",
    "ZipfileUnpacker",
    "NullUnpacker",
]
