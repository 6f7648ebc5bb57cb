#!/usr/bin/env python3
"""
artinspect Analysis Modules
"""

from .comparator import compare_files, diff_text_files
from .directory_scanner import DirectoryScanner
from .integrity import verify_file_integrity
from .macho_analyzer import MachOAnalyzer
from .metadata_probe import MetadataProbe
from .package_analyzer import PackageAnalyzer

__all__ = [
    "MetadataProbe",
    "DirectoryScanner",
    "MachOAnalyzer",
    "PackageAnalyzer",
    "compare_files",
    "diff_text_files",
    "verify_file_integrity",
]
