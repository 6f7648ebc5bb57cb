#!/usr/bin/env python3
"""Factory helpers for constructing the inspector and its collaborators."""

from __future__ import annotations

import logging

from .adapters.magic_adapter import MagicAdapter
from .adapters.plist_parser import PlistlibParser
from .adapters.process_runner import SubprocessRunner, tool_available
from .adapters.signature_checker import CodesignSignatureChecker, NullSignatureChecker
from .adapters.structure_dumper import NullStructureDumper, OtoolStructureDumper
from .adapters.unpackers import NullUnpacker, UnzipUnpacker, ZipfileUnpacker
from .config import Config
from .config_schemas import ToolsConfig
from .core.inspector import ArtifactInspector
from .interfaces.tools import ProcessRunner, SignatureChecker, StructureDumper, Unpacker
from .modules.directory_scanner import DirectoryScanner
from .modules.macho_analyzer import MachOAnalyzer
from .modules.metadata_probe import MetadataProbe
from .modules.package_analyzer import PackageAnalyzer
from .utils.logger import get_logger, setup_logger
from .utils.magic_detector import MagicByteDetector

logger = get_logger(__name__)


def build_signature_checker(tools: ToolsConfig, runner: ProcessRunner) -> SignatureChecker:
    if tool_available(tools.codesign):
        return CodesignSignatureChecker(runner, tools.codesign)
    logger.debug(f"{tools.codesign} not found, signature checks disabled")
    return NullSignatureChecker()


def build_structure_dumper(tools: ToolsConfig, runner: ProcessRunner) -> StructureDumper:
    # The file tool only refines arm64e detection; otool is the capability
    if tool_available(tools.otool):
        return OtoolStructureDumper(runner, otool=tools.otool, file_tool=tools.file)
    logger.debug(f"{tools.otool} not found, Mach-O structure dumps disabled")
    return NullStructureDumper()


def build_unpacker(tools: ToolsConfig, runner: ProcessRunner) -> Unpacker:
    match tools.unpacker:
        case "zipfile":
            return ZipfileUnpacker()
        case "unzip" if tool_available(tools.unzip):
            return UnzipUnpacker(runner, tools.unzip)
        case "unzip":
            logger.debug(f"{tools.unzip} not found, package analysis returns placeholders")
            return NullUnpacker()
        case _:
            return NullUnpacker()


def create_inspector(
    config: Config | None = None,
    runner: ProcessRunner | None = None,
) -> ArtifactInspector:
    """Create an ArtifactInspector with collaborators resolved from the host."""
    cfg = (config or Config()).typed_config
    if cfg.general.verbose:
        setup_logger(level=logging.DEBUG)
    runner = runner or SubprocessRunner(timeout=cfg.tools.timeout)

    signature_checker = build_signature_checker(cfg.tools, runner)
    magic_adapter = MagicAdapter() if cfg.general.detect_mime else None

    detector = MagicByteDetector()
    probe = MetadataProbe(
        detector=detector,
        signature_checker=signature_checker,
        magic_adapter=magic_adapter,
    )
    return ArtifactInspector(
        detector=detector,
        probe=probe,
        scanner=DirectoryScanner(probe=probe),
        macho_analyzer=MachOAnalyzer(dumper=build_structure_dumper(cfg.tools, runner)),
        package_analyzer=PackageAnalyzer(
            unpacker=build_unpacker(cfg.tools, runner),
            plist_parser=PlistlibParser(),
            signature_checker=signature_checker,
            temp_root=cfg.package.temp_root,
        ),
        chunk_size=cfg.hashing.chunk_size,
    )
