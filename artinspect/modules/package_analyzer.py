#!/usr/bin/env python3
"""
Application package (IPA) analysis

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from collections.abc import Mapping
from pathlib import Path

from ..adapters.file_system import FileSystemAdapter, default_file_system
from ..adapters.plist_parser import PlistlibParser
from ..adapters.signature_checker import NullSignatureChecker
from ..adapters.unpackers import NullUnpacker
from ..core.constants import EMBEDDED_PROVISIONING_NAME, INFO_PLIST_NAME
from ..error_handling import ExtractionError, fallback_policy, handle_errors
from ..interfaces.tools import PropertyListParser, SignatureChecker, Unpacker
from ..schemas import PackageRecord
from ..utils.logger import get_logger
from ..utils.workspace import temporary_workspace
from . import package_domain

logger = get_logger(__name__)


class PackageAnalyzer:
    """
    Unpack an application package into a scoped workspace and read its manifest.

    Any failure along the way (no unpacker, extraction error, missing
    Payload/*.app bundle, unreadable or malformed Info.plist) yields
    ``PackageRecord.stub()``. The workspace is removed on every exit path.
    """

    def __init__(
        self,
        unpacker: Unpacker | None = None,
        plist_parser: PropertyListParser | None = None,
        signature_checker: SignatureChecker | None = None,
        temp_root: str | Path | None = None,
        file_system: FileSystemAdapter | None = None,
    ) -> None:
        self.unpacker = unpacker or NullUnpacker()
        self.plist_parser = plist_parser or PlistlibParser()
        self.signature_checker = signature_checker or NullSignatureChecker()
        self.temp_root = temp_root
        self.file_system = file_system or default_file_system

    def analyze(self, file_path: str | Path) -> PackageRecord:
        if not str(file_path):
            raise ValueError("file_path must not be empty")
        if not self.unpacker.available:
            logger.debug("No unpacker available, returning placeholder package record")
            return PackageRecord.stub()
        return self._analyze(file_path)

    @handle_errors(fallback_policy(fallback_factory=PackageRecord.stub))
    def _analyze(self, file_path: str | Path) -> PackageRecord:
        with temporary_workspace(self.temp_root) as workspace:
            try:
                self.unpacker.unpack(file_path, workspace)
            except ExtractionError as e:
                logger.warning(f"Could not unpack {file_path}: {e}")
                return PackageRecord.stub()

            bundle = package_domain.find_app_bundle(workspace)
            if bundle is None:
                logger.debug(f"No Payload/*.app bundle in {file_path}")
                return PackageRecord.stub()

            return self._read_bundle(bundle)

    def _read_bundle(self, bundle: Path) -> PackageRecord:
        manifest = self.plist_parser.parse(self.file_system.read_bytes(bundle / INFO_PLIST_NAME))
        if not isinstance(manifest, Mapping):
            logger.debug(f"Info.plist of {bundle.name} is not a dictionary")
            return PackageRecord.stub()

        return PackageRecord(
            bundle_id=package_domain.bundle_identifier(manifest),
            version=package_domain.bundle_version(manifest),
            minimum_os_version=package_domain.minimum_os_version(manifest),
            display_name=package_domain.display_name(manifest),
            has_embedded_provisioning=(bundle / EMBEDDED_PROVISIONING_NAME).exists(),
            is_signed=self.signature_checker.is_signed(bundle),
            executable_count=package_domain.executable_count(bundle, manifest),
        )
