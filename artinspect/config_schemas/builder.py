#!/usr/bin/env python3
"""Fluent configuration builder."""

from typing import Any

from .schemas import (
    ArtInspectConfig,
    GeneralConfig,
    HashingConfig,
    PackageConfig,
    ToolsConfig,
)


class ConfigBuilder:
    """Fluent API builder for ArtInspectConfig."""

    def __init__(self) -> None:
        self._general_kwargs: dict[str, Any] = {}
        self._hashing_kwargs: dict[str, Any] = {}
        self._tools_kwargs: dict[str, Any] = {}
        self._package_kwargs: dict[str, Any] = {}

    # General Configuration Methods
    def with_verbose(self, verbose: bool = True) -> "ConfigBuilder":
        self._general_kwargs["verbose"] = verbose
        return self

    def with_mime_detection(self, enabled: bool = True) -> "ConfigBuilder":
        self._general_kwargs["detect_mime"] = enabled
        return self

    # Hashing Configuration Methods
    def with_chunk_size(self, chunk_size: int) -> "ConfigBuilder":
        self._hashing_kwargs["chunk_size"] = chunk_size
        return self

    # Tools Configuration Methods
    def with_codesign(self, path: str) -> "ConfigBuilder":
        self._tools_kwargs["codesign"] = path
        return self

    def with_otool(self, path: str) -> "ConfigBuilder":
        self._tools_kwargs["otool"] = path
        return self

    def with_file_tool(self, path: str) -> "ConfigBuilder":
        self._tools_kwargs["file"] = path
        return self

    def with_unzip(self, path: str) -> "ConfigBuilder":
        self._tools_kwargs["unzip"] = path
        return self

    def with_tool_timeout(self, timeout: int) -> "ConfigBuilder":
        self._tools_kwargs["timeout"] = timeout
        return self

    def with_unpacker(self, unpacker: str) -> "ConfigBuilder":
        self._tools_kwargs["unpacker"] = unpacker
        return self

    # Package Configuration Methods
    def with_temp_root(self, temp_root: str | None) -> "ConfigBuilder":
        self._package_kwargs["temp_root"] = temp_root
        return self

    # Build Method
    def build(self) -> ArtInspectConfig:
        """Build and return the config instance."""
        return ArtInspectConfig(
            general=(
                GeneralConfig(**self._general_kwargs) if self._general_kwargs else GeneralConfig()
            ),
            hashing=(
                HashingConfig(**self._hashing_kwargs) if self._hashing_kwargs else HashingConfig()
            ),
            tools=ToolsConfig(**self._tools_kwargs) if self._tools_kwargs else ToolsConfig(),
            package=(
                PackageConfig(**self._package_kwargs) if self._package_kwargs else PackageConfig()
            ),
        )


def create_default_config() -> ArtInspectConfig:
    return ConfigBuilder().build()


def create_verbose_config() -> ArtInspectConfig:
    return ConfigBuilder().with_verbose(True).build()


def create_offline_config() -> ArtInspectConfig:
    """Configuration that never launches external tools for unpacking"""
    return ConfigBuilder().with_unpacker("zipfile").with_mime_detection(False).build()
