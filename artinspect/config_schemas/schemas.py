#!/usr/bin/env python3
"""
artinspect Configuration Schemas - Typed Dataclasses
Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

from dataclasses import asdict, dataclass, field, fields
from typing import Any

from ..core.constants import (
    DEFAULT_CODESIGN_TOOL,
    DEFAULT_FILE_TOOL,
    DEFAULT_OTOOL_TOOL,
    DEFAULT_UNZIP_TOOL,
    DIGEST_CHUNK_SIZE,
    SUBPROCESS_TIMEOUT_SECONDS,
)
from ..utils.logger import get_logger

logger = get_logger(__name__)

UNPACKER_CHOICES = ("unzip", "zipfile", "none")


def _build_section(section_cls: type, name: str, values: dict[str, Any]) -> Any:
    """Instantiate a section dataclass, dropping keys it does not define"""
    known = {f.name for f in fields(section_cls)}
    unknown = sorted(set(values) - known)
    if unknown:
        logger.warning(f"Ignoring unknown {name} settings: {', '.join(unknown)}")
    return section_cls(**{key: value for key, value in values.items() if key in known})


@dataclass(frozen=True)
class GeneralConfig:
    """General configuration settings"""

    verbose: bool = False
    detect_mime: bool = True


@dataclass(frozen=True)
class HashingConfig:
    """Digest pipeline configuration"""

    chunk_size: int = DIGEST_CHUNK_SIZE

    def __post_init__(self):
        """Validate configuration values"""
        if self.chunk_size < 1:
            raise ValueError("chunk_size must be at least 1 byte")


@dataclass(frozen=True)
class ToolsConfig:
    """External tool configuration"""

    codesign: str = DEFAULT_CODESIGN_TOOL
    otool: str = DEFAULT_OTOOL_TOOL
    file: str = DEFAULT_FILE_TOOL
    unzip: str = DEFAULT_UNZIP_TOOL
    timeout: int = SUBPROCESS_TIMEOUT_SECONDS
    unpacker: str = "unzip"

    def __post_init__(self):
        """Validate configuration values"""
        if self.timeout < 1:
            raise ValueError("timeout must be at least 1 second")
        if self.unpacker not in UNPACKER_CHOICES:
            raise ValueError(f"unpacker must be one of {', '.join(UNPACKER_CHOICES)}")
        for name in ("codesign", "otool", "file", "unzip"):
            if not getattr(self, name):
                raise ValueError(f"{name} tool path must not be empty")


@dataclass(frozen=True)
class PackageConfig:
    """Package analysis configuration"""

    temp_root: str | None = None


@dataclass(frozen=True)
class ArtInspectConfig:
    """Main artinspect configuration container"""

    general: GeneralConfig = field(default_factory=GeneralConfig)
    hashing: HashingConfig = field(default_factory=HashingConfig)
    tools: ToolsConfig = field(default_factory=ToolsConfig)
    package: PackageConfig = field(default_factory=PackageConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary"""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ArtInspectConfig":
        """Create configuration from dictionary"""
        if not isinstance(config_dict, dict):
            raise TypeError("config_dict must be a dictionary")

        kwargs: dict[str, Any] = {}

        if "general" in config_dict:
            kwargs["general"] = _build_section(GeneralConfig, "general", config_dict["general"])

        if "hashing" in config_dict:
            kwargs["hashing"] = _build_section(HashingConfig, "hashing", config_dict["hashing"])

        if "tools" in config_dict:
            kwargs["tools"] = _build_section(ToolsConfig, "tools", config_dict["tools"])

        if "package" in config_dict:
            kwargs["package"] = _build_section(PackageConfig, "package", config_dict["package"])

        return cls(**kwargs)

    def merge(self, other: "ArtInspectConfig") -> "ArtInspectConfig":
        """Merge with another configuration, with other taking precedence"""
        return ArtInspectConfig.from_dict({**self.to_dict(), **other.to_dict()})
