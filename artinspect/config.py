#!/usr/bin/env python3
"""
artinspect Configuration Management
"""

import copy
import os
from typing import Any

from .config_schemas import ArtInspectConfig
from .config_store import ConfigStore
from .core.constants import (
    DEFAULT_CODESIGN_TOOL,
    DEFAULT_FILE_TOOL,
    DEFAULT_OTOOL_TOOL,
    DEFAULT_UNZIP_TOOL,
    DIGEST_CHUNK_SIZE,
    SUBPROCESS_TIMEOUT_SECONDS,
)


class Config:
    """Configuration manager for artinspect"""

    DEFAULT_CONFIG = {
        "general": {"verbose": False, "detect_mime": True},
        "hashing": {"chunk_size": DIGEST_CHUNK_SIZE},
        "tools": {
            "codesign": DEFAULT_CODESIGN_TOOL,
            "otool": DEFAULT_OTOOL_TOOL,
            "file": DEFAULT_FILE_TOOL,
            "unzip": DEFAULT_UNZIP_TOOL,
            "timeout": SUBPROCESS_TIMEOUT_SECONDS,
            "unpacker": "unzip",
        },
        "package": {"temp_root": None},
    }

    def __init__(self, config_path: str | None = None):
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)
        self.config_path = config_path

        # Without a path the defaults are used as-is
        if config_path is None:
            return
        if os.path.exists(config_path):
            self.load_config()
        else:
            self.save_config()  # Create default config

    def load_config(self) -> None:
        """Load configuration from file"""
        if self.config_path is None:
            return
        user_config = ConfigStore.load(self.config_path)
        if user_config:
            self._merge_config(user_config)

    def save_config(self) -> None:
        """Save configuration to file"""
        if self.config_path is None:
            return
        ConfigStore.save(self.config_path, self.config)

    def _merge_config(self, user_config: dict[str, Any]) -> None:
        """Merge user configuration with defaults"""
        for section, settings in user_config.items():
            if section in self.config and isinstance(settings, dict):
                self.config[section].update(settings)
            else:
                self.config[section] = settings

    def get(self, section: str, key: str | None = None, default: Any = None) -> Any:
        """Get configuration value"""
        if key is None:
            return self.config.get(section, default)
        return self.config.get(section, {}).get(key, default)

    def set(self, section: str, key: str, value: Any) -> None:
        """Set configuration value"""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value

    @property
    def typed_config(self) -> ArtInspectConfig:
        """Validated, immutable view of the current settings"""
        known = {name: self.config[name] for name in self.DEFAULT_CONFIG if name in self.config}
        return ArtInspectConfig.from_dict(known)

    def __getitem__(self, key):
        """Allow dict-like access"""
        return self.config[key]

    def __contains__(self, key):
        """Allow 'in' operator"""
        return key in self.config
