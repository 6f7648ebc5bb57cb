"""Pytest configuration for shared fixtures."""

from __future__ import annotations

import os
import plistlib
import zipfile
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

import pytest

from artinspect.error_handling import ExtractionError, ToolExecutionError
from artinspect.interfaces import ProcessResult

# =============================================================================
# Fake collaborators
# =============================================================================


class FakeRunner:
    """ProcessRunner returning canned results keyed by (command, first arg)."""

    def __init__(self, responses: Mapping[tuple[str, str], Any] | None = None) -> None:
        self.responses = dict(responses or {})
        self.calls: list[tuple[str, list[str]]] = []

    def run(self, command: str, args: Sequence[str]) -> ProcessResult:
        args = list(args)
        self.calls.append((command, args))
        key = (command, args[0] if args else "")
        response = self.responses.get(key, self.responses.get((command, "*")))
        if isinstance(response, Exception):
            raise response
        if response is None:
            return ProcessResult(exit_code=1, stdout="")
        return response


class FakeDumper:
    """StructureDumper with fixed text views."""

    def __init__(
        self,
        load_commands: str = "",
        header_flags: str = "",
        description: str = "",
        available: bool = True,
    ) -> None:
        self._load_commands = load_commands
        self._header_flags = header_flags
        self._description = description
        self._available = available
        self.calls: list[str] = []

    @property
    def available(self) -> bool:
        return self._available

    def load_commands(self, path) -> str:
        self.calls.append("load_commands")
        return self._load_commands

    def header_flags(self, path) -> str:
        self.calls.append("header_flags")
        return self._header_flags

    def describe(self, path) -> str:
        self.calls.append("describe")
        return self._description


class FakeSignatureChecker:
    def __init__(self, signed: bool = True) -> None:
        self.signed = signed
        self.checked: list[str] = []

    def is_signed(self, path) -> bool:
        self.checked.append(str(path))
        return self.signed


class LayoutUnpacker:
    """Unpacker writing a fixed {relative path: bytes} layout, or failing."""

    def __init__(
        self,
        layout: Mapping[str, bytes] | None = None,
        fail: bool = False,
        available: bool = True,
    ) -> None:
        self.layout = dict(layout or {})
        self.fail = fail
        self._available = available
        self.destinations: list[Path] = []

    @property
    def available(self) -> bool:
        return self._available

    def unpack(self, archive, destination) -> None:
        destination = Path(destination)
        self.destinations.append(destination)
        if self.fail:
            raise ExtractionError("corrupt archive", path=archive)
        for relative, payload in self.layout.items():
            target = destination / relative
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(payload)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def fake_runner() -> Callable[..., FakeRunner]:
    return FakeRunner


@pytest.fixture
def fake_dumper() -> Callable[..., FakeDumper]:
    return FakeDumper


@pytest.fixture
def fake_signature_checker() -> Callable[..., FakeSignatureChecker]:
    return FakeSignatureChecker


@pytest.fixture
def layout_unpacker() -> Callable[..., LayoutUnpacker]:
    return LayoutUnpacker


@pytest.fixture
def process_result() -> type[ProcessResult]:
    return ProcessResult


@pytest.fixture
def tool_error() -> type[ToolExecutionError]:
    return ToolExecutionError


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Write bytes under tmp_path (parents created) and return the path."""

    def _write(name: str, payload: bytes) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
        return path

    return _write


@pytest.fixture
def make_fifo(tmp_path: Path) -> Callable[[str], Path]:
    """Create a named pipe under tmp_path; nothing ever writes to it."""
    if not hasattr(os, "mkfifo"):
        pytest.skip("named pipes are not available on this platform")

    def _make(name: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        os.mkfifo(path)
        return path

    return _make


SAMPLE_MANIFEST = {
    "CFBundleIdentifier": "com.example.demo",
    "CFBundleShortVersionString": "2.4.1",
    "MinimumOSVersion": "15.0",
    "CFBundleDisplayName": "Demo",
    "CFBundleName": "DemoName",
    "CFBundleExecutable": "Demo",
}


@pytest.fixture
def sample_manifest() -> dict[str, Any]:
    return dict(SAMPLE_MANIFEST)


@pytest.fixture
def build_ipa(tmp_path: Path) -> Callable[..., Path]:
    """
    Build a zip-based package on disk.

    Args (of the returned callable):
        manifest: Info.plist contents (None leaves it out)
        name: Archive file name
        app_name: Bundle directory name under Payload/
        extra: Additional {bundle-relative path: bytes} entries
    """

    def _build(
        manifest: Mapping[str, Any] | None = SAMPLE_MANIFEST,
        name: str = "Demo.ipa",
        app_name: str = "Demo.app",
        extra: Mapping[str, bytes] | None = None,
    ) -> Path:
        archive = tmp_path / name
        with zipfile.ZipFile(archive, "w") as bundle:
            if manifest is not None:
                bundle.writestr(
                    f"Payload/{app_name}/Info.plist", plistlib.dumps(dict(manifest))
                )
            for relative, payload in (extra or {}).items():
                bundle.writestr(f"Payload/{app_name}/{relative}", payload)
        return archive

    return _build
