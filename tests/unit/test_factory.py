import logging
import sys

from artinspect.adapters import (
    CodesignSignatureChecker,
    NullSignatureChecker,
    NullStructureDumper,
    NullUnpacker,
    OtoolStructureDumper,
    UnzipUnpacker,
    ZipfileUnpacker,
)
from artinspect.config import Config
from artinspect.config_schemas import ToolsConfig
from artinspect.core.inspector import ArtifactInspector
from artinspect.factory import (
    build_signature_checker,
    build_structure_dumper,
    build_unpacker,
    create_inspector,
)
from artinspect.utils.logger import get_logger, setup_logger

MISSING = "artinspect-definitely-not-a-tool"


def test_missing_tools_resolve_to_null_collaborators(fake_runner):
    tools = ToolsConfig(codesign=MISSING, otool=MISSING, unzip=MISSING)
    runner = fake_runner()

    assert isinstance(build_signature_checker(tools, runner), NullSignatureChecker)
    assert isinstance(build_structure_dumper(tools, runner), NullStructureDumper)
    assert isinstance(build_unpacker(tools, runner), NullUnpacker)


def test_present_tools_resolve_to_real_collaborators(fake_runner):
    tools = ToolsConfig(codesign=sys.executable, otool=sys.executable, unzip=sys.executable)
    runner = fake_runner()

    assert isinstance(build_signature_checker(tools, runner), CodesignSignatureChecker)
    assert isinstance(build_structure_dumper(tools, runner), OtoolStructureDumper)
    assert isinstance(build_unpacker(tools, runner), UnzipUnpacker)


def test_unpacker_choice(fake_runner):
    runner = fake_runner()
    assert isinstance(build_unpacker(ToolsConfig(unpacker="zipfile"), runner), ZipfileUnpacker)
    assert isinstance(build_unpacker(ToolsConfig(unpacker="none"), runner), NullUnpacker)


def test_create_inspector_from_config(tmp_path, fake_runner):
    config = Config()
    config.set("tools", "unpacker", "zipfile")
    config.set("hashing", "chunk_size", 1024)
    config.set("package", "temp_root", str(tmp_path))
    config.set("general", "detect_mime", False)

    inspector = create_inspector(config, runner=fake_runner())

    assert isinstance(inspector, ArtifactInspector)
    assert inspector.chunk_size == 1024
    assert isinstance(inspector.package_analyzer.unpacker, ZipfileUnpacker)
    assert inspector.package_analyzer.temp_root == str(tmp_path)
    assert inspector.probe.magic_adapter is None


def test_create_inspector_defaults():
    assert isinstance(create_inspector(), ArtifactInspector)


def test_verbose_config_enables_debug_logging(tmp_path, monkeypatch, fake_runner):
    monkeypatch.setenv("HOME", str(tmp_path))
    config = Config()
    config.set("general", "verbose", True)
    package_logger = logging.getLogger("artinspect")
    try:
        create_inspector(config, runner=fake_runner())
        assert package_logger.level == logging.DEBUG
        assert package_logger.handlers
    finally:
        for handler in list(package_logger.handlers):
            handler.close()
            package_logger.removeHandler(handler)
        package_logger.setLevel(logging.NOTSET)


def test_quiet_config_leaves_logging_alone(fake_runner):
    create_inspector(Config(), runner=fake_runner())
    assert logging.getLogger("artinspect").level == logging.NOTSET


def test_setup_logger_console_and_file(tmp_path):
    logger = setup_logger("artinspect.test.setup", level=logging.DEBUG, log_dir=tmp_path / "logs")
    try:
        assert len(logger.handlers) == 2
        logger.debug("written to file")
        assert (tmp_path / "logs" / "artinspect.log").exists()
        # Second call keeps the existing handlers
        assert setup_logger("artinspect.test.setup") is logger
        assert len(logger.handlers) == 2
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


def test_setup_logger_without_writable_dir(write_file):
    blocker = write_file("blocker", b"x")
    logger = setup_logger("artinspect.test.console", log_dir=blocker / "logs")
    try:
        assert len(logger.handlers) == 1
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)


def test_get_logger_name():
    assert get_logger("artinspect.modules").name == "artinspect.modules"
