import pytest

from artinspect.modules.macho_analyzer import MachOAnalyzer
from artinspect.modules.macho_domain import (
    count_load_commands,
    fat_architecture_count,
    has_encryption,
    is_arm64e,
    is_position_independent,
    parse_header,
)
from artinspect.schemas import ContainerRecord

LOAD_COMMANDS = """\
Load command 0
      cmd LC_SEGMENT_64
Load command 1
      cmd LC_ENCRYPTION_INFO_64
  cryptoff 16384
  cryptsize 4096
   cryptid 1
Load command 2
      cmd LC_MAIN
"""


def test_64bit_image(write_file):
    path = write_file("app", b"\xcf\xfa\xed\xfe" + b"\x00" * 28)
    record = MachOAnalyzer().analyze(path)

    assert record.is_valid is True
    assert record.is_64bit is True
    assert record.architecture_summary == "arm64"
    assert record.architecture_count == 1


def test_32bit_image(write_file):
    record = MachOAnalyzer().analyze(write_file("old", b"\xce\xfa\xed\xfe" + b"\x00" * 12))
    assert record.is_valid is True
    assert record.is_64bit is False
    assert record.architecture_summary == "arm"


@pytest.mark.parametrize("magic", [b"\xca\xfe\xba\xbe", b"\xbe\xba\xfe\xca"])
def test_fat_container_count(write_file, magic):
    path = write_file("fat", magic + (3).to_bytes(4, "big") + b"\x00" * 40)
    record = MachOAnalyzer().analyze(path)

    assert record.is_valid is True
    assert record.is_64bit is True
    assert record.architecture_summary == "universal"
    assert record.architecture_count == 3


def test_fat_container_zero_count_is_clamped(write_file):
    path = write_file("fat", b"\xca\xfe\xba\xbe\x00\x00\x00\x00")
    assert MachOAnalyzer().analyze(path).architecture_count == 1


def test_fat_container_short_header(write_file):
    record = MachOAnalyzer().analyze(write_file("fat", b"\xca\xfe\xba\xbe\x00"))
    assert record.architecture_summary == "universal"
    assert record.architecture_count == 1


@pytest.mark.parametrize("magic", [b"\xca\xfe\xba\xbf", b"\xbf\xba\xfe\xca"])
def test_fat64_container(write_file, magic):
    record = MachOAnalyzer().analyze(write_file("fat64", magic + b"\x00\x00\x00\x05"))
    assert record.architecture_summary == "universal"
    assert record.architecture_count == 1


@pytest.mark.parametrize("payload", [b"\x7fELF\x02\x01\x01\x00", b"\xcf\xfa", b""])
def test_invalid_input_skips_dumper(write_file, fake_dumper, payload):
    dumper = fake_dumper(load_commands=LOAD_COMMANDS)
    record = MachOAnalyzer(dumper=dumper).analyze(write_file("bin", payload))

    assert record == ContainerRecord.invalid()
    assert dumper.calls == []


def test_unreadable_input(tmp_path, fake_dumper):
    dumper = fake_dumper()
    assert MachOAnalyzer(dumper=dumper).analyze(tmp_path / "missing") == ContainerRecord.invalid()
    assert MachOAnalyzer(dumper=dumper).analyze(tmp_path) == ContainerRecord.invalid()
    assert dumper.calls == []


def test_named_pipe_is_invalid(make_fifo, fake_dumper):
    dumper = fake_dumper()
    assert MachOAnalyzer(dumper=dumper).analyze(make_fifo("tool")) == ContainerRecord.invalid()
    assert dumper.calls == []


def test_dump_markers_map_to_flags(write_file, fake_dumper):
    dumper = fake_dumper(
        load_commands=LOAD_COMMANDS,
        header_flags="flags: NOUNDEFS DYLDLINK TWOLEVEL PIE",
        description="Mach-O 64-bit executable ARM64E",
    )
    record = MachOAnalyzer(dumper=dumper).analyze(write_file("app", b"\xcf\xfa\xed\xfe" + b"\x00" * 4))

    assert record.has_encryption is True
    assert record.is_position_independent is True
    assert record.load_command_count == 3
    assert record.is_arm64e is True


def test_arm64e_only_checked_for_arm64_images(write_file, fake_dumper):
    dumper = fake_dumper(description="Mach-O executable arm64e")
    record = MachOAnalyzer(dumper=dumper).analyze(write_file("app", b"\xce\xfa\xed\xfe"))

    assert record.is_arm64e is False
    assert "describe" not in dumper.calls


def test_unavailable_dumper_leaves_flags_off(write_file, fake_dumper):
    dumper = fake_dumper(load_commands=LOAD_COMMANDS, header_flags="PIE", available=False)
    record = MachOAnalyzer(dumper=dumper).analyze(write_file("app", b"\xcf\xfa\xed\xfe"))

    assert record.is_valid is True
    assert record.has_encryption is False
    assert record.is_position_independent is False
    assert record.is_arm64e is False
    assert record.load_command_count == 0


def test_default_analyzer_has_no_dumper(write_file):
    record = MachOAnalyzer().analyze(write_file("app", b"\xcf\xfa\xed\xfe"))
    assert record.load_command_count == 0


def test_rejects_empty_path():
    with pytest.raises(ValueError):
        MachOAnalyzer().analyze("")


def test_domain_helpers():
    assert parse_header(b"\xfe\xed\xfa\xcf").label == "arm64"
    assert parse_header(b"\x00\x00\x00\x00") is None
    assert fat_architecture_count(b"\xca\xfe\xba\xbe\x00\x00\x01\x00") == 256
    assert has_encryption("LC_ENCRYPTION_INFO\ncryptid 0") is False
    assert has_encryption("cryptid 1") is False
    assert is_position_independent("MH_EXECUTE") is False
    assert count_load_commands("") == 0
    assert is_arm64e("universal", "arm64e") is False
