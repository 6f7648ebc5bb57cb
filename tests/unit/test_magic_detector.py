import pytest

from artinspect.domain import FileKind
from artinspect.utils.magic_detector import (
    MagicByteDetector,
    detect_by_extension,
    detect_file_type,
    file_extension,
    is_probably_text,
)
from artinspect.utils.magic_patterns import EXTENSION_KINDS, MAGIC_SIGNATURES


@pytest.mark.parametrize(
    "magic",
    [
        b"\xfe\xed\xfa\xce",
        b"\xfe\xed\xfa\xcf",
        b"\xce\xfa\xed\xfe",
        b"\xcf\xfa\xed\xfe",
        b"\xca\xfe\xba\xbe",
        b"\xbe\xba\xfe\xca",
    ],
)
def test_macho_magics_are_executable_containers(write_file, magic):
    path = write_file("binary", magic + b"\x00" * 28)
    assert detect_file_type(path) is FileKind.EXECUTABLE_CONTAINER


def test_content_wins_over_extension(write_file):
    path = write_file("notes.txt", b"\xcf\xfa\xed\xfe" + b"\x00" * 12)
    assert detect_file_type(path) is FileKind.EXECUTABLE_CONTAINER


@pytest.mark.parametrize("magic", [b"PK\x03\x04", b"PK\x05\x06", b"PK\x07\x08"])
def test_zip_magics_are_archives(write_file, magic):
    path = write_file("bundle.zip", magic + b"\x00" * 26)
    assert detect_file_type(path) is FileKind.ARCHIVE


@pytest.mark.parametrize("name", ["App.ipa", "App.tipa", "App.IPA", "App.TiPa"])
def test_zip_with_package_extension_is_package(write_file, name):
    path = write_file(name, b"PK\x03\x04" + b"\x00" * 26)
    assert detect_file_type(path) is FileKind.PACKAGE


def test_zip_without_extension_is_archive(write_file):
    path = write_file("payload", b"PK\x03\x04\x14\x00")
    assert detect_file_type(path) is FileKind.ARCHIVE


@pytest.mark.parametrize(
    ("payload", "expected"),
    [
        (b"\xff\xd8\xff\xe0\x00\x10JFIF", FileKind.IMAGE),
        (b"\x89PNG\r\n\x1a\n", FileKind.IMAGE),
        (b"%PDF-1.7\n", FileKind.PDF),
        (b"bplist00\xd1\x01\x02", FileKind.PROPERTY_LIST),
    ],
)
def test_media_and_document_signatures(write_file, payload, expected):
    path = write_file("sample.bin", payload)
    assert detect_file_type(path) is expected


def test_ftyp_box_is_video(write_file):
    path = write_file("clip.bin", b"\x00\x00\x00\x18ftypmp42\x00\x00\x00\x00")
    assert detect_file_type(path) is FileKind.VIDEO


def test_ftyp_requires_twelve_bytes(write_file):
    path = write_file("clip.bin", b"\x00\x00\x00\x18ftyp")
    assert detect_file_type(path) is FileKind.UNKNOWN


def test_xml_prolog_wins_over_extension(write_file):
    path = write_file("feed.txt", b'<?xml version="1.0"?><rss/>')
    assert detect_file_type(path) is FileKind.XML


def test_partial_xml_prolog_is_text(write_file):
    path = write_file("fragment.dat", b"<?xm")
    assert detect_file_type(path) is FileKind.TEXT


def test_text_content_defers_to_extension(write_file):
    path = write_file("data.json", b'{"key": "value"}\n')
    assert detect_file_type(path) is FileKind.JSON


def test_text_content_with_unknown_extension_is_text(write_file):
    path = write_file("README", b"Hello\tworld\r\n")
    assert detect_file_type(path) is FileKind.TEXT


def test_empty_file_is_text(write_file):
    path = write_file("empty.dat", b"")
    assert detect_file_type(path) is FileKind.TEXT


def test_binary_content_uses_extension(write_file):
    path = write_file("libfoo.dylib", b"\x00\x01\x02\x03")
    assert detect_file_type(path) is FileKind.DYNAMIC_LIBRARY


def test_binary_content_unknown_extension(write_file):
    path = write_file("blob.bin", b"\x00\x01\x02\x03")
    assert detect_file_type(path) is FileKind.UNKNOWN


def test_extension_lookup_is_case_insensitive(write_file):
    path = write_file("Photo.PNG", b"\x00\x00")
    assert detect_file_type(path) is FileKind.IMAGE


def test_unreadable_file_falls_back_to_extension(tmp_path):
    assert detect_file_type(tmp_path / "missing.mobileprovision") is FileKind.PROVISIONING_PROFILE
    assert detect_file_type(tmp_path / "missing.xyz") is FileKind.UNKNOWN


def test_directory_falls_back_to_extension(tmp_path):
    folder = tmp_path / "Demo.app"
    folder.mkdir()
    assert MagicByteDetector().detect_file_type(folder) is FileKind.UNKNOWN


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("a.json", FileKind.JSON),
        ("a.plist", FileKind.PROPERTY_LIST),
        ("a.xml", FileKind.XML),
        ("a.txt", FileKind.TEXT),
        ("a.text", FileKind.TEXT),
        ("a.md", FileKind.TEXT),
        ("a.log", FileKind.TEXT),
        ("a.p12", FileKind.CERTIFICATE),
        ("a.pfx", FileKind.CERTIFICATE),
        ("a.mobileprovision", FileKind.PROVISIONING_PROFILE),
        ("a.dylib", FileKind.DYNAMIC_LIBRARY),
        ("a.mp3", FileKind.AUDIO),
        ("a.m4a", FileKind.AUDIO),
        ("a.wav", FileKind.AUDIO),
        ("a.mp4", FileKind.VIDEO),
        ("a.mov", FileKind.VIDEO),
        ("a.m4v", FileKind.VIDEO),
        ("a.gif", FileKind.IMAGE),
        ("a.heic", FileKind.IMAGE),
        ("a.jpeg", FileKind.IMAGE),
        ("a.pdf", FileKind.PDF),
        ("a.zip", FileKind.ARCHIVE),
        ("a.ipa", FileKind.PACKAGE),
        ("a.tipa", FileKind.PACKAGE),
        ("a.exe", FileKind.UNKNOWN),
        ("noext", FileKind.UNKNOWN),
    ],
)
def test_extension_table(name, expected):
    assert detect_by_extension(name) is expected


def test_tables_are_immutable():
    assert isinstance(MAGIC_SIGNATURES, tuple)
    with pytest.raises(TypeError):
        EXTENSION_KINDS["exe"] = FileKind.UNKNOWN  # type: ignore[index]


def test_helpers():
    assert file_extension("/tmp/Archive.TAR.GZ") == "gz"
    assert file_extension("/tmp/noext") == ""
    assert is_probably_text(b"plain\ttext\n") is True
    assert is_probably_text(b"\x00binary") is False
    assert is_probably_text(b"") is True


def test_named_pipe_uses_extension_only(make_fifo):
    assert MagicByteDetector().detect_file_type(make_fifo("feed.json")) is FileKind.JSON
    assert MagicByteDetector().detect_file_type(make_fifo("feed")) is FileKind.UNKNOWN
