from artinspect.modules.integrity import verify_file_integrity

HELLO_SHA256 = "b94d27b9934d3e08a52e52d7da7dabfac484efe37a5380ee9088f7ace2efcde9"


def test_matching_digest(write_file):
    assert verify_file_integrity(write_file("hello.txt", b"hello world"), HELLO_SHA256) is True


def test_case_and_whitespace_are_ignored(write_file):
    path = write_file("hello.txt", b"hello world")
    assert verify_file_integrity(path, HELLO_SHA256.upper()) is True
    assert verify_file_integrity(path, f"  {HELLO_SHA256}\n") is True


def test_wrong_digest(write_file):
    path = write_file("hello.txt", b"hello world")
    assert verify_file_integrity(path, "0" * 64) is False
    assert verify_file_integrity(path, "") is False


def test_unreadable_file(tmp_path):
    assert verify_file_integrity(tmp_path / "missing", HELLO_SHA256) is False
