import pytest

from artinspect.utils.workspace import temporary_workspace


def test_workspace_created_and_removed(tmp_path):
    with temporary_workspace(tmp_path) as workspace:
        assert workspace.is_dir()
        assert workspace.parent == tmp_path
        assert workspace.name.startswith("artinspect-")
        (workspace / "file.txt").write_text("x")
    assert not workspace.exists()
    assert list(tmp_path.iterdir()) == []


def test_workspace_removed_on_error(tmp_path):
    with pytest.raises(RuntimeError):
        with temporary_workspace(tmp_path) as workspace:
            raise RuntimeError("boom")
    assert not workspace.exists()


def test_workspaces_are_unique(tmp_path):
    with temporary_workspace(tmp_path) as first, temporary_workspace(tmp_path) as second:
        assert first != second
