import pytest

from theme_purge_tools.errors import DiscoveryError
from theme_purge_tools.utils.themes import discover_themes


def test_only_marked_visible_directories(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "theme.css").write_text("")
    (tmp_path / "b").mkdir()
    (tmp_path / ".hidden").mkdir()
    (tmp_path / ".hidden" / "theme.css").write_text("")

    assert discover_themes(tmp_path) == ("a",)


def test_sorted(theme_root):
    assert discover_themes(theme_root) == ("a", "b")


def test_marker_must_be_a_file(tmp_path):
    (tmp_path / "odd" / "theme.css").mkdir(parents=True)
    assert discover_themes(tmp_path) == ()


def test_nested_marker_ignored(tmp_path):
    (tmp_path / "outer" / "inner").mkdir(parents=True)
    (tmp_path / "outer" / "inner" / "theme.css").write_text("")
    assert discover_themes(tmp_path) == ()


def test_missing_root(tmp_path):
    with pytest.raises(DiscoveryError):
        discover_themes(tmp_path / "nope")


def test_root_is_a_file(tmp_path):
    target = tmp_path / "file.txt"
    target.write_text("")
    with pytest.raises(DiscoveryError):
        discover_themes(target)


def test_unreadable_directory_skipped(monkeypatch, theme_root):
    (theme_root / "locked").mkdir()
    (theme_root / "locked" / "theme.css").write_text("")
    path_cls = type(theme_root)
    original = path_cls.is_file

    def is_file(self):
        if self.parent.name == "locked":
            raise PermissionError(13, "Permission denied", str(self))
        return original(self)

    monkeypatch.setattr(path_cls, "is_file", is_file)

    assert discover_themes(theme_root) == ("a", "b")


def test_bracketed_name(tmp_path):
    (tmp_path / "[dark]").mkdir()
    (tmp_path / "[dark]" / "theme.css").write_text("")
    assert discover_themes(tmp_path) == ("[dark]",)
