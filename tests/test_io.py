"""Tests for rendered output file helpers."""
import hashlib
import stat

from simpleview.rendering.io import atomic_write_text, file_digest, text_digest


def test_atomic_write_creates_parents_and_sets_mode(tmp_path):
    path = tmp_path / "a" / "b" / "page.html"

    atomic_write_text(path, "<p>é</p>", mode=0o600)

    assert path.read_text(encoding="utf-8") == "<p>é</p>"
    assert stat.S_IMODE(path.stat().st_mode) == 0o600
    assert [p.name for p in path.parent.iterdir()] == ["page.html"]


def test_atomic_write_replaces_existing(tmp_path):
    path = tmp_path / "page.html"
    path.write_text("old", encoding="utf-8")

    atomic_write_text(path, "new")

    assert path.read_text(encoding="utf-8") == "new"


def test_digests_match_for_same_content(tmp_path):
    path = tmp_path / "page.html"
    atomic_write_text(path, "line\r\nnext")

    assert file_digest(path) == text_digest("line\r\nnext")
    assert text_digest("abc") == hashlib.md5(b"abc").hexdigest()


def test_digest_of_missing_file(tmp_path):
    assert file_digest(tmp_path / "missing.html") is None
