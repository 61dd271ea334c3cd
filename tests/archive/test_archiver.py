"""Tests for ZIP archive creation.

Archives are written into pytest's tmp_path and read back with zipfile.
"""

import zipfile
from pathlib import Path
from unittest.mock import patch

import pytest

from bashup.archive.archiver import create_archive, format_size
from bashup.errors import ArchiveError


@pytest.fixture
def nested_dir(tmp_path: Path) -> Path:
    root = tmp_path / "src" / "tree"
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "top.txt").write_text("top")
    (root / "sub" / "mid.txt").write_text("mid")
    (root / "sub" / "deeper" / "leaf.bin").write_bytes(b"\x00\x01\x02")
    return root


def _tree(root: Path) -> dict[str, bytes | None]:
    """Map each relative path under root to its bytes (None for dirs)."""
    return {
        p.relative_to(root).as_posix(): (p.read_bytes() if p.is_file() else None)
        for p in root.rglob("*")
    }


class TestCreateArchive:
    def test_single_file_stored_under_its_name(self, tmp_path: Path) -> None:
        source = tmp_path / "notes.txt"
        source.write_text("content")
        target = tmp_path / "notes.zip"

        info = create_archive(source, target)

        with zipfile.ZipFile(target) as zf:
            assert zf.namelist() == ["notes.txt"]
            assert zf.read("notes.txt") == b"content"
        assert info.entry_count == 1
        assert info.size_bytes == target.stat().st_size

    def test_directory_round_trip_preserves_tree(
        self, nested_dir: Path, tmp_path: Path
    ) -> None:
        target = tmp_path / "tree.zip"
        create_archive(nested_dir, target)

        out = tmp_path / "out"
        with zipfile.ZipFile(target) as zf:
            zf.extractall(out)

        assert _tree(out / "tree") == _tree(nested_dir)

    def test_directory_entries_rooted_at_directory_name(
        self, nested_dir: Path, tmp_path: Path
    ) -> None:
        target = tmp_path / "tree.zip"
        create_archive(nested_dir, target)

        with zipfile.ZipFile(target) as zf:
            names = zf.namelist()
        assert all(name.startswith("tree/") for name in names)
        assert "tree/sub/deeper/leaf.bin" in names
        assert "tree/empty/" in names

    def test_empty_directory_produces_valid_archive(self, tmp_path: Path) -> None:
        source = tmp_path / "nothing"
        source.mkdir()
        target = tmp_path / "nothing.zip"

        create_archive(source, target)

        with zipfile.ZipFile(target) as zf:
            assert zf.namelist() == ["nothing/"]

    def test_existing_archive_is_replaced(self, tmp_path: Path) -> None:
        source = tmp_path / "a.txt"
        source.write_text("fresh")
        target = tmp_path / "a.zip"
        target.write_bytes(b"stale, not a zip")

        create_archive(source, target)

        with zipfile.ZipFile(target) as zf:
            assert zf.read("a.txt") == b"fresh"

    def test_uses_deflate_compression(self, tmp_path: Path) -> None:
        source = tmp_path / "big.txt"
        source.write_text("x" * 10_000)
        target = tmp_path / "big.zip"

        create_archive(source, target)

        with zipfile.ZipFile(target) as zf:
            assert zf.getinfo("big.txt").compress_type == zipfile.ZIP_DEFLATED

    def test_write_failure_raises_archive_error(self, tmp_path: Path) -> None:
        source = tmp_path / "a.txt"
        source.write_text("x")
        target = tmp_path / "missing-dir" / "a.zip"

        with pytest.raises(ArchiveError) as exc_info:
            create_archive(source, target)
        assert exc_info.value.path == target

    def test_unremovable_existing_archive_raises_archive_error(
        self, tmp_path: Path
    ) -> None:
        source = tmp_path / "a.txt"
        source.write_text("x")
        target = tmp_path / "a.zip"

        with patch.object(Path, "unlink", side_effect=PermissionError("denied")):
            with pytest.raises(ArchiveError, match="cannot remove"):
                create_archive(source, target)


class TestFormatSize:
    def test_bytes(self) -> None:
        assert format_size(512) == "512 B"

    def test_kilobytes(self) -> None:
        assert format_size(1536) == "1.5 KB"

    def test_megabytes(self) -> None:
        assert format_size(5 * 1024 * 1024) == "5.0 MB"

    def test_zero(self) -> None:
        assert format_size(0) == "0 B"

    def test_just_below_kilobyte(self) -> None:
        assert format_size(1023) == "1023 B"

    def test_terabytes_cap_the_unit(self) -> None:
        assert format_size(2048 * 1024 ** 4) == "2048.0 TB"
