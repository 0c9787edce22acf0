"""Tests for backup naming helpers."""

from pathlib import Path

from src.apps.file_modify.utils import (
    UNASSIGNED_DIR,
    available_backup_path,
    backup_file_name,
    backup_item_dir,
    split_name,
    stem_is_taken,
)


class TestSplitName:
    def test_last_extension_only(self):
        assert split_name("archive.tar.gz") == ("archive.tar", ".gz")

    def test_no_extension(self):
        assert split_name("README") == ("README", "")

    def test_keeps_directories(self):
        assert split_name("uploads/files/photo.jpg") == ("uploads/files/photo", ".jpg")


class TestAvailableBackupPath:
    def test_free_name_is_kept(self, tmp_path: Path):
        assert available_backup_path(tmp_path, "photo.jpg") == tmp_path / "photo.jpg"

    def test_existing_name_gets_counter(self, tmp_path: Path):
        (tmp_path / "photo.jpg").write_bytes(b"x")
        assert available_backup_path(tmp_path, "photo.jpg") == tmp_path / "photo.1.jpg"

    def test_counter_skips_stems_taken_by_other_extensions(self, tmp_path: Path):
        (tmp_path / "photo.jpg").write_bytes(b"x")
        (tmp_path / "photo.1.png").write_bytes(b"x")
        assert available_backup_path(tmp_path, "photo.jpg") == tmp_path / "photo.2.jpg"

    def test_counter_increments_past_previous_backups(self, tmp_path: Path):
        for name in ("photo.jpg", "photo.1.jpg", "photo.2.jpg"):
            (tmp_path / name).write_bytes(b"x")
        assert available_backup_path(tmp_path, "photo.jpg") == tmp_path / "photo.3.jpg"

    def test_name_without_extension(self, tmp_path: Path):
        (tmp_path / "notes").write_bytes(b"x")
        assert available_backup_path(tmp_path, "notes") == tmp_path / "notes.1"

    def test_glob_characters_in_name(self, tmp_path: Path):
        (tmp_path / "scan[1].tif").write_bytes(b"x")
        assert available_backup_path(tmp_path, "scan[1].tif") == tmp_path / "scan[1].1.tif"


class TestStemIsTaken:
    def test_bare_stem(self, tmp_path: Path):
        (tmp_path / "photo").write_bytes(b"x")
        assert stem_is_taken(tmp_path, "photo")

    def test_other_stem_does_not_count(self, tmp_path: Path):
        (tmp_path / "photograph.jpg").write_bytes(b"x")
        assert not stem_is_taken(tmp_path, "photo")


class TestBackupLocation:
    def test_item_directory(self):
        assert backup_item_dir("/backups", "1234") == Path("/backups/1234")

    def test_unassigned_directory(self):
        assert backup_item_dir("/backups", None) == Path("/backups") / UNASSIGNED_DIR

    def test_file_name_strips_directories(self):
        assert backup_file_name("../../etc/passwd", "fallback.bin") == "passwd"

    def test_file_name_fallback(self):
        assert backup_file_name("..", "fallback.bin") == "fallback.bin"
        assert backup_file_name("", "fallback.bin") == "fallback.bin"
