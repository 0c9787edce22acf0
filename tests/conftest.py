"""Shared fixtures: isolated media root, ImageMagick stand-in, options."""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    root = tmp_path / "media"
    root.mkdir()
    settings.MEDIA_ROOT = root
    return root


@pytest.fixture
def imagemagick_dir(settings, tmp_path):
    """A configured (but fake) ImageMagick binary directory."""
    path = tmp_path / "imagemagick"
    path.mkdir()
    settings.PATH_TO_CONVERT = str(path)
    return path


def fake_run(content: bytes = b"converted", returncode: int = 0, stderr: str = ""):
    """subprocess.run replacement writing `content` to the last argument."""

    def run(cmd, **kwargs):
        if returncode == 0:
            Path(cmd[-1]).write_bytes(content)
        return subprocess.CompletedProcess(cmd, returncode, stdout="", stderr=stderr)

    return run


@pytest.fixture
def mock_run():
    with patch("src.integrations.imagemagick.subprocess.run", side_effect=fake_run()) as m:
        yield m


@pytest.fixture
def options(db):
    from src.apps.file_modify.models import FileModifyOptions

    opts = FileModifyOptions.load()
    opts.backup_path = ""
    opts.skip_filesize = 0
    opts.convert_append = ""
    opts.preprocess = False
    opts.rename = False
    opts.save()
    return opts


def stored_files(root: Path) -> list[Path]:
    return sorted(p for p in root.rglob("*") if p.is_file())


def image_upload(name: str = "photo.jpg", content: bytes = b"original") -> SimpleUploadedFile:
    return SimpleUploadedFile(name, content, content_type="image/jpeg")
