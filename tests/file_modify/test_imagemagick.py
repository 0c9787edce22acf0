"""Tests for the ImageMagick command wrapper."""

import os
import subprocess
from unittest.mock import patch

import pytest

from src.common.exceptions import ConfigurationError
from src.integrations import imagemagick
from tests.conftest import fake_run


class TestBinaryPath:
    def test_resolves_inside_configured_directory(self, imagemagick_dir):
        expected = os.path.join(os.path.realpath(imagemagick_dir), "convert")
        assert imagemagick.get_binary_path() == expected

    def test_missing_directory(self, settings, tmp_path):
        settings.PATH_TO_CONVERT = str(tmp_path / "nope")
        with pytest.raises(ConfigurationError, match="ImageMagick is not properly configured"):
            imagemagick.get_binary_path()

    def test_file_instead_of_directory(self, settings, tmp_path):
        script = tmp_path / "convert"
        script.write_text("#!/bin/sh\n")
        settings.PATH_TO_CONVERT = str(script)
        with pytest.raises(ConfigurationError):
            imagemagick.get_binary_path()

    def test_empty_setting(self, settings):
        settings.PATH_TO_CONVERT = ""
        with pytest.raises(ConfigurationError):
            imagemagick.get_binary_path()


class TestConvert:
    def test_argument_order(self, imagemagick_dir, mock_run, tmp_path):
        out = str(tmp_path / "out.jpg")
        imagemagick.convert(source="/in.jpg", destination=out, arguments="-resize '50%' -quality 85")

        cmd = mock_run.call_args.args[0]
        assert cmd == [
            os.path.join(os.path.realpath(imagemagick_dir), "convert"),
            "/in.jpg",
            "-resize", "50%", "-quality", "85",
            out,
        ]

    def test_no_shell(self, imagemagick_dir, mock_run, tmp_path):
        imagemagick.convert(source="/in.jpg", destination=str(tmp_path / "out.jpg"), arguments="-resize 10x10; rm -rf /")
        kwargs = mock_run.call_args.kwargs
        assert not kwargs.get("shell", False)
        assert "10x10;" in mock_run.call_args.args[0]

    def test_non_zero_exit(self, imagemagick_dir):
        with patch(
            "src.integrations.imagemagick.subprocess.run",
            side_effect=fake_run(returncode=1, stderr="convert: unable to open image"),
        ):
            with pytest.raises(imagemagick.ImageMagickError) as exc_info:
                imagemagick.convert(source="/in.jpg", destination="/out.jpg", arguments="-strip")
        assert exc_info.value.returncode == 1
        assert "unable to open image" in exc_info.value.stderr

    def test_binary_not_found(self, imagemagick_dir):
        with patch("src.integrations.imagemagick.subprocess.run", side_effect=FileNotFoundError):
            with pytest.raises(imagemagick.ImageMagickError, match="not found"):
                imagemagick.convert(source="/in.jpg", destination="/out.jpg", arguments="-strip")

    def test_binary_not_executable(self, imagemagick_dir):
        with patch("src.integrations.imagemagick.subprocess.run", side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(imagemagick.ImageMagickError, match="could not run"):
                imagemagick.convert(source="/in.jpg", destination="/out.jpg", arguments="-strip")

    def test_timeout(self, imagemagick_dir, settings):
        settings.FILE_MODIFY_CONVERT_TIMEOUT = 3
        with patch(
            "src.integrations.imagemagick.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd="convert", timeout=3),
        ):
            with pytest.raises(imagemagick.ImageMagickError, match="timed out"):
                imagemagick.convert(source="/in.jpg", destination="/out.jpg", arguments="-strip")

    def test_unbalanced_quotes(self, imagemagick_dir, mock_run):
        with pytest.raises(imagemagick.ImageMagickError, match="Invalid ImageMagick arguments"):
            imagemagick.convert(source="/in.jpg", destination="/out.jpg", arguments="-label 'oops")
        mock_run.assert_not_called()


class TestComposite:
    def test_argument_order(self, imagemagick_dir, mock_run, tmp_path):
        out = str(tmp_path / "out.jpg")
        imagemagick.composite(
            overlay="/mark.png",
            source="/in.jpg",
            destination=out,
            gravity="South",
            geometry="+0+25",
            dissolve=95,
        )
        cmd = mock_run.call_args.args[0]
        assert cmd == [
            os.path.join(os.path.realpath(imagemagick_dir), "composite"),
            "-dissolve", "95",
            "-gravity", "South",
            "-geometry", "+0+25",
            "/mark.png",
            "/in.jpg",
            out,
        ]
