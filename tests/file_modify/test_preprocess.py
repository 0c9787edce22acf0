"""Tests for the default watermark preprocess command and the default renamer."""

import os
from unittest.mock import MagicMock, patch

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from src.apps.file_modify.models import WATERMARK_PATH
from src.apps.file_modify.preprocess import parse_watermark_parameters, watermark
from src.apps.file_modify.rename import slugify_filename
from src.apps.files.services import upload_file
from tests.conftest import fake_run, image_upload


class TestParseWatermarkParameters:
    def test_installed_default(self):
        params = parse_watermark_parameters("/srv/mark.png, South, 25, 95")
        assert params.overlay == "/srv/mark.png"
        assert params.gravity == "South"
        assert params.offset == 25
        assert params.dissolve == 95
        assert params.geometry == "+0+25"

    def test_only_image(self):
        params = parse_watermark_parameters("/srv/mark.png")
        assert (params.gravity, params.offset, params.dissolve) == ("South", 0, 100)

    def test_gravity_is_case_insensitive(self):
        assert parse_watermark_parameters("m.png, northeast").gravity == "NorthEast"

    @pytest.mark.parametrize(
        "gravity, geometry",
        [("North", "+0+10"), ("East", "+10+0"), ("SouthWest", "+10+10"), ("Center", "+0+0")],
    )
    def test_geometry_follows_gravity(self, gravity, geometry):
        assert parse_watermark_parameters(f"m.png, {gravity}, 10").geometry == geometry

    @pytest.mark.parametrize(
        "raw, message",
        [
            ("", "No watermark image"),
            ("m.png, Up", "Unknown gravity"),
            ("m.png, South, ten", "offset must be an integer"),
            ("m.png, South, -5", "offset must be positive"),
            ("m.png, South, 5, 150", "between 0 and 100"),
            ("m.png, South, 5, 50, extra", "Too many"),
        ],
    )
    def test_invalid(self, raw, message):
        with pytest.raises(ValueError, match=message):
            parse_watermark_parameters(raw)


@pytest.mark.django_db
class TestWatermark:
    def test_bundled_watermark_exists(self):
        assert WATERMARK_PATH.is_file()

    def test_composites_and_replaces(self, options, imagemagick_dir):
        instance = upload_file(file=image_upload())

        with patch(
            "src.integrations.imagemagick.subprocess.run",
            side_effect=fake_run(content=b"marked"),
        ) as mock_run:
            result = watermark(instance, f"{WATERMARK_PATH}, South, 25, 95")

        assert result == ""
        cmd = mock_run.call_args.args[0]
        assert cmd[0] == os.path.join(os.path.realpath(imagemagick_dir), "composite")
        assert cmd[1:8] == ["-dissolve", "95", "-gravity", "South", "-geometry", "+0+25", str(WATERMARK_PATH)]
        assert cmd[8] == instance.file.path
        assert instance.file.read() == b"marked"
        assert instance.file_size == len(b"marked")

    def test_non_images_are_untouched(self, options, imagemagick_dir, mock_run):
        instance = upload_file(file=SimpleUploadedFile("doc.pdf", b"%PDF", content_type="application/pdf"))

        assert watermark(instance, f"{WATERMARK_PATH}, South") == ""
        mock_run.assert_not_called()

    def test_missing_watermark_image(self, options, imagemagick_dir, mock_run, tmp_path):
        instance = upload_file(file=image_upload())

        result = watermark(instance, f"{tmp_path / 'nope.png'}, South")

        assert "not found" in result
        mock_run.assert_not_called()

    def test_bad_parameters_are_reported(self, options):
        instance = upload_file(file=image_upload())
        assert watermark(instance, "") == "No watermark image given."

    def test_command_failure_is_reported(self, options, imagemagick_dir):
        instance = upload_file(file=image_upload())

        with patch(
            "src.integrations.imagemagick.subprocess.run",
            side_effect=fake_run(returncode=1, stderr="no such gravity"),
        ):
            result = watermark(instance, f"{WATERMARK_PATH}, South")

        assert "no such gravity" in result
        assert instance.file.read() == b"original"

    def test_as_upload_hook(self, options, imagemagick_dir):
        options.preprocess = True
        options.preprocess_parameters = f"{WATERMARK_PATH}, South, 25, 95"
        options.save()

        with patch(
            "src.integrations.imagemagick.subprocess.run",
            side_effect=fake_run(content=b"marked"),
        ):
            instance = upload_file(file=image_upload())

        instance.refresh_from_db()
        assert instance.file.read() == b"marked"


class TestSlugifyFilename:
    @pytest.mark.parametrize(
        "file_name, expected",
        [
            ("Été_2015_1.JPG", "ete_2015_1.jpg"),
            ("My-Scan  01.TIFF", "my-scan-01.tiff"),
            ("already-fine.png", "already-fine.png"),
            ("README", "readme"),
            ("日本.png", ""),
        ],
    )
    def test_names(self, file_name, expected):
        assert slugify_filename(MagicMock(file_name=file_name)) == expected
