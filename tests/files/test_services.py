"""Tests for the host upload pipeline (no File Modify option enabled)."""

import uuid

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from src.apps.files import selectors
from src.apps.files.models import File
from src.apps.files.services import ALLOWED_IMAGE_TYPES, delete_file, upload_file, upload_image
from src.apps.files.utils import file_generate_name
from src.common.exceptions import ValidationError
from tests.conftest import image_upload, stored_files


class TestGenerateName:
    def test_uuid_keeps_lowercased_extension(self):
        name = file_generate_name("Holiday.JPG")
        assert name.endswith(".jpg")
        assert len(name) == 32 + len(".jpg")

    def test_keep_original(self):
        assert file_generate_name("My Photo.jpg", keep_original=True) == "My_Photo.jpg"

    def test_keep_original_falls_back_on_unusable_names(self):
        name = file_generate_name("..", keep_original=True)
        assert len(name) == 32


@pytest.mark.django_db
class TestUploadFile:
    def test_persists_record_and_content(self, options, media_root):
        item_id = uuid.uuid4()
        instance = upload_file(file=image_upload(), item_id=item_id)

        instance.refresh_from_db()
        assert instance.original_file_name == "photo.jpg"
        assert instance.file_type == "image/jpeg"
        assert instance.file_size == len(b"original")
        assert instance.item_id == item_id
        assert instance.is_valid
        assert instance.is_image
        assert instance.file.name.startswith("uploads/files/")
        assert instance.file.name.endswith(instance.file_name)
        assert [p.name for p in stored_files(media_root)] == [instance.file_name]

    def test_mime_type_guessed_from_name(self, options):
        upload = SimpleUploadedFile("scan.png", b"x", content_type="application/octet-stream")
        assert upload_file(file=upload).file_type == "image/png"

    def test_too_large(self, options, media_root):
        with pytest.raises(ValidationError, match="File too large"):
            upload_file(file=image_upload(content=b"x" * 20), max_size=10)
        assert stored_files(media_root) == []

    def test_wrong_type(self, options):
        upload = SimpleUploadedFile("doc.pdf", b"%PDF", content_type="application/pdf")
        with pytest.raises(ValidationError, match="not allowed"):
            upload_image(file=upload)

    def test_image_types(self):
        assert "image/jpeg" in ALLOWED_IMAGE_TYPES

    def test_same_original_name_twice(self, options, settings):
        settings.FILES_KEEP_ORIGINAL_NAME = True
        first = upload_file(file=image_upload())
        second = upload_file(file=image_upload())
        assert first.file_name == "photo.jpg"
        assert second.file_name != first.file_name


@pytest.mark.django_db
class TestDeleteAndSelect:
    def test_delete_removes_content(self, options, media_root):
        instance = upload_file(file=image_upload())
        delete_file(file_instance=instance)
        assert File.objects.count() == 0
        assert stored_files(media_root) == []

    def test_selectors(self, options):
        item_id = uuid.uuid4()
        instance = upload_file(file=image_upload(), item_id=item_id)
        upload_file(file=image_upload())

        assert selectors.get_file_by_id(file_id=instance.id) == instance
        assert selectors.get_file_by_id(file_id=uuid.uuid4()) is None
        assert list(selectors.get_item_files(item_id=item_id)) == [instance]
