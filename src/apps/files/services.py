"""
File services — handles upload, validation, and deletion.

Saving a new File runs the upload hooks of the file_modify app
(pre_save receiver). Those hooks may change the stored content and name,
or refuse the upload by raising FileProcessingError.
"""

import mimetypes
from pathlib import PurePosixPath

import structlog
from django.conf import settings
from django.core.files.uploadedfile import UploadedFile
from django.db import transaction
from django.utils import timezone

from src.apps.files.models import File
from src.apps.files.utils import file_generate_name
from src.common.exceptions import ValidationError

logger = structlog.get_logger(__name__)

# ── Allowed MIME types per context ──────────────────────────────────────

ALLOWED_DOCUMENT_TYPES = {
    "application/pdf",
}

ALLOWED_IMAGE_TYPES = {
    "image/jpeg",
    "image/png",
    "image/gif",
    "image/tiff",
    "image/webp",
}

MAX_FILE_SIZE = 10 * 1024 * 1024  # 10 MB


def _detect_mime_type(file: UploadedFile) -> str:
    """Detect MIME type from the uploaded file."""
    content_type = file.content_type or ""
    if not content_type or content_type == "application/octet-stream":
        guessed, _ = mimetypes.guess_type(file.name or "")
        content_type = guessed or content_type or "application/octet-stream"
    return content_type


def _validate_file(
    file: UploadedFile,
    allowed_types: set[str] | None = None,
    max_size: int = MAX_FILE_SIZE,
) -> str:
    """
    Validate an uploaded file. Returns the detected MIME type.

    Raises:
        ValidationError: If file is too large or wrong type.
    """
    if file.size and file.size > max_size:
        max_mb = max_size / (1024 * 1024)
        raise ValidationError(
            f"File too large ({file.size} bytes). Maximum is {max_mb:.0f} MB."
        )

    content_type = _detect_mime_type(file)

    if allowed_types and content_type not in allowed_types:
        raise ValidationError(
            f"File type '{content_type}' not allowed. "
            f"Accepted: {', '.join(sorted(allowed_types))}"
        )

    return content_type


@transaction.atomic
def upload_file(
    *,
    file: UploadedFile,
    uploaded_by=None,
    item_id=None,
    allowed_types: set[str] | None = None,
    max_size: int | None = None,
) -> File:
    """
    Upload and persist a file.

    The content is written to storage first, then the row is saved, which
    triggers the upload hooks. If a hook fails, the stored content is
    removed and the error is re-raised (the row is rolled back).

    Returns the created File instance.
    """
    if max_size is None:
        max_size = getattr(settings, "FILES_MAX_UPLOAD_SIZE", MAX_FILE_SIZE)
    content_type = _validate_file(file, allowed_types, max_size)
    storage_name = file_generate_name(
        file.name or "upload",
        keep_original=getattr(settings, "FILES_KEEP_ORIGINAL_NAME", False),
    )

    file_instance = File(
        item_id=item_id,
        original_file_name=file.name or "unknown",
        file_type=content_type,
        file_size=file.size or 0,
        uploaded_by=uploaded_by,
        upload_finished_at=timezone.now(),
    )
    file_instance.file.save(storage_name, file, save=False)
    # The storage may have altered the name to avoid a collision.
    file_instance.file_name = PurePosixPath(file_instance.file.name).name

    try:
        file_instance.save()
    except Exception:
        logger.warning(
            "file_upload_aborted",
            original_name=file_instance.original_file_name,
            storage_name=file_instance.file.name,
        )
        if file_instance.file:
            file_instance.file.delete(save=False)
        raise

    logger.info(
        "file_uploaded",
        file_id=str(file_instance.id),
        original_name=file_instance.original_file_name,
        file_name=file_instance.file_name,
        file_type=content_type,
        size=file_instance.file_size,
    )
    return file_instance


@transaction.atomic
def upload_image(*, file: UploadedFile, uploaded_by=None, item_id=None) -> File:
    """Upload an image file."""
    return upload_file(
        file=file,
        uploaded_by=uploaded_by,
        item_id=item_id,
        allowed_types=ALLOWED_IMAGE_TYPES,
    )


@transaction.atomic
def upload_document(*, file: UploadedFile, uploaded_by=None, item_id=None) -> File:
    """Upload a document file (PDF only)."""
    return upload_file(
        file=file,
        uploaded_by=uploaded_by,
        item_id=item_id,
        allowed_types=ALLOWED_DOCUMENT_TYPES,
    )


@transaction.atomic
def delete_file(*, file_instance: File) -> None:
    """Delete a file from storage and the database."""
    file_id = str(file_instance.id)
    if file_instance.file:
        file_instance.file.delete(save=False)
    file_instance.delete()
    logger.info("file_deleted", file_id=file_id)
