"""
File upload path utilities.
"""

import uuid
from pathlib import Path

from django.core.exceptions import SuspiciousFileOperation
from django.utils.text import get_valid_filename


def file_generate_upload_path(instance, filename: str) -> str:
    """
    Generate the storage path for a file.
    Structure: uploads/{app_label}/{year}/{month}/{filename}

    The filename itself comes from file_generate_name().
    """
    from django.utils import timezone

    now = timezone.now()

    app_label = "general"
    if hasattr(instance, "_meta"):
        app_label = instance._meta.app_label

    return f"uploads/{app_label}/{now.year}/{now.month:02d}/{filename}"


def file_generate_name(original_filename: str, *, keep_original: bool = False) -> str:
    """
    Generate the storage basename of an upload.

    By default a uuid with the original extension (lowercased). With
    keep_original, the original name made safe for storage; the storage
    backend still de-duplicates it on collision.
    """
    if keep_original:
        try:
            return get_valid_filename(Path(original_filename).name)
        except SuspiciousFileOperation:
            pass
    ext = Path(original_filename).suffix.lower()
    return f"{uuid.uuid4().hex}{ext}"
