"""
File selectors (read operations).
"""

from django.db.models import QuerySet

from src.apps.files.models import File


def get_file_by_id(*, file_id) -> File | None:
    try:
        return File.objects.get(id=file_id)
    except File.DoesNotExist:
        return None


def get_item_files(*, item_id) -> QuerySet[File]:
    return File.objects.filter(item_id=item_id).order_by("created_at")
