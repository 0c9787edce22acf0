"""
Rename commands.

A rename command is any callable `(file) -> str` named by the
FILE_MODIFY_RENAMER setting. It returns the new basename of the stored
file, or "" to keep the current one.
"""

from django.utils.text import slugify

from src.apps.file_modify.utils import split_name
from src.apps.files.models import File


def slugify_filename(file: File) -> str:
    """
    "Été 2015 (1).JPG" -> "ete-2015-1.jpg".

    Returns "" when nothing usable is left of the name.
    """
    stem, ext = split_name(file.file_name)
    slug = slugify(stem)
    if not slug:
        return ""
    return f"{slug}{ext.lower()}"
