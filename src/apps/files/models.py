from pathlib import PurePosixPath

from django.conf import settings
from django.db import models

from src.apps.files.utils import file_generate_upload_path
from src.common.models import BaseModel


class File(BaseModel):
    """
    An uploaded file. The content lives in the default storage under
    `file.name`; `file_name` is the basename of that path.

    Saving a new File fires the upload hooks registered by the
    file_modify app (backup, conversion, rename) before the row is inserted.
    """

    file = models.FileField(
        upload_to=file_generate_upload_path,
        max_length=512,
        blank=True,
        null=True,
    )
    item_id = models.UUIDField(
        blank=True,
        null=True,
        db_index=True,
        help_text="Archive item this file belongs to.",
    )
    original_file_name = models.TextField()
    file_name = models.CharField(max_length=255, unique=True)
    file_type = models.CharField(max_length=255)
    file_size = models.PositiveBigIntegerField(default=0)

    upload_finished_at = models.DateTimeField(blank=True, null=True)

    uploaded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="uploaded_files",
    )

    @property
    def is_valid(self) -> bool:
        return bool(self.upload_finished_at)

    @property
    def is_image(self) -> bool:
        return self.file_type.partition("/")[0] == "image"

    @property
    def storage_dir(self) -> str:
        """Directory part of the storage name ("" at the storage root)."""
        if not self.file:
            return ""
        parent = str(PurePosixPath(self.file.name).parent)
        return "" if parent == "." else parent

    @property
    def url(self) -> str:
        if self.file:
            return self.file.url
        return ""

    class Meta:
        db_table = "files"
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.original_file_name} ({self.file_type})"
