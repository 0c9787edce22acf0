"""
File Modify options.

A single row (pk=1) holds the options edited from the admin. It is
created on first access with values seeded from the environment.
"""

from pathlib import Path

import structlog
from django.db import models

from src.common.exceptions import PermissionDeniedError
from src.config.env import env

logger = structlog.get_logger(__name__)

WATERMARK_PATH = Path(__file__).resolve().parent / "static" / "file_modify" / "watermark.png"

OPTION_FIELDS = (
    "backup_path",
    "skip_filesize",
    "convert_append",
    "preprocess",
    "preprocess_parameters",
    "rename",
)


def _install_defaults() -> dict:
    return {
        "backup_path": env.FILE_MODIFY_BACKUP_PATH,
        "skip_filesize": env.FILE_MODIFY_SKIP_FILESIZE,
        "convert_append": env.FILE_MODIFY_CONVERT_APPEND,
        "preprocess": env.FILE_MODIFY_PREPROCESS,
        "preprocess_parameters": (
            env.FILE_MODIFY_PREPROCESS_PARAMETERS or f"{WATERMARK_PATH}, South, 25, 95"
        ),
        "rename": env.FILE_MODIFY_RENAME,
    }


class FileModifyOptions(models.Model):
    SINGLETON_PK = 1

    id = models.PositiveSmallIntegerField(primary_key=True, editable=False)

    backup_path = models.CharField(
        max_length=1024,
        blank=True,
        default="",
        help_text="Directory where originals are copied before any change. Empty disables backups.",
    )
    skip_filesize = models.PositiveBigIntegerField(
        default=0,
        help_text="Files larger than this many bytes are not converted nor preprocessed. 0 = no limit.",
    )
    convert_append = models.CharField(
        max_length=1024,
        blank=True,
        default="",
        help_text='Arguments given to ImageMagick "convert", e.g. "-resize 1600x1600 -quality 85". Empty disables conversion.',
    )
    preprocess = models.BooleanField(
        default=False,
        help_text="Run the preprocess command on each upload.",
    )
    preprocess_parameters = models.TextField(
        blank=True,
        default="",
        help_text='Parameters of the preprocess command. Watermark: "<image path>, <gravity>, <offset>, <dissolve %>".',
    )
    rename = models.BooleanField(
        default=False,
        help_text="Rename stored files with the rename command. Needs FILES_KEEP_ORIGINAL_NAME.",
    )

    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "file_modify_options"
        verbose_name = "File Modify options"
        verbose_name_plural = "File Modify options"

    def __str__(self) -> str:
        return "File Modify options"

    def save(self, *args, **kwargs):
        self.pk = self.SINGLETON_PK
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise PermissionDeniedError("File Modify options cannot be deleted.")

    @classmethod
    def load(cls) -> "FileModifyOptions":
        obj, created = cls.objects.get_or_create(pk=cls.SINGLETON_PK, defaults=_install_defaults())
        if created:
            logger.info("file_modify_options_installed")
        return obj
