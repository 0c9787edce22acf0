"""
File Modify services.

Upload hook flow (new files only, before the row is inserted):
  1. Back up the original to <backup_path>/<item_id>/ if configured
  2. Skip steps 3-4 when the file is larger than skip_filesize
  3. Convert images with ImageMagick "convert" + convert_append
  4. Run the preprocess command (watermark by default) if enabled
  5. Rename the stored file with the rename command if enabled and the
     host keeps original file names

Steps 1, 3 and 4 abort the upload with FileProcessingError on failure.
"""

import os
import shlex

import structlog
from django.conf import settings
from django.db import transaction
from django.utils.module_loading import import_string

from src.apps.file_modify import storage as file_storage
from src.apps.file_modify.models import OPTION_FIELDS, FileModifyOptions
from src.apps.file_modify.selectors import get_options
from src.apps.file_modify.utils import (
    available_backup_path,
    backup_file_name,
    backup_item_dir,
    split_name,
    timestamp,
)
from src.apps.files.models import File
from src.common.exceptions import FileProcessingError, ValidationError
from src.integrations import imagemagick

logger = structlog.get_logger(__name__)

DEFAULT_PREPROCESSOR = "src.apps.file_modify.preprocess.watermark"
DEFAULT_RENAMER = "src.apps.file_modify.rename.slugify_filename"


# ── Upload hook ─────────────────────────────────────────────────────────


def before_save_file(*, file: File, insert: bool, options: FileModifyOptions | None = None) -> None:
    """
    Transform an uploaded file before its record is saved.

    Does nothing on updates or when the record has no stored content.

    Raises:
        FileProcessingError if backup, conversion or preprocess fails.
        ConfigurationError if ImageMagick is needed but not configured.
    """
    if not insert or not file.file:
        return

    if options is None:
        options = get_options()

    if backup_file(file=file, options=options) is False:
        raise FileProcessingError(
            f'Unable to backup original file "{file.original_file_name}" before processing it.',
            extra={"file_name": file.file_name},
        )

    skip = False
    if options.skip_filesize and file.file_size > options.skip_filesize:
        skip = True
        logger.warning(
            "file_modify_skipped",
            original_name=file.original_file_name,
            size=file.file_size,
            skip_filesize=options.skip_filesize,
        )

    if not skip:
        if file.is_image:
            convert_file(file=file, options=options)

        if options.preprocess:
            preprocess_file(file=file, parameters=options.preprocess_parameters)

    if options.rename and getattr(settings, "FILES_KEEP_ORIGINAL_NAME", False):
        rename_file(file=file)


# ── Steps ───────────────────────────────────────────────────────────────


def backup_file(*, file: File, options: FileModifyOptions) -> bool | None:
    """
    Copy the original upload into the backup directory.

    Returns:
        None if backups are disabled, True on success, False on failure.
    """
    if not options.backup_path:
        return None

    item_dir = backup_item_dir(options.backup_path, file.item_id)
    try:
        item_dir.mkdir(mode=0o755, parents=True, exist_ok=True)
    except OSError as e:
        logger.error("file_modify_backup_failed", path=str(item_dir), error=str(e))
        return False

    target = available_backup_path(item_dir, backup_file_name(file.original_file_name, file.file_name))
    try:
        file_storage.copy_to(file, target)
    except FileExistsError as e:
        logger.error("file_modify_backup_failed", path=str(target), error=str(e))
        return False
    except OSError as e:
        logger.error("file_modify_backup_failed", path=str(target), error=str(e))
        target.unlink(missing_ok=True)
        return False

    logger.info(
        "file_modify_backup_created",
        original_name=file.original_file_name,
        backup=str(target),
    )
    return True


def convert_file(*, file: File, options: FileModifyOptions) -> bool:
    """
    Convert the stored image with ImageMagick using `convert_append`.

    The output is written to a temporary file, then swapped in place of
    the stored content. Returns True (also when there is nothing to do).
    """
    append = options.convert_append.strip()
    if not append:
        return True

    stamp = timestamp()
    stem, ext = split_name(file.file_name)

    with file_storage.working_directory() as workdir:
        source = file_storage.local_source(file, workdir)
        output = workdir / f"{stem}_{stamp}{ext}"
        try:
            imagemagick.convert(source=str(source), destination=str(output), arguments=append)
        except imagemagick.ImageMagickError as e:
            raise FileProcessingError(
                f'Something went wrong with image conversion for file "{file.original_file_name}".',
                extra={"error": str(e)},
            )
        file_storage.replace_content(file, output, stamp)

    logger.info(
        "file_modify_converted",
        original_name=file.original_file_name,
        file_name=file.file_name,
        arguments=append,
        size=file.file_size,
    )
    return True


def preprocess_file(*, file: File, parameters: str) -> None:
    """
    Run the configured preprocess command.

    The command returns an empty value on success, or an error message
    (True meaning "failed, no details").
    """
    preprocessor = import_string(getattr(settings, "FILE_MODIFY_PREPROCESSOR", DEFAULT_PREPROCESSOR))
    result = preprocessor(file, parameters)
    if result:
        detail = "." if result is True else f": {result}"
        raise FileProcessingError(
            f'Something went wrong when applying a command on the uploaded file '
            f'"{file.original_file_name}"{detail}',
            extra={"file_name": file.file_name},
        )
    logger.info("file_modify_preprocessed", original_name=file.original_file_name)


def rename_file(*, file: File) -> str | None:
    """
    Rename the stored file with the configured rename command.

    The record is updated in place (`file`, `file_name` and
    `original_file_name`). Returns the new name, or None if unchanged.
    """
    renamer = import_string(getattr(settings, "FILE_MODIFY_RENAMER", DEFAULT_RENAMER))
    new_name = renamer(file)
    if not new_name or new_name == file.file_name:
        return None

    old_name = file.file_name
    file_storage.move(file, new_name)
    file.original_file_name = file.file_name

    logger.info("file_modify_renamed", old_name=old_name, new_name=file.file_name)
    return file.file_name


# ── Options (admin config form) ─────────────────────────────────────────


def normalize_backup_path(value: str | None) -> str:
    """
    Absolute, symlink-free form of a backup directory ("" stays "").

    Raises:
        ValidationError if the directory does not exist.
    """
    value = (value or "").strip()
    if not value:
        return ""
    real_path = os.path.realpath(value)
    if not os.path.isdir(real_path):
        raise ValidationError(
            f"Backup directory '{value}' does not exist.",
            extra={"field": "backup_path"},
        )
    return real_path


def validate_convert_append(value: str | None) -> str:
    value = (value or "").strip()
    try:
        shlex.split(value)
    except ValueError as e:
        raise ValidationError(
            f"Invalid convert arguments: {e}",
            extra={"field": "convert_append"},
        )
    return value


@transaction.atomic
def update_options(*, post: dict) -> FileModifyOptions:
    """
    Save the options present in `post`; unknown keys are ignored and
    absent options keep their current value.
    """
    options = get_options()

    if "backup_path" in post:
        post = {**post, "backup_path": normalize_backup_path(post["backup_path"])}
    if "convert_append" in post:
        post = {**post, "convert_append": validate_convert_append(post["convert_append"])}
    if post.get("skip_filesize") is None and "skip_filesize" in post:
        post = {**post, "skip_filesize": 0}

    changed = []
    for key in OPTION_FIELDS:
        if key in post:
            setattr(options, key, post[key])
            changed.append(key)

    options.save()
    logger.info("file_modify_options_updated", fields=changed)
    return options
