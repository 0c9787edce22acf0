"""
Storage operations on an uploaded File.

Everything goes through the File's storage backend (no direct filesystem
access to MEDIA_ROOT), so the hooks work with any Django storage.
Local copies are made in a temporary directory when ImageMagick needs a
real path.
"""

import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path, PurePosixPath

import structlog
from django.core.files import File as DjangoFile

from src.apps.file_modify.utils import split_name
from src.apps.files.models import File

logger = structlog.get_logger(__name__)


@contextmanager
def working_directory():
    """Private temporary directory, removed on exit."""
    with tempfile.TemporaryDirectory(prefix="file_modify_") as tmpdir:
        yield Path(tmpdir)


def local_source(file: File, workdir: Path) -> Path:
    """
    A local path holding the stored content of `file`.

    The storage's own path is used when it has one, otherwise the content
    is copied into `workdir` (keeping the extension, which ImageMagick
    uses to pick the format).
    """
    storage = file.file.storage
    try:
        return Path(storage.path(file.file.name))
    except NotImplementedError:
        pass

    _, ext = split_name(file.file_name)
    target = workdir / f"source{ext}"
    with storage.open(file.file.name, "rb") as src, open(target, "wb") as dst:
        shutil.copyfileobj(src, dst)
    return target


def copy_to(file: File, destination: Path) -> None:
    """Copy the stored content to `destination`, which must not exist."""
    with file.file.storage.open(file.file.name, "rb") as src, open(destination, "xb") as dst:
        shutil.copyfileobj(src, dst)


def _sync_name(file: File, saved_name: str) -> None:
    file.file.name = saved_name
    file.file_name = PurePosixPath(saved_name).name


def replace_content(file: File, new_content: Path, stamp: str) -> None:
    """
    Replace the stored content of `file` with the local file `new_content`.

    Done in three steps: the original is saved aside as
    "<stem>_<stamp>_ori<ext>", the new content takes the original name,
    then the aside copy is deleted. If writing the new content fails, the
    original is put back before the error propagates.
    """
    storage = file.file.storage
    name = file.file.name
    stem, ext = split_name(name)

    with storage.open(name, "rb") as fh:
        aside_name = storage.save(f"{stem}_{stamp}_ori{ext}", fh)
    storage.delete(name)

    try:
        with open(new_content, "rb") as fh:
            saved_name = storage.save(name, DjangoFile(fh))
    except Exception:
        with storage.open(aside_name, "rb") as fh:
            storage.save(name, fh)
        storage.delete(aside_name)
        raise

    storage.delete(aside_name)
    if saved_name != name:
        _sync_name(file, saved_name)
    file.file_size = storage.size(file.file.name)


def move(file: File, new_basename: str) -> str:
    """
    Move the stored content to `new_basename` in the same directory.

    Returns the final storage name, which the storage may have altered to
    avoid a collision. Updates `file.file` and `file.file_name`.
    """
    storage = file.file.storage
    old_name = file.file.name
    directory = file.storage_dir
    target = f"{directory}/{new_basename}" if directory else new_basename

    with storage.open(old_name, "rb") as fh:
        saved_name = storage.save(target, fh)
    storage.delete(old_name)

    _sync_name(file, saved_name)
    logger.debug("file_modify_storage_moved", old_name=old_name, new_name=saved_name)
    return saved_name
