"""
Naming helpers for backups and temporary files.
"""

import glob
import os
from pathlib import Path

from django.utils import timezone

UNASSIGNED_DIR = "unassigned"


def split_name(filename: str) -> tuple[str, str]:
    """Split "a/b/photo.tar.gz" into ("a/b/photo.tar", ".gz")."""
    return os.path.splitext(filename)


def timestamp() -> str:
    """Local time as YYYYmmdd-HHMMSS, used to tag temporary names."""
    return timezone.localtime().strftime("%Y%m%d-%H%M%S")


def stem_is_taken(folder: Path, stem: str) -> bool:
    """True if `folder` holds `stem` itself or any `stem.<something>`."""
    if (folder / stem).exists():
        return True
    return any(folder.glob(glob.escape(stem) + ".*"))


def available_backup_path(folder: Path, filename: str) -> Path:
    """
    Path inside `folder` where `filename` can be copied without
    overwriting anything.

    "photo.jpg" stays "photo.jpg" when free. Otherwise the first free stem
    of photo.1, photo.2, ... is used ("photo.1.jpg"). A stem counts as
    taken when any file shares it, whatever its extension.
    """
    target = folder / filename
    if not target.exists():
        return target

    stem, ext = split_name(filename)
    candidate = stem
    i = 1
    while stem_is_taken(folder, candidate):
        candidate = f"{stem}.{i}"
        i += 1
    return folder / f"{candidate}{ext}"


def backup_file_name(original_file_name: str, fallback: str) -> str:
    """Basename of the upload's original name, or `fallback` if unusable."""
    name = Path(original_file_name or "").name
    if name in ("", ".", ".."):
        return fallback
    return name


def backup_item_dir(backup_path: str, item_id) -> Path:
    return Path(backup_path) / (str(item_id) if item_id else UNASSIGNED_DIR)
