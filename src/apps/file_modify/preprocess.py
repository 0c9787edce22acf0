"""
Preprocess commands.

A preprocess command is any callable `(file, parameters) -> str` named by
the FILE_MODIFY_PREPROCESSOR setting. It may change the stored content of
the file through src.apps.file_modify.storage. It returns "" on success
and an error message otherwise.

The default one watermarks images with ImageMagick "composite".
"""

import os
from dataclasses import dataclass

import structlog

from src.apps.file_modify import storage as file_storage
from src.apps.file_modify.utils import split_name, timestamp
from src.apps.files.models import File
from src.integrations import imagemagick

logger = structlog.get_logger(__name__)

GRAVITIES = {
    "northwest": "NorthWest",
    "north": "North",
    "northeast": "NorthEast",
    "west": "West",
    "center": "Center",
    "east": "East",
    "southwest": "SouthWest",
    "south": "South",
    "southeast": "SouthEast",
}


@dataclass(frozen=True)
class WatermarkParameters:
    overlay: str
    gravity: str = "South"
    offset: int = 0
    dissolve: int = 100

    @property
    def geometry(self) -> str:
        # The offset moves the overlay away from the edge it sticks to.
        if self.gravity in ("North", "South"):
            return f"+0+{self.offset}"
        if self.gravity in ("East", "West"):
            return f"+{self.offset}+0"
        if self.gravity == "Center":
            return "+0+0"
        return f"+{self.offset}+{self.offset}"


def parse_watermark_parameters(parameters: str) -> WatermarkParameters:
    """
    Parse "<image path>[, <gravity>[, <offset>[, <dissolve %>]]]".

    Raises:
        ValueError with a readable message on bad input.
    """
    parts = [p.strip() for p in (parameters or "").split(",")]
    if not parts or not parts[0]:
        raise ValueError("No watermark image given.")
    if len(parts) > 4:
        raise ValueError("Too many watermark parameters (expected at most 4).")

    overlay = parts[0]
    gravity = "South"
    offset = 0
    dissolve = 100

    if len(parts) > 1 and parts[1]:
        gravity = GRAVITIES.get(parts[1].lower())
        if gravity is None:
            raise ValueError(f"Unknown gravity '{parts[1]}'.")
    if len(parts) > 2 and parts[2]:
        try:
            offset = int(parts[2])
        except ValueError:
            raise ValueError(f"Watermark offset must be an integer, got '{parts[2]}'.")
        if offset < 0:
            raise ValueError("Watermark offset must be positive.")
    if len(parts) > 3 and parts[3]:
        try:
            dissolve = int(parts[3])
        except ValueError:
            raise ValueError(f"Watermark dissolve must be an integer, got '{parts[3]}'.")
        if not 0 <= dissolve <= 100:
            raise ValueError("Watermark dissolve must be between 0 and 100.")

    return WatermarkParameters(overlay=overlay, gravity=gravity, offset=offset, dissolve=dissolve)


def watermark(file: File, parameters: str) -> str:
    """Lay a watermark image over uploaded images. Other files are left alone."""
    if not file.is_image:
        return ""

    try:
        params = parse_watermark_parameters(parameters)
    except ValueError as e:
        return str(e)
    if not os.path.isfile(params.overlay):
        return f"Watermark image '{params.overlay}' not found."

    stamp = timestamp()
    stem, ext = split_name(file.file_name)

    with file_storage.working_directory() as workdir:
        source = file_storage.local_source(file, workdir)
        output = workdir / f"{stem}_{stamp}_wm{ext}"
        try:
            imagemagick.composite(
                overlay=params.overlay,
                source=str(source),
                destination=str(output),
                gravity=params.gravity,
                geometry=params.geometry,
                dissolve=params.dissolve,
            )
        except imagemagick.ImageMagickError as e:
            return str(e)
        file_storage.replace_content(file, output, stamp)

    logger.debug("file_modify_watermarked", file_name=file.file_name, overlay=params.overlay)
    return ""
