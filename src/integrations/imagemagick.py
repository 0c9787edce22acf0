"""
ImageMagick command-line wrapper.

Calls the external `convert` and `composite` binaries via subprocess.
Commands are passed as argument lists, never through a shell.

Configuration:
    PATH_TO_CONVERT — directory holding the ImageMagick binaries.
                      Must be an existing directory.
    FILE_MODIFY_CONVERT_TIMEOUT — seconds before a call is killed.
"""

import os
import shlex
import subprocess

import structlog
from django.conf import settings

from src.common.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)

CONVERT_COMMAND = "convert"
COMPOSITE_COMMAND = "composite"
DEFAULT_TIMEOUT = 120


class ImageMagickError(Exception):
    """An ImageMagick command could not run or exited with an error."""

    def __init__(self, message: str, *, returncode: int | None = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


def _get_timeout() -> int:
    return getattr(settings, "FILE_MODIFY_CONVERT_TIMEOUT", DEFAULT_TIMEOUT)


def get_binary_path(command: str = CONVERT_COMMAND) -> str:
    """
    Resolve the full path of an ImageMagick binary.

    Raises:
        ConfigurationError if PATH_TO_CONVERT is not an existing directory.
    """
    raw_path = getattr(settings, "PATH_TO_CONVERT", "") or ""
    clean_path = os.path.realpath(raw_path) if raw_path else ""
    if not clean_path or not os.path.isdir(clean_path):
        raise ConfigurationError(
            "ImageMagick is not properly configured: invalid directory given "
            "for the ImageMagick command!",
            extra={"path_to_convert": raw_path},
        )
    return os.path.join(clean_path, command)


def split_arguments(arguments: str) -> list[str]:
    """Split a user-supplied argument string the way a POSIX shell would."""
    try:
        return shlex.split(arguments)
    except ValueError as e:
        raise ImageMagickError(f"Invalid ImageMagick arguments: {e}")


def _run(cmd: list[str]) -> None:
    logger.debug("imagemagick_command", cmd=cmd)
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=_get_timeout(),
        )
    except FileNotFoundError:
        raise ImageMagickError(f"ImageMagick binary not found at '{cmd[0]}'.")
    except OSError as e:
        raise ImageMagickError(f"ImageMagick binary at '{cmd[0]}' could not run: {e}")
    except subprocess.TimeoutExpired:
        raise ImageMagickError(f"ImageMagick timed out ({_get_timeout()}s).")

    if result.returncode != 0:
        error_msg = result.stderr.strip() or "Unknown error"
        logger.error(
            "imagemagick_failed",
            binary=cmd[0],
            return_code=result.returncode,
            stderr=error_msg,
        )
        raise ImageMagickError(
            f"ImageMagick exited with status {result.returncode}: {error_msg}",
            returncode=result.returncode,
            stderr=error_msg,
        )


def convert(*, source: str, destination: str, arguments: str) -> None:
    """
    Run `convert <source> <arguments...> <destination>`.

    Raises:
        ConfigurationError if the binary directory is not configured.
        ImageMagickError on any failure of the command itself.
    """
    cmd = [get_binary_path(CONVERT_COMMAND), source, *split_arguments(arguments), destination]
    _run(cmd)


def composite(
    *,
    overlay: str,
    source: str,
    destination: str,
    gravity: str = "center",
    geometry: str = "+0+0",
    dissolve: int = 100,
) -> None:
    """
    Run `composite` to lay `overlay` over `source`, writing `destination`.

    Raises:
        ConfigurationError if the binary directory is not configured.
        ImageMagickError on any failure of the command itself.
    """
    cmd = [
        get_binary_path(COMPOSITE_COMMAND),
        "-dissolve", str(dissolve),
        "-gravity", gravity,
        "-geometry", geometry,
        overlay,
        source,
        destination,
    ]
    _run(cmd)
