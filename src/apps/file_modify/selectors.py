"""
File Modify selectors (read operations).
"""

from src.apps.file_modify.models import FileModifyOptions


def get_options() -> FileModifyOptions:
    """Current options, installing the defaults on first call."""
    return FileModifyOptions.load()
