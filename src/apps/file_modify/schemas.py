"""
File Modify API schemas.
"""

from ninja import Field, Schema


class OptionsSchema(Schema):
    backup_path: str
    skip_filesize: int
    convert_append: str
    preprocess: bool
    preprocess_parameters: str
    rename: bool
    updated_at: str


class OptionsUpdateSchema(Schema):
    backup_path: str | None = None
    skip_filesize: int | None = Field(default=None, ge=0)
    convert_append: str | None = None
    preprocess: bool | None = None
    preprocess_parameters: str | None = None
    rename: bool | None = None


class ErrorSchema(Schema):
    detail: str
