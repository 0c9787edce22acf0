"""
File API schemas.
"""

from uuid import UUID

from ninja import Schema


class FileSchema(Schema):
    id: UUID
    item_id: UUID | None = None
    original_file_name: str
    file_name: str
    file_type: str
    file_size: int
    url: str
    created_at: str


class ErrorSchema(Schema):
    detail: str
