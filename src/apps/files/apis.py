"""
File API endpoints.

Mounted at: /api/v2/files/

Uploads go through files.services.upload_file, so they run the same
upload hooks (backup, conversion, rename) as any other save.
"""

from uuid import UUID

from django.http import HttpRequest
from ninja import File as FileParam, Form, Router, UploadedFile as NinjaFile
from ninja_jwt.authentication import JWTAuth

from src.apps.files import selectors as file_selectors
from src.apps.files import services as file_services
from src.apps.files.models import File
from src.apps.files.schemas import ErrorSchema, FileSchema
from src.common.exceptions import NotFoundError

router = Router(tags=["Files"])


def _file_out(f: File) -> dict:
    return {
        "id": f.id,
        "item_id": f.item_id,
        "original_file_name": f.original_file_name,
        "file_name": f.file_name,
        "file_type": f.file_type,
        "file_size": f.file_size,
        "url": f.url,
        "created_at": f.created_at.isoformat(),
    }


@router.post(
    "/",
    response={201: FileSchema, 400: ErrorSchema, 422: ErrorSchema},
    auth=JWTAuth(),
    summary="Upload a file",
)
def upload(
    request: HttpRequest,
    file: NinjaFile = FileParam(...),
    item_id: UUID | None = Form(None),
):
    instance = file_services.upload_file(
        file=file,
        uploaded_by=request.auth,
        item_id=item_id,
    )
    return 201, _file_out(instance)


@router.get(
    "/{file_id}",
    response={200: FileSchema, 404: ErrorSchema},
    auth=JWTAuth(),
    summary="File details",
)
def detail(request: HttpRequest, file_id: UUID):
    instance = file_selectors.get_file_by_id(file_id=file_id)
    if instance is None:
        raise NotFoundError("File not found.")
    return 200, _file_out(instance)
