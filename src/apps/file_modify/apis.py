"""
File Modify API endpoints.

Mounted at: /api/v2/file-modify/

Staff only. Same behaviour as the admin form: the backup path is stored
as an absolute real path and options not sent are left untouched.
"""

from django.http import HttpRequest
from ninja import Router
from ninja_jwt.authentication import JWTAuth

from src.apps.file_modify import services as fm_services
from src.apps.file_modify.models import OPTION_FIELDS, FileModifyOptions
from src.apps.file_modify.schemas import ErrorSchema, OptionsSchema, OptionsUpdateSchema
from src.apps.file_modify.selectors import get_options
from src.common.permissions import require_staff

router = Router(tags=["File Modify"])


def _options_out(options: FileModifyOptions) -> dict:
    data = {key: getattr(options, key) for key in OPTION_FIELDS}
    data["updated_at"] = options.updated_at.isoformat()
    return data


@router.get(
    "/options",
    response={200: OptionsSchema, 403: ErrorSchema},
    auth=JWTAuth(),
    summary="Current File Modify options",
)
def read_options(request: HttpRequest):
    require_staff(request.auth)
    return 200, _options_out(get_options())


@router.put(
    "/options",
    response={200: OptionsSchema, 400: ErrorSchema, 403: ErrorSchema},
    auth=JWTAuth(),
    summary="Update File Modify options",
)
def update_options(request: HttpRequest, payload: OptionsUpdateSchema):
    require_staff(request.auth)
    # null means "leave unchanged", like an absent field.
    post = {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None}
    options = fm_services.update_options(post=post)
    return 200, _options_out(options)
