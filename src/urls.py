"""
Root URL configuration.

- /api/v2/              → Main NinjaExtraAPI (JWT auth, REST endpoints)
- /api/v2/files/        → File uploads (runs the File Modify hooks)
- /api/v2/file-modify/  → File Modify options (staff)
- /admin/               → Django admin (File Modify options form)
"""

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path
from ninja_extra import NinjaExtraAPI
from ninja_jwt.controller import NinjaJWTDefaultController

from src.apps.file_modify.apis import router as file_modify_router
from src.apps.files.apis import router as files_router
from src.common.exceptions import configure_exception_handlers

# ── Main API ────────────────────────────────────────────────────────────

api = NinjaExtraAPI(
    title="File Modify API",
    version="2.3.0",
    description="Uploads with backup, conversion and renaming hooks",
    urls_namespace="api",
)

configure_exception_handlers(api)

# ninja_jwt: /api/v2/token/pair, /api/v2/token/refresh, /api/v2/token/verify
api.register_controllers(NinjaJWTDefaultController)

api.add_router("/files", files_router)
api.add_router("/file-modify", file_modify_router)

# ── URL patterns ────────────────────────────────────────────────────────

urlpatterns = [
    path("api/v2/", api.urls),
    path("admin/", admin.site.urls),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
