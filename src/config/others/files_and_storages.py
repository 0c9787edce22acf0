"""
Static files, media files, and storage configuration.
"""

from src.config.env import BASE_DIR, env

# ── Static files ────────────────────────────────────────────────────────

STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"

# ── Media files ─────────────────────────────────────────────────────────
# Uploaded files land here through the default storage. The file_modify
# app only talks to the storage API, so any backend works for it.

MEDIA_URL = "/media/"
MEDIA_ROOT = BASE_DIR / "mediafiles"

STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage",
    },
}

# ── Upload naming ───────────────────────────────────────────────────────

FILES_KEEP_ORIGINAL_NAME = env.FILES_KEEP_ORIGINAL_NAME
FILES_MAX_UPLOAD_SIZE = env.FILES_MAX_UPLOAD_SIZE
