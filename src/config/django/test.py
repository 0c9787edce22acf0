"""
Test settings.

Optimized for speed. Uses SQLite, simple hasher, in-memory storage for
everything but media (tests point MEDIA_ROOT at a tmp dir).
"""

from src.config.django.base import *  # noqa: F401, F403

# ── Speed ───────────────────────────────────────────────────────────────

DEBUG = False
PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

# ── Database (SQLite for fast test runs) ────────────────────────────────

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    },
}

# ── Static files (no manifest in tests) ────────────────────────────────

STORAGES = {
    "default": {
        "BACKEND": "django.core.files.storage.FileSystemStorage",
    },
    "staticfiles": {
        "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage",
    },
}

# ── Cache (local memory) ───────────────────────────────────────────────

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    },
}

# ── ImageMagick is mocked in tests ─────────────────────────────────────

FILE_MODIFY_CONVERT_TIMEOUT = 5

# ── structlog (let structlog.testing.capture_logs see module loggers) ──

import structlog  # noqa: E402

structlog.configure(cache_logger_on_first_use=False)
