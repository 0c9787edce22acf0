"""
Environment configuration via pydantic_settings.

This is the SINGLE SOURCE OF TRUTH for all environment variables.
Django settings files import from here — they never read os.environ directly.

Usage:
    from src.config.env import env
    env.SECRET_KEY
    env.PATH_TO_CONVERT

Environment switching:
    - DJANGO_ENV is read ONCE here to determine the environment.
    - DJANGO_SETTINGS_MODULE is set accordingly in manage.py / wsgi.py / asgi.py.
    - The .env file is loaded automatically (defaults to .env.backend).
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parent.parent.parent  # project root (above src/)


class AppSettings(BaseSettings):
    """
    All environment variables in one place.
    Fields have sensible dev defaults; production overrides via .env.backend.
    """

    model_config = SettingsConfigDict(
        env_file=".env.backend",
        env_file_encoding="utf-8",
        extra="ignore",  # ignore env vars not declared here
        case_sensitive=False,
    )

    # ── Environment switch ──────────────────────────────────────────────
    # "development" | "production" | "test"
    DJANGO_ENV: str = Field(default="development")

    # ── Django core ─────────────────────────────────────────────────────
    SECRET_KEY: str = "insecure-dev-key-change-in-production"
    DEBUG: bool = True
    ALLOWED_HOSTS: list[str] = ["localhost", "127.0.0.1"]

    # ── Database ────────────────────────────────────────────────────────
    POSTGRES_USER: str = "filemodify"
    POSTGRES_PASSWORD: str = "changeme_postgres"
    POSTGRES_DB: str = "file_modify"
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432

    @property
    def DATABASE_URL(self) -> str:
        return (
            f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
        )

    # ── Session / Cookies ───────────────────────────────────────────────
    SESSION_COOKIE_DOMAIN: str = ""

    # ── JWT ─────────────────────────────────────────────────────────────

    JWT_ACCESS_TOKEN_LIFETIME_MINUTES: int = 30
    JWT_REFRESH_TOKEN_LIFETIME_DAYS: int = 7
    JWT_SIGNING_KEY: str = ""

    @property
    def jwt_signing_key(self) -> str:
        return self.JWT_SIGNING_KEY or self.SECRET_KEY

    # ── Uploads ─────────────────────────────────────────────────────────
    # Keep the uploaded file name as storage name instead of a random uuid.
    FILES_KEEP_ORIGINAL_NAME: bool = False
    FILES_MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024

    # ── ImageMagick ─────────────────────────────────────────────────────
    # Directory holding the `convert` and `composite` binaries.
    PATH_TO_CONVERT: str = "/usr/bin"

    # ── File Modify (initial option values, used once at install) ───────
    FILE_MODIFY_BACKUP_PATH: str = ""
    FILE_MODIFY_SKIP_FILESIZE: int = 0
    FILE_MODIFY_CONVERT_APPEND: str = ""
    FILE_MODIFY_PREPROCESS: bool = False
    FILE_MODIFY_PREPROCESS_PARAMETERS: str = ""
    FILE_MODIFY_RENAME: bool = False
    FILE_MODIFY_CONVERT_TIMEOUT: int = 120

    @field_validator("DJANGO_ENV")
    @classmethod
    def validate_env(cls, v: str) -> str:
        allowed = {"development", "production", "test"}
        if v not in allowed:
            msg = f"DJANGO_ENV must be one of {allowed}, got '{v}'"
            raise ValueError(msg)
        return v

    @field_validator("FILE_MODIFY_SKIP_FILESIZE")
    @classmethod
    def validate_skip_filesize(cls, v: int) -> int:
        if v < 0:
            raise ValueError("FILE_MODIFY_SKIP_FILESIZE must be >= 0")
        return v

    @property
    def is_production(self) -> bool:
        return self.DJANGO_ENV == "production"

    @property
    def is_development(self) -> bool:
        return self.DJANGO_ENV == "development"

    @property
    def is_test(self) -> bool:
        return self.DJANGO_ENV == "test"


# ── Singleton ───────────────────────────────────────────────────────────
# Instantiated once at import time. All Django settings files use this.
env = AppSettings()
