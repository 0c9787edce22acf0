"""Tests for settings that depend on optional packages."""

from django.conf import settings


def test_structlog_command_logging_disabled():
    # django_structlog's command logging imports django_extensions.
    assert settings.DJANGO_STRUCTLOG_COMMAND_LOGGING_ENABLED is False
    assert "django_extensions" not in settings.INSTALLED_APPS
