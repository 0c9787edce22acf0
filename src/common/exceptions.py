"""
Application exceptions and django-ninja error handlers.

Services (and upload hooks) raise these exceptions; the API layer catches
them via ninja's exception handlers and returns proper HTTP responses.
"""

import structlog
from django.http import HttpRequest, HttpResponse
from ninja import NinjaAPI

logger = structlog.get_logger(__name__)


class ApplicationError(Exception):
    """Base for all business-logic errors."""

    def __init__(self, message: str, extra: dict | None = None):
        super().__init__(message)
        self.message = message
        self.extra = extra or {}


class NotFoundError(ApplicationError):
    """Resource not found."""
    pass


class PermissionDeniedError(ApplicationError):
    """User lacks required permissions."""
    pass


class ValidationError(ApplicationError):
    """Business rule validation failed."""
    pass


class FileProcessingError(ApplicationError):
    """An upload hook (backup, conversion, preprocess) failed on a file."""
    pass


class ConfigurationError(ApplicationError):
    """The server is not configured to perform the requested operation."""
    pass


def configure_exception_handlers(api: NinjaAPI) -> None:
    """Register custom exception handlers on a NinjaAPI instance."""

    @api.exception_handler(NotFoundError)
    def handle_not_found(request: HttpRequest, exc: NotFoundError) -> HttpResponse:
        return api.create_response(
            request,
            {"detail": exc.message, **exc.extra},
            status=404,
        )

    @api.exception_handler(PermissionDeniedError)
    def handle_permission_denied(request: HttpRequest, exc: PermissionDeniedError) -> HttpResponse:
        return api.create_response(
            request,
            {"detail": exc.message},
            status=403,
        )

    @api.exception_handler(ValidationError)
    def handle_validation(request: HttpRequest, exc: ValidationError) -> HttpResponse:
        return api.create_response(
            request,
            {"detail": exc.message, **exc.extra},
            status=400,
        )

    @api.exception_handler(FileProcessingError)
    def handle_file_processing(request: HttpRequest, exc: FileProcessingError) -> HttpResponse:
        return api.create_response(
            request,
            {"detail": exc.message, **exc.extra},
            status=422,
        )

    @api.exception_handler(ConfigurationError)
    def handle_configuration(request: HttpRequest, exc: ConfigurationError) -> HttpResponse:
        logger.error("configuration_error", message=exc.message, **exc.extra)
        return api.create_response(
            request,
            {"detail": "The server is misconfigured. Please contact an administrator."},
            status=500,
        )
