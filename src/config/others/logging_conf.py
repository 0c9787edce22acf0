"""
Logging configuration with structlog + django-structlog.

Development: colored, human-readable console output.
Production:  JSON lines, one object per log line.

Upload hooks log through the "src" logger tree; the ImageMagick wrapper
logs under "src.integrations", which stays at DEBUG outside production so
the exact convert/composite command lines are visible while configuring.
"""

import structlog

from src.config.env import env


# ── structlog shared processors ─────────────────────────────────────────

shared_processors: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]

# ── Environment-specific renderer ───────────────────────────────────────

if env.is_production:
    renderer = structlog.processors.JSONRenderer()
else:
    renderer = structlog.dev.ConsoleRenderer(colors=not env.is_test)


structlog.configure(
    processors=[
        *shared_processors,
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ],
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)


# ── Django LOGGING dict ─────────────────────────────────────────────────
# Routes Django's stdlib logging through structlog's ProcessorFormatter.

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "structlog": {
            "()": structlog.stdlib.ProcessorFormatter,
            "processors": [
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "structlog",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "INFO",
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
        "django.db.backends": {
            "handlers": ["console"],
            "level": "WARNING",
            "propagate": False,
        },
        "src": {
            "handlers": ["console"],
            "level": "DEBUG" if env.is_development else "INFO",
            "propagate": False,
        },
        "src.integrations": {
            "handlers": ["console"],
            "level": "INFO" if env.is_production else "DEBUG",
            "propagate": False,
        },
    },
}

# ── django-structlog ────────────────────────────────────────────────────

# Command logging needs django-extensions, which this project does not use.
DJANGO_STRUCTLOG_COMMAND_LOGGING_ENABLED = False
