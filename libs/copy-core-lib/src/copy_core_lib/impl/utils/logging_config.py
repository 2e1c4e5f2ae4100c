"""Process-wide logging setup."""

import logging
import logging.config

from copy_core_lib.impl.settings.logging_settings import LoggingSettings

_LIBRARY_LOGGERS = ("sqlalchemy", "mlflow", "httpx", "urllib3")


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Install a console handler on the root logger using ``settings``."""
    settings = settings or LoggingSettings()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": {"format": settings.format}},
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                }
            },
            "root": {"level": settings.level, "handlers": ["console"]},
            "loggers": {name: {"level": settings.library_level} for name in _LIBRARY_LOGGERS},
        }
    )
    logging.getLogger(__name__).debug("Logging configured at level %s", settings.level)
