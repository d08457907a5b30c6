"""Structured logging configuration for formwright."""

import logging
import logging.config
from typing import Any


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """
    Configure structured logging for formwright.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Also write JSON records to this rotating file
    """
    config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "structured": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "structured",
                "level": level,
            },
        },
        "loggers": {
            "formwright": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": "WARNING",
        },
    }

    if log_file:
        config["formatters"]["json"] = {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(name)s %(levelname)s %(message)s",
        }
        config["handlers"]["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": log_file,
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
            "formatter": "json",
            "level": level,
        }
        config["loggers"]["formwright"]["handlers"].append("file")

    logging.config.dictConfig(config)


class ContextLogger(logging.LoggerAdapter):
    """Module logger that tags records with the form and field being processed.

    Bound context is prefixed to the message for the console format and is
    also set on the record, where the JSON file formatter picks it up:

        log = ContextLogger(__name__).bind(form="sandwich")
        log.info("Resolved")  # "[form=sandwich] Resolved"
    """

    def __init__(self, name: str, **context: Any):
        super().__init__(logging.getLogger(name), context)

    def bind(self, **context: Any) -> "ContextLogger":
        """Return a logger with ``context`` added to the current context."""
        return ContextLogger(self.logger.name, **{**self.extra, **context})

    def process(self, msg: Any, kwargs: Any) -> tuple[Any, Any]:
        if not self.extra:
            return msg, kwargs
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        tags = " ".join(f"{key}={value}" for key, value in self.extra.items())
        return f"[{tags}] {msg}", kwargs
