import logging
import os
from logging import config as logging_config
from typing import Any

LOG_FORMAT = "%(asctime)s.%(msecs)d | %(levelname)s | %(name)s | %(message)s"  # noqa: WPS323
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"  # noqa: WPS323

NOISY_LOGGERS = ("httpx", "httpcore")


def build_log_config(level: str | None = None, log_file_path: str | None = None) -> dict[str, Any]:
    """Console logging plus an optional rotating file, both at `level`."""
    level = level or os.getenv("LOGGER_LEVEL", "INFO")
    log_file_path = log_file_path or os.getenv("LOG_FILE_PATH")

    handlers: dict[str, Any] = {
        "console": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
            "level": level,
        },
    }
    if log_file_path:
        handlers["file"] = {
            "formatter": "default",
            "class": "logging.handlers.RotatingFileHandler",
            "filename": log_file_path,
            "maxBytes": 100000000,
            "backupCount": 1,
            "level": level,
        }

    return {
        "version": 1,
        # client loggers are created at import, before this runs
        "disable_existing_loggers": False,
        "formatters": {"default": {"format": LOG_FORMAT, "datefmt": LOG_DATE_FORMAT}},
        "handlers": handlers,
        "root": {"handlers": list(handlers), "level": level},
        "loggers": {
            logger_name: {"level": "WARNING", "propagate": True}
            for logger_name in NOISY_LOGGERS
        },
    }


def configure_logging(level: str | None = None, log_file_path: str | None = None) -> None:
    logging_config.dictConfig(build_log_config(level, log_file_path))
