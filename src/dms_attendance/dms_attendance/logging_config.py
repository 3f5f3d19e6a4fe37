"""
Logging configuration.

Plain console output in development, one JSON object per line otherwise.
"""

from __future__ import annotations

import logging
import logging.config
from typing import Any, Dict

from pythonjsonlogger.json import JsonFormatter


class ServiceJsonFormatter(JsonFormatter):
    """JSON formatter that always carries level and logger name."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]):
        super().add_fields(log_record, record, message_dict)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name


def build_logging_config(level: str = "INFO", *, json_logs: bool = False) -> Dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"},
            "json": {"()": ServiceJsonFormatter, "fmt": "%(asctime)s %(message)s"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json" if json_logs else "standard",
            },
        },
        "loggers": {
            "": {"handlers": ["console"], "level": level.upper()},
            # mysql-connector is chatty at DEBUG
            "mysql.connector": {"level": "WARNING"},
        },
    }


def configure_logging(level: str = "INFO", *, json_logs: bool = False) -> None:
    logging.config.dictConfig(build_logging_config(level, json_logs=json_logs))
