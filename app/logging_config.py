import os
import json
import logging
from typing import Optional

class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_record = {
            "level": record.levelname,
            "time": self.formatTime(record, self.datefmt),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_record)

TEXT_FORMATTER = {
    "format": "[%(levelname)s] %(asctime)s - %(name)s - %(message)s",
}

JSON_FORMATTER = {
    "()": JsonFormatter,
}


def build_logging_config(level: Optional[str] = None, fmt: Optional[str] = None) -> dict:
    level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    fmt = (fmt or os.getenv("LOG_FORMAT", "text")).lower()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": TEXT_FORMATTER if fmt == "text" else JSON_FORMATTER,
        },
        "loggers": {
            "uvicorn": {"handlers": ["default"], "level": "INFO", "propagate": False},
            "uvicorn.error": {"handlers": ["default"], "level": "INFO", "propagate": False},
            # request methods are already logged by the app
            "uvicorn.access": {"handlers": ["default"], "level": "WARNING", "propagate": False},
            "slowapi": {"handlers": ["default"], "level": "WARNING", "propagate": False},
            "app": {"handlers": ["default"], "level": level, "propagate": False},
        },
        "handlers": {
            "default": {
                "formatter": "default",
                "class": "logging.StreamHandler",
            },
        }
    }
