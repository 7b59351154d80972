import logging
import logging.config
from typing import Any

from pythonjsonlogger.json import JsonFormatter

from folders.environment import EnvironmentName
from settings import settings

JSON_FORMAT = (
    "%(module)s %(asctime)s %(levelname)s %(thread)d %(processName)s %(name)s "
    "%(funcName)s %(filename)s %(lineno)d %(message)s"
)


def _logging_config() -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "jsonFormat": {
                "format": JSON_FORMAT,
                "class": "logging_config.CustomJsonFormatter",
            },
        },
        "handlers": {
            "jsonStreamHandler": {
                "formatter": "jsonFormat",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",  # Default is stderr
            },
        },
        "loggers": {
            "": {"handlers": ["jsonStreamHandler"], "level": settings.logging.level, "propagate": False},
            # uvicorn installs its own access handler; keep a single copy of each line
            "uvicorn.access": {"handlers": ["jsonStreamHandler"], "propagate": False},
            "faker": {"handlers": ["jsonStreamHandler"], "level": logging.WARNING, "propagate": False},
        },
    }


def _local_logging_config() -> dict[str, Any]:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s"},
        },
        "handlers": {
            "default": {
                "formatter": "standard",
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",  # Default is stderr
            },
        },
        "loggers": {
            "": {
                "handlers": ["default"],
                "level": settings.logging.level,
                "propagate": False,
            },
            "uvicorn.access": {"handlers": ["default"], "propagate": False},
            "faker": {"handlers": ["default"], "level": logging.WARNING, "propagate": False},
            "asyncio": {"handlers": ["default"], "level": logging.WARNING, "propagate": False},
        },
    }


# Used because we add custom local formatting.
class CustomJsonFormatter(JsonFormatter):
    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self._app_env = settings.environment
        self._pretty_format = settings.logging.use_pretty_json
        # For local development we want to make logs more clear
        if self._app_env == EnvironmentName.DEVELOPMENT and self._pretty_format:
            self.json_indent = 2

    def format(self, record: logging.LogRecord) -> str:
        result = super().format(record)
        if self._app_env == EnvironmentName.DEVELOPMENT and self._pretty_format:
            result = result.replace("\\n", "\n\t\t")
        return result


def setup_logging() -> None:
    """Setup root logger using the JSON config, or the plain local one when disabled."""
    if settings.logging.use_config is True:
        logging.config.dictConfig(_logging_config())
    else:
        logging.config.dictConfig(_local_logging_config())
    logging.captureWarnings(True)
    logging.disable(logging.NOTSET)
