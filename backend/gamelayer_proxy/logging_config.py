import logging
import logging.config

from gamelayer_proxy.config import Settings, get_settings

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"

# Library loggers that would otherwise log every upstream request at INFO
QUIET_LOGGERS = ("httpx", "httpcore")


def resolve_log_level(settings: Settings) -> str:
    if settings.LOG_LEVEL:
        return settings.LOG_LEVEL.upper()
    return "DEBUG" if settings.DEBUG else "INFO"


def build_logging_config(settings: Settings) -> dict:
    """
    Build the dictConfig for the dev server and the serverless handler

    Both uvicorn and the package loggers write to stdout in one format;
    [GameLayer proxy] error lines end up in the host's log stream.
    """
    log_level = resolve_log_level(settings)
    console = {"handlers": ["console"], "propagate": False}

    loggers = {
        "root": {"handlers": ["console"], "level": log_level, "propagate": True},
        "gamelayer_proxy": {**console, "level": log_level},
    }
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        loggers[name] = {**console, "level": "INFO"}
    for name in QUIET_LOGGERS:
        loggers[name] = {**console, "level": "DEBUG" if log_level == "DEBUG" else "WARNING"}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": LOG_FORMAT,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": loggers,
    }


def setup_logging(settings: Settings | None = None):
    """
    Configure global log format
    """
    logging.config.dictConfig(build_logging_config(settings or get_settings()))
