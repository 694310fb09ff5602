import logging
import logging.config
from pathlib import Path

from config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s %(module)s:%(lineno)d - %(message)s"


def build_log_config(level: str = settings.LOG_LEVEL, log_dir: str = settings.LOG_DIR, to_file: bool = settings.LOG_TO_FILE, debug: bool = settings.DEBUG) -> dict:
    """
    Build the dictConfig mapping for the lazypage loggers.

    Args:
        level (str): Level for the lazypage logger
        log_dir (str): Directory holding the rotating log file
        to_file (bool): Whether to add the rotating file handler
        debug (bool): Log SQLAlchemy engine statements at INFO

    Returns:
        dict: Configuration accepted by logging.config.dictConfig
    """
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "level": level,
        },
    }
    app_handlers = ["console"]
    sql_handlers = ["console"]

    if to_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "default",
            "filename": str(log_path / "lazypage.log"),
            "maxBytes": 10485760,
            "backupCount": 5,
            "level": level,
        }
        app_handlers.append("file")
        sql_handlers = ["file"]

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": LOG_FORMAT,
            }
        },
        "handlers": handlers,
        "loggers": {
            "sqlalchemy.engine": {"handlers": sql_handlers, "level": "INFO" if debug else "WARNING", "propagate": False},
            "lazypage": {
                "handlers": app_handlers,
                "level": level,
                "propagate": False,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": "WARNING",
        },
    }


def setup_logging(**overrides):
    """Configure application logging."""
    logging.config.dictConfig(build_log_config(**overrides))
