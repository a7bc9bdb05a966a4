# txf_converter/utilities/config_logging.py
from __future__ import annotations

import copy
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional

LOGGING: Dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s "
            "[%(process)d:%(threadName)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "WARNING",
            "formatter": "simple",
        },
    },
    "loggers": {
        # root logger
        "": {
            "level": "DEBUG",
            "handlers": ["console"],
        },
        "txf_converter": {"level": "DEBUG", "propagate": True},
    },
}

_FILE_HANDLER: Dict[str, Any] = {
    "class": "logging.handlers.RotatingFileHandler",
    "level": "DEBUG",
    "formatter": "verbose",
    "maxBytes": 5_000_000,
    "backupCount": 5,
    "encoding": "utf-8",
}


def build_logging_config(
    verbose: bool = False, log_file: Optional[Path] = None
) -> Dict[str, Any]:
    """Return a copy of ``LOGGING`` tuned for one CLI invocation.

    ``verbose`` lowers the console threshold to DEBUG. ``log_file`` adds a
    rotating file handler; its parent directory is created on demand.
    """
    config = copy.deepcopy(LOGGING)
    if verbose:
        config["handlers"]["console"]["level"] = "DEBUG"
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        config["handlers"]["file"] = dict(_FILE_HANDLER, filename=str(log_file))
        config["loggers"][""]["handlers"].append("file")
    return config


def configure_logging(verbose: bool = False, log_file: Optional[Path] = None) -> None:
    logging.config.dictConfig(build_logging_config(verbose, log_file))
