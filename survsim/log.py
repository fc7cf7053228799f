"""
Logging
=======
Package logger and a helper to route its output
"""

import datetime
import logging
import os
import sys
from typing import Literal

logger = logging.getLogger("survsim")

_LEVELS = {
    "none": logging.CRITICAL + 1,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

LOG_FORMAT = "[%(levelname)s] %(asctime)s - %(name)s - %(funcName)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d_%H:%M:%S"


def use_logging(
    level: Literal["none", "debug", "info", "warn", "error", "critical"] = "info",
    output: Literal["console", "file", "both"] = "console",
    log_path: str = "./logs",
) -> logging.Logger:
    """
    Configure the survsim logger

    Args:
        level: Log level name; "none" silences the logger
        output: Where records go
        log_path: Folder for log files when output includes "file"

    Returns:
        The configured logger
    """
    try:
        log_level = _LEVELS[level.lower()]
    except KeyError:
        raise ValueError(f"Unknown log level {level!r}; expected one of {sorted(_LEVELS)}") from None
    if output not in ("console", "file", "both"):
        raise ValueError(f"Unknown log output {output!r}")

    # clear handlers to avoid duplicated records
    logger.handlers.clear()
    logger.setLevel(log_level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = []
    if output in ("console", "both"):
        handlers.append(logging.StreamHandler(sys.stdout))
    if output in ("file", "both"):
        os.makedirs(log_path, exist_ok=True)
        logfile = os.path.join(log_path, f"{datetime.datetime.now():%Y-%m-%d_%Hh-%Mm-%Ss}.log")
        handlers.append(logging.FileHandler(logfile))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(log_level)
        logger.addHandler(handler)
    return logger
