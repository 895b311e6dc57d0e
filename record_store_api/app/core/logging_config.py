"""
Logging configuration for the Record Store API.

Every module logs through ``logging.getLogger(__name__)``, so all
records come from loggers below ``record_store_api``.  ``setup_logging``
configures that package logger rather than the root logger: the
configured level applies even when the host (uvicorn, pytest) has
already set up the root, and records are not printed twice.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "record_store_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the package logger and return it.

    The level is applied on every call; handlers are attached only on
    the first one, so building several apps does not duplicate output.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        File that receives a copy of every record.  Its directory is
        created if needed.  Empty or ``None`` logs to the console only.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.propagate = False
    return logger
