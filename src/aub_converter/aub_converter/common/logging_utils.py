from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = __package__.rsplit(".", 1)[0]


def configure_logging(app_logger: logging.Logger, *, level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """Attach console (and optional rotating file) handlers to the package logger.

    The Flask app logger lives under the package namespace, so it only needs
    its level set; records propagate up to the package handlers.
    """
    numeric_level = logging.getLevelName(str(level).upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)
    package_logger.propagate = False

    # create_app may run more than once per process (tests)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(log_file, maxBytes=10485760, backupCount=5))  # 10MB, keep 5

    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    app_logger.setLevel(numeric_level)
    return package_logger
