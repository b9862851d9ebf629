from __future__ import annotations

import importlib
from typing import Optional

from dotenv import load_dotenv
from flask import Flask
from flask.logging import default_handler

from config import get_settings_module

from .common.logging_utils import configure_logging
from .container import build_container
from .conversion.controller import register as register_conversion
from .core.constants import DEFAULT_ALLOWED_EXTENSIONS, DEFAULT_MAX_UPLOAD_MB, DOWNLOAD_FILENAME, DOWNLOAD_FORM_EXPANSION


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = int(getattr(settings, "MAX_CONTENT_LENGTH", DEFAULT_MAX_UPLOAD_MB * 1024 * 1024))
    app.config["DOWNLOAD_MAX_FORM_SIZE"] = app.config["MAX_CONTENT_LENGTH"] * DOWNLOAD_FORM_EXPANSION

    direction_mode = getattr(settings, "DIRECTION_MODE", "extras")
    allowed_extensions = getattr(settings, "ALLOWED_EXTENSIONS", DEFAULT_ALLOWED_EXTENSIONS)

    app.logger.removeHandler(default_handler)
    configure_logging(
        app.logger,
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        log_file=getattr(settings, "LOG_FILE", None),
    )

    container = build_container(
        direction_mode=direction_mode,
        allowed_extensions=allowed_extensions,
        download_filename=getattr(settings, "DOWNLOAD_FILENAME", DOWNLOAD_FILENAME),
    )

    if app.config["DEBUG"]:
        app.logger.info(
            "[aub-converter] settings=%s mode=%s allowed=%s",
            settings_module,
            container.conversion_service.direction_mode.value,
            ",".join(sorted(container.conversion_service.allowed_extensions)),
        )

    register_conversion(app, container)

    return app
