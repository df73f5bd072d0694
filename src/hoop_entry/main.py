from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import build_container
from .entries.controller import register as register_entries
from .reports.controller import register as register_reports


def create_app(settings_overrides: Optional[dict] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    overrides = settings_overrides or {}

    app.secret_key = overrides.get("SECRET_KEY", getattr(settings, "SECRET_KEY"))
    app.config["DEBUG"] = bool(overrides.get("DEBUG", getattr(settings, "DEBUG", False)))
    app.config["TESTING"] = bool(overrides.get("TESTING", getattr(settings, "TESTING", False)))
    app.config["STORAGE_PATH"] = overrides.get("STORAGE_PATH", getattr(settings, "STORAGE_PATH"))
    app.config["STORAGE_KEY"] = overrides.get("STORAGE_KEY", getattr(settings, "STORAGE_KEY"))

    if app.config["DEBUG"]:
        app.logger.setLevel(logging.DEBUG)
        app.logger.debug(
            "[hoop-entry] settings=%s storage=%s key=%s",
            settings_module,
            app.config["STORAGE_PATH"],
            app.config["STORAGE_KEY"],
        )

    container = build_container(
        storage_path=app.config["STORAGE_PATH"],
        storage_key=app.config["STORAGE_KEY"],
        clock=overrides.get("CLOCK"),
    )
    app.extensions["hoop_entry"] = container

    register_entries(app, container)
    register_reports(app, container)

    return app


if __name__ == "__main__":
    create_app().run(threaded=False)
