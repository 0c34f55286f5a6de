from __future__ import annotations

import importlib
import logging
import os
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import build_container
from .database.bootstrap import init_database
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

_SETTING_NAMES = (
    "SECRET_KEY",
    "DEBUG",
    "DB_CONFIG",
    "RESERVED_ADMINS",
    "PASSWORD_HASH_METHOD",
    "AUTO_INIT_DB",
    "LOG_LEVEL",
)


def load_settings(overrides: Optional[Mapping[str, Any]] = None) -> dict:
    settings_module = get_settings_module()
    module = importlib.import_module(settings_module)
    settings = {name: getattr(module, name) for name in _SETTING_NAMES if hasattr(module, name)}
    settings["SETTINGS_MODULE"] = settings_module
    settings.update(overrides or {})
    return settings


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    settings = load_settings(overrides)
    configure_logging(settings.get("LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = settings["SECRET_KEY"]
    app.config["DEBUG"] = bool(settings.get("DEBUG", False))

    container = build_container(
        db_config=settings["DB_CONFIG"],
        password_hash_method=settings["PASSWORD_HASH_METHOD"],
    )
    logger.info("settings=%s db=%s", settings["SETTINGS_MODULE"], container.conn.config.describe())

    # Failure here is fatal: let it propagate and stop startup.
    if bool(settings.get("AUTO_INIT_DB", True)):
        created = init_database(container.users_repo, container.hasher, settings["RESERVED_ADMINS"])
        logger.info("users schema ready (seeded admins: %s)", ", ".join(created) or "none")

    app.extensions["fagan_auth"] = container
    register_users(app, container)

    return app


def run() -> None:
    """Serve the command API on localhost for the desktop shell."""
    app = create_app()
    app.run(host="127.0.0.1", port=int(os.getenv("PORT", "5000")), debug=bool(app.config["DEBUG"]))


if __name__ == "__main__":
    run()
