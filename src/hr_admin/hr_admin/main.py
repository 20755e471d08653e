from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import build_container
from .database.bootstrap import ensure_indexes, list_collections
from .employees.controller import register as register_employees

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    mongo_config = getattr(settings, "MONGO_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    # Helpful startup info: which settings and which database we talk to.
    logger.info("settings=%s db=%s/%s", settings_module, mongo_config.get("uri"), mongo_config.get("database"))

    container = build_container(
        mongo_config=mongo_config,
        date_key_format=getattr(settings, "DATE_KEY_FORMAT", "locale"),
        atomic_writes=bool(getattr(settings, "ATOMIC_WRITES", False)),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        ensure_indexes(container.conn)
        logger.info("database ready (collections=%d)", len(list_collections(container.conn)))

    register_employees(app, container)
    register_attendance(app, container)

    return app
