from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import build_container
from .requests.controller import register as register_requests
from .sessions.controller import register as register_sessions
from .urgency.controller import register as register_urgency

logger = logging.getLogger(__name__)


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))
    logger.debug("attendance-engine settings=%s", settings_module)

    container = build_container(
        near_days=int(getattr(settings, "NEAR_DAYS", 2)),
        projection_weeks=int(getattr(settings, "DEFAULT_PROJECTION_WEEKS", 12)),
        view_cache_size=int(getattr(settings, "VIEW_CACHE_SIZE", 0)),
    )
    app.extensions["attendance_engine"] = container

    @app.route("/health", endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_sessions(app, container)
    register_requests(app, container)
    register_urgency(app, container)

    return app
