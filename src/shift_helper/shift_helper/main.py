from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .auth.controller import register as register_auth
from .container import Container, build_container
from .core.constants import DEFAULT_SESSION_DAYS
from .core.exceptions import AuthorizationError, DomainError, StoreError, ValidationError
from .employees.controller import register as register_employees
from .presets.controller import register as register_presets
from .pwa.controller import register as register_pwa
from .schedules.controller import register as register_schedules

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] %(levelname)s in %(module)s: %(message)s"


def _error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation(e):
        return _error(str(e), 400)

    @app.errorhandler(AuthorizationError)
    def handle_unauthorized(e):
        return _error(str(e), 401)

    @app.errorhandler(StoreError)
    def handle_store(e):
        return _error(str(e), 502)

    @app.errorhandler(DomainError)
    def handle_domain(e):
        return _error(str(e), 400)

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        return _error(e.description, e.code)

    @app.errorhandler(Exception)
    def handle_generic_exception(e):
        logger.error("Unexpected error: %s", e, exc_info=True)
        if app.config["DEBUG"]:
            return _error(f"Internal server error: {e}", 500)
        return _error("Internal server error", 500)


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"), format=LOG_FORMAT)

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["SESSION_DAYS"] = int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS))
    app.permanent_session_lifetime = timedelta(days=app.config["SESSION_DAYS"])
    app.config["PWA_MANIFEST"] = dict(getattr(settings, "PWA_MANIFEST", {}) or {})

    CORS(app, origins=list(getattr(settings, "CORS_ORIGINS", [])), supports_credentials=True)

    if container is None:
        supabase_config = getattr(settings, "SUPABASE_CONFIG")
        container = build_container(supabase_config=supabase_config)
        logger.info("settings=%s supabase=%s", settings_module, supabase_config.get("url"))

    container.auth_service.on_auth_state_change(
        lambda user: logger.info("Auth state changed: %s", user.email if user else "signed out")
    )

    _register_error_handlers(app)
    register_auth(app, container)
    register_employees(app, container)
    register_schedules(app, container)
    register_presets(app, container)
    register_pwa(app)

    return app
