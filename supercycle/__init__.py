"""SuperCycle: custom photoperiod engine served over a Flask JSON API."""

from __future__ import annotations

import logging
from typing import Any

from flask import Flask, request
from werkzeug.exceptions import HTTPException

from supercycle.blueprints.api.photoperiod import photoperiod_api
from supercycle.config import load_config, setup_logging
from supercycle.utils.time import Clock

logger = logging.getLogger(__name__)


def create_app(config_overrides: dict[str, Any] | None = None, *, clock: Clock | None = None) -> Flask:
    """Build the Flask app.

    ``config_overrides`` keys are ``AppConfig`` attribute names (case
    insensitive). ``clock`` replaces the system clock, mainly for tests.
    """
    config = load_config()
    if config_overrides:
        for key, value in config_overrides.items():
            attr = key if hasattr(config, key) else key.lower()
            if not hasattr(config, attr):
                logger.warning("Ignoring unknown config override: %s", key)
                continue
            setattr(config, attr, value)

    setup_logging(debug=config.DEBUG, log_level=config.log_level, log_file=config.log_file)

    flask_app = Flask(__name__)
    flask_app.config.update(config.as_flask_config())

    from supercycle.services.container import ServiceContainer

    flask_app.config["CONTAINER"] = ServiceContainer.build(config, clock=clock)

    # Anything escaping a route under /api/ still answers with the JSON envelope
    @flask_app.errorhandler(Exception)
    def _handle_unhandled(exc):
        if not request.path.startswith("/api/"):
            raise exc
        from supercycle.domain.exceptions import SuperCycleError
        from supercycle.utils.http import domain_error_response, error_response, safe_error

        if isinstance(exc, HTTPException):
            status = int(exc.code or 500)
            if status >= 500:
                return safe_error(exc, status, context="http-exception")
            return error_response(exc.description or exc.name, status)

        if isinstance(exc, SuperCycleError):
            return domain_error_response(exc)

        return safe_error(exc, 500, context="unhandled")

    @flask_app.errorhandler(413)
    def _handle_too_large(_exc):
        from supercycle.utils.http import error_response

        return error_response(f"Request payload too large (limit {config.max_import_kb} KB)", 413)

    V1 = "/api/v1"
    flask_app.register_blueprint(photoperiod_api, url_prefix=f"{V1}/photoperiod")

    for bp_name in flask_app.blueprints:
        logger.info("Registered blueprint: %s", bp_name)
    logger.info("SuperCycle application initialized (env=%s)", config.environment)

    return flask_app


__all__ = ["create_app"]
