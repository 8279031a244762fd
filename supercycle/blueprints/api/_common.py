"""
Blueprint Common Utilities
==========================

Helpers shared by the API blueprints: container access, request parsing
and the response envelope.

Usage:
    from supercycle.blueprints.api._common import (
        get_photoperiod_service, get_json, success, fail,
    )
"""
from __future__ import annotations

from flask import current_app, request

from supercycle.services.container import ServiceContainer
from supercycle.services.cycle_config_service import CycleConfigService
from supercycle.services.photoperiod_service import PhotoperiodService
from supercycle.utils.http import error_response, success_response

# ============================================================================
# CONTAINER ACCESS
# ============================================================================


def get_container() -> ServiceContainer:
    """
    Service container stored on the app by ``create_app``.

    Raises:
        RuntimeError: If the app was built without a container
    """
    container = current_app.config.get("CONTAINER")
    if not container:
        raise RuntimeError("ServiceContainer not found in app config")
    return container


def get_cycle_config_service() -> CycleConfigService:
    return get_container().cycle_config_service


def get_photoperiod_service() -> PhotoperiodService:
    return get_container().photoperiod_service


# ============================================================================
# REQUEST HELPERS
# ============================================================================


def get_json() -> dict:
    """JSON object body, or {} when the body is missing, invalid or not an object."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def get_import_source(field: str = "file") -> bytes:
    """Raw bytes of an uploaded file, falling back to the request body."""
    upload = request.files.get(field)
    if upload is not None:
        return upload.read()
    return request.get_data()


# ============================================================================
# RESPONSE HELPERS
# ============================================================================


def success(data: dict | list | None = None, status: int = 200, *, message: str | None = None):
    return success_response(data, status, message=message)


def fail(message: str, status: int = 400, *, details: dict | None = None):
    return error_response(message, status, details=details)
