"""
Photoperiod Settings
====================

Endpoints for the live photoperiod configuration:
- read / replace (wholesale) the settings
- validate a candidate without storing it
- import / export the four-field transfer record
- reset to defaults
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from supercycle.blueprints.api._common import (
    fail as _fail,
    get_cycle_config_service as _config_service,
    get_import_source as _import_source,
    get_json as _get_json,
    success as _success,
)
from supercycle.constants import EXPORT_FILENAME
from supercycle.domain.cycle_config import CycleSettings, validate
from supercycle.schemas.photoperiod import CycleSettingsSchema, error_list
from supercycle.utils.http import json_download, safe_route

from . import photoperiod_api

logger = logging.getLogger("photoperiod_api.settings")


def _settings_payload(settings: CycleSettings) -> dict:
    return {"settings": settings.to_dict(), "validation": validate(settings).to_dict()}


@photoperiod_api.get("/config")
@safe_route("Failed to get photoperiod settings")
def get_config():
    """Get the live settings and their validation state."""
    return _success(_settings_payload(_config_service().current()))


@photoperiod_api.put("/config")
@safe_route("Failed to update photoperiod settings")
def replace_config():
    """
    Replace the live settings.

    The body must carry all four fields with the right types. Range problems
    (negative hours, zero duration) are stored and reported in ``validation``.
    """
    try:
        payload = CycleSettingsSchema.model_validate(_get_json())
    except ValidationError as ve:
        return _fail("Invalid photoperiod settings", 400, details={"errors": error_list(ve)})

    settings = payload.to_settings()
    result = _config_service().replace(settings)
    return _success({"settings": settings.to_dict(), "validation": result.to_dict()})


@photoperiod_api.post("/config/validate")
@safe_route("Failed to validate photoperiod settings")
def validate_config():
    """Validate a candidate configuration without storing it."""
    result = validate(_get_json())
    return _success({"validation": result.to_dict()})


@photoperiod_api.post("/config/import")
@safe_route("Failed to import photoperiod settings")
def import_config():
    """
    Import an exported configuration.

    Accepts a multipart upload (``file``) or a raw JSON body. Only present,
    well-formed fields are applied; a source that is not a JSON object is
    rejected and the live settings are left as they were.
    """
    service = _config_service()
    applied = service.import_payload(_import_source())
    settings = service.current()
    logger.info("Import applied %d field(s)", len(applied))
    return _success({"applied": applied, **_settings_payload(settings)})


@photoperiod_api.get("/config/export")
@safe_route("Failed to export photoperiod settings")
def export_config():
    """Download the live settings as a JSON file."""
    return json_download(_config_service().export_json(), EXPORT_FILENAME)


@photoperiod_api.post("/config/reset")
@safe_route("Failed to reset photoperiod settings")
def reset_config():
    """Restore the default settings (start at today's midnight)."""
    settings = _config_service().reset()
    return _success(_settings_payload(settings), message="Settings reset to defaults")
