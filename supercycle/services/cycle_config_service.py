"""
Cycle Configuration Service
===========================

Holds the single live photoperiod configuration and applies edits to it.

Features:
- Wholesale replacement on edit (no partial mutation)
- Field-tolerant JSON import that never half-applies a malformed payload
- Verbatim export of the four transferable fields
- Reset to configured defaults

The live settings are a single-writer value; readers always get an
immutable snapshot.
"""

from __future__ import annotations

import json
import logging
import threading
from typing import Any, Dict, List, Mapping

from supercycle.constants import SETTINGS_FIELDS
from supercycle.domain.cycle_config import CycleSettings, ValidationResult, coerce_number, validate
from supercycle.domain.exceptions import MalformedImportPayload
from supercycle.utils.time import Clock, parse_local_datetime

logger = logging.getLogger(__name__)


def _parse_source(source: str | bytes | Mapping[str, Any]) -> Mapping[str, Any]:
    """Decode an import source into a mapping or raise MalformedImportPayload."""
    if isinstance(source, Mapping):
        return source

    if isinstance(source, (bytes, bytearray)):
        try:
            source = bytes(source).decode("utf-8-sig")
        except UnicodeDecodeError:
            raise MalformedImportPayload("Import file is not valid UTF-8 text.") from None

    if not isinstance(source, str):
        raise MalformedImportPayload("Import source must be JSON text or an object.")

    try:
        data = json.loads(source)
    except json.JSONDecodeError as exc:
        raise MalformedImportPayload(f"Import file is not valid JSON: {exc.msg}.") from None

    if not isinstance(data, dict):
        raise MalformedImportPayload("Import file must contain a JSON object.")
    return data


def merge_import(current: CycleSettings, data: Mapping[str, Any]) -> tuple[CycleSettings, List[str]]:
    """Overlay the valid fields of ``data`` on ``current``.

    A field is applied only when present and well-formed: ``startDate`` must
    be a parseable date string, the numeric fields must be finite numbers or
    numeric strings. Everything else is ignored.
    """
    changes: Dict[str, Any] = {}
    applied: List[str] = []

    start = data.get("startDate")
    if isinstance(start, str) and parse_local_datetime(start) is not None:
        changes["start_date"] = start
        applied.append("startDate")

    light = coerce_number(data.get("lightHours"))
    if light is not None:
        changes["light_hours"] = light
        applied.append("lightHours")

    dark = coerce_number(data.get("darkHours"))
    if dark is not None:
        changes["dark_hours"] = dark
        applied.append("darkHours")

    duration = coerce_number(data.get("durationDays"))
    if duration is not None:
        changes["duration_days"] = int(duration)
        applied.append("durationDays")

    return current.with_changes(**changes), applied


class CycleConfigService:
    """Owner of the live :class:`CycleSettings`."""

    def __init__(
        self,
        clock: Clock,
        *,
        default_light_hours: float,
        default_dark_hours: float,
        default_duration_days: int,
        initial: CycleSettings | None = None,
    ) -> None:
        self._clock = clock
        self._default_light_hours = default_light_hours
        self._default_dark_hours = default_dark_hours
        self._default_duration_days = default_duration_days
        self._lock = threading.Lock()
        self._settings = initial if initial is not None else self._defaults()

    def _defaults(self) -> CycleSettings:
        return CycleSettings.defaults(
            self._clock.now(),
            light_hours=self._default_light_hours,
            dark_hours=self._default_dark_hours,
            duration_days=self._default_duration_days,
        )

    def current(self) -> CycleSettings:
        with self._lock:
            return self._settings

    def replace(self, settings: CycleSettings) -> ValidationResult:
        """Swap in new settings. Invalid settings are stored too; the result says why."""
        with self._lock:
            self._settings = settings
        result = validate(settings)
        if result.ok:
            logger.info("Photoperiod settings updated: %s", settings.to_dict())
        else:
            logger.info("Photoperiod settings updated with validation error %s: %s", result.kind, result.message)
        return result

    def reset(self) -> CycleSettings:
        settings = self._defaults()
        with self._lock:
            self._settings = settings
        logger.info("Photoperiod settings reset to defaults: %s", settings.to_dict())
        return settings

    def export(self) -> Dict[str, Any]:
        """All four transfer fields, exactly as held in memory."""
        exported = self.current().to_dict()
        return {key: exported[key] for key in SETTINGS_FIELDS}

    def export_json(self) -> str:
        return json.dumps(self.export(), indent=2)

    def import_payload(self, source: str | bytes | Mapping[str, Any]) -> List[str]:
        """Apply an exported configuration; returns the field names applied.

        Raises:
            MalformedImportPayload: if the source is not a JSON object. The
                live settings are left untouched.
        """
        try:
            data = _parse_source(source)
        except MalformedImportPayload as exc:
            logger.warning("Rejected photoperiod import: %s", exc)
            raise

        with self._lock:
            merged, applied = merge_import(self._settings, data)
            self._settings = merged

        ignored = sorted(set(data) - set(applied))
        if ignored:
            logger.debug("Import ignored fields: %s", ignored)
        logger.info("Imported photoperiod fields: %s", applied or "none")
        return applied


__all__ = ["CycleConfigService", "merge_import"]
