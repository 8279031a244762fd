"""Centralized exception hierarchy for SuperCycle.

All domain and service exceptions inherit from :class:`SuperCycleError` so that
callers can catch a single base class when they need a broad safety net, yet
still match on specific subclasses where narrower handling is appropriate.

Blueprint-level error handling (see ``supercycle/utils/http.safe_route``) maps
these to the correct HTTP status codes automatically.

Hierarchy
---------
::

    SuperCycleError (base, maps to 500)
    ├── ValidationError          (400, configuration rule violated)
    ├── MalformedImportPayload   (400, import source is not a JSON object)
    └── ConfigurationError       (500, missing / invalid app config)
"""

from __future__ import annotations

from supercycle.enums import ValidationErrorKind


class SuperCycleError(Exception):
    """Base exception for all SuperCycle application errors.

    Parameters
    ----------
    message:
        Human-readable description.
    detail:
        Optional machine-readable context dict attached to the error for
        structured logging.
    """

    http_status: int = 500

    def __init__(self, message: str = "", *, detail: dict | None = None) -> None:
        super().__init__(message)
        self.detail = detail or {}


# ── Client errors (4xx) ──────────────────────────────────────────────


class ValidationError(SuperCycleError):
    """A cycle configuration broke one of the validation rules (HTTP 400)."""

    http_status: int = 400

    def __init__(self, kind: ValidationErrorKind, message: str = "", *, detail: dict | None = None) -> None:
        super().__init__(message, detail=detail)
        self.kind = kind


class MalformedImportPayload(SuperCycleError):
    """Import source could not be parsed into a JSON object (HTTP 400)."""

    http_status: int = 400
    kind = ValidationErrorKind.MALFORMED_IMPORT_PAYLOAD


# ── Server errors (5xx) ──────────────────────────────────────────────


class ConfigurationError(SuperCycleError):
    """Missing or invalid application configuration (HTTP 500)."""

    http_status: int = 500
