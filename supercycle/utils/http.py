"""JSON envelope helpers shared by the API blueprints.

Every API response has the shape ``{"ok": bool, "data": ..., "error": ...}``.
Errors carry a ``message`` and a ``timestamp``; photoperiod validation
failures also carry the error ``kind`` so clients can branch on it.
"""

from __future__ import annotations

import functools
import logging
from datetime import datetime
from typing import TYPE_CHECKING, Any, Callable

from flask import Response, jsonify
from werkzeug.exceptions import HTTPException

if TYPE_CHECKING:
    from supercycle.domain.exceptions import SuperCycleError

_log = logging.getLogger(__name__)

# Client-facing text for failures whose real cause stays in the server log
_GENERIC_MESSAGES: dict[int, str] = {
    400: "Invalid request",
    404: "Resource not found",
    413: "Payload too large",
    500: "An internal error occurred",
}


def safe_error(
    exc: BaseException,
    status: int = 500,
    *,
    context: str = "",
) -> Response:
    """Log ``exc`` with its traceback and answer with a generic message.

    ``context`` names the failed operation in the log line, e.g.
    ``"Failed to import photoperiod settings"``.
    """
    _log.error("API error [%s] %s: %s", status, context, exc, exc_info=exc)
    return error_response(_GENERIC_MESSAGES.get(status, _GENERIC_MESSAGES[500]), status)


def success_response(
    data: dict | list | None = None,
    status: int = 200,
    *,
    message: str | None = None,
) -> Response:
    body: dict[str, Any] = {"ok": True, "data": data, "error": None}
    if message is not None:
        body["message"] = message
    response = jsonify(body)
    response.status_code = status
    return response


def error_response(
    message: str,
    status: int = 500,
    *,
    details: dict | None = None,
) -> Response:
    """Failure envelope. ``details`` is merged into ``error`` and also sent as-is."""
    error: dict[str, Any] = {"message": message, "timestamp": datetime.now().isoformat()}
    body: dict[str, Any] = {"ok": False, "data": None, "error": error, "message": message}
    if details:
        error.update(details)
        body["details"] = details
    response = jsonify(body)
    response.status_code = status
    return response


def domain_error_response(exc: "SuperCycleError", context: str = "") -> Response:
    """Map a :class:`SuperCycleError` to its HTTP status.

    Client errors keep their message and expose ``kind`` when the exception
    has one; server errors are logged and answered generically.
    """
    status = exc.http_status
    if status >= 500:
        return safe_error(exc, status, context=context or type(exc).__name__)
    kind = getattr(exc, "kind", None)
    details = {"kind": str(kind)} if kind is not None else None
    return error_response(str(exc) or _GENERIC_MESSAGES[400], status, details=details)


def json_download(body: str, filename: str) -> Response:
    """Serve ``body`` as a JSON file attachment."""
    return Response(
        body,
        mimetype="application/json",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


def safe_route(
    error_message: str = "An internal error occurred",
    *,
    error_status: int = 500,
) -> Callable:
    """Wrap a route so failures come back in the JSON envelope.

    - :class:`~supercycle.domain.exceptions.SuperCycleError` goes through
      :func:`domain_error_response`
    - Werkzeug HTTP errors (404, 413) propagate to the blueprint handlers
    - anything else is logged and answered with ``error_status``

    Usage::

        @photoperiod_api.get("/status")
        @safe_route("Failed to evaluate photoperiod")
        def get_status():
            ...
    """
    from supercycle.domain.exceptions import SuperCycleError

    def decorator(fn: Callable) -> Callable:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Response:
            try:
                return fn(*args, **kwargs)
            except HTTPException:
                raise
            except SuperCycleError as exc:
                return domain_error_response(exc, error_message)
            except Exception as exc:
                return safe_error(exc, error_status, context=error_message)

        return wrapper

    return decorator
