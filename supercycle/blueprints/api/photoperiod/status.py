"""
Photoperiod Status
==================

Evaluation of the live photoperiod. Every request recomputes from scratch at
the clock's current instant, or at ``?at=`` when given.
"""

from __future__ import annotations

import logging

from flask import current_app, request
from pydantic import ValidationError

from supercycle.blueprints.api._common import (
    fail as _fail,
    get_photoperiod_service as _service,
    success as _success,
)
from supercycle.schemas.photoperiod import EvaluationQuerySchema, error_list
from supercycle.utils.http import safe_route

from . import photoperiod_api

logger = logging.getLogger("photoperiod_api.status")


def _evaluate():
    """Parse the query string and evaluate; returns (validation, evaluation)."""
    query = EvaluationQuerySchema.model_validate(request.args.to_dict())
    service = _service()
    as_of = query.at or service.now()
    return service.evaluate_at(as_of, duration_days=query.days)


@photoperiod_api.get("/status")
@safe_route("Failed to evaluate photoperiod")
def get_status():
    """Current phase, elapsed time, energy balance and next transition."""
    try:
        validation, evaluation = _evaluate()
    except ValidationError as ve:
        return _fail("Invalid query parameters", 400, details={"errors": error_list(ve)})

    payload = evaluation.status_dict()
    payload["validation"] = validation.to_dict()
    payload["tick_seconds"] = current_app.config.get("SUPERCYCLE_TICK_SECONDS")
    return _success(payload)


@photoperiod_api.get("/calendar")
@safe_route("Failed to build photoperiod calendar")
def get_calendar():
    """Day x hour light/dark grid."""
    try:
        validation, evaluation = _evaluate()
    except ValidationError as ve:
        return _fail("Invalid query parameters", 400, details={"errors": error_list(ve)})

    return _success({"calendar": evaluation.calendar.to_dict(), "validation": validation.to_dict()})


@photoperiod_api.get("/evaluate")
@safe_route("Failed to evaluate photoperiod")
def get_evaluation():
    """Full evaluation including the calendar."""
    try:
        validation, evaluation = _evaluate()
    except ValidationError as ve:
        return _fail("Invalid query parameters", 400, details={"errors": error_list(ve)})

    payload = evaluation.to_dict()
    payload["validation"] = validation.to_dict()
    return _success(payload)
