"""
Photoperiod Service
===================

Evaluates the live photoperiod at the current instant.

The current instant comes from an injected :class:`~supercycle.utils.time.Clock`
so callers (and tests) decide how time advances. Evaluation never fails on an
invalid configuration: the validation result is returned next to an
evaluation built from best-effort fallbacks.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Tuple

from supercycle.domain.cycle_config import CycleConfig, CycleSettings, ValidationResult, validate
from supercycle.domain.engine import Evaluation, evaluate
from supercycle.services.cycle_config_service import CycleConfigService
from supercycle.utils.time import Clock

logger = logging.getLogger(__name__)


class PhotoperiodService:
    def __init__(self, clock: Clock, config_service: CycleConfigService) -> None:
        self.clock = clock
        self.config_service = config_service

    def now(self) -> datetime:
        return self.clock.now()

    def resolve_config(self, settings: CycleSettings, as_of: datetime) -> Tuple[ValidationResult, CycleConfig]:
        result = validate(settings)
        if not result.ok:
            logger.debug("Evaluating invalid settings (%s) with fallbacks", result.kind)
        return result, CycleConfig.from_settings(settings, fallback_start=as_of)

    def evaluate_at(
        self,
        as_of: datetime,
        settings: Optional[CycleSettings] = None,
        *,
        duration_days: Optional[int] = None,
    ) -> Tuple[ValidationResult, Evaluation]:
        """Evaluate ``settings`` (default: the live settings) at ``as_of``."""
        snapshot = settings if settings is not None else self.config_service.current()
        result, config = self.resolve_config(snapshot, as_of)
        return result, evaluate(config, as_of, duration_days=duration_days)

    def evaluate_now(self, *, duration_days: Optional[int] = None) -> Tuple[ValidationResult, Evaluation]:
        return self.evaluate_at(self.now(), duration_days=duration_days)


__all__ = ["PhotoperiodService"]
