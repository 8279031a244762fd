from __future__ import annotations

import logging
from dataclasses import dataclass

from supercycle.config import AppConfig
from supercycle.services.cycle_config_service import CycleConfigService
from supercycle.services.photoperiod_service import PhotoperiodService
from supercycle.utils.time import Clock, SystemClock

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Aggregate and manage core backend services."""

    config: AppConfig
    clock: Clock
    cycle_config_service: CycleConfigService
    photoperiod_service: PhotoperiodService

    @classmethod
    def build(cls, config: AppConfig, *, clock: Clock | None = None) -> "ServiceContainer":
        clock = clock or SystemClock()
        cycle_config_service = CycleConfigService(
            clock,
            default_light_hours=config.default_light_hours,
            default_dark_hours=config.default_dark_hours,
            default_duration_days=config.default_duration_days,
        )
        photoperiod_service = PhotoperiodService(clock, cycle_config_service)
        logger.info("Service container built (clock=%s)", type(clock).__name__)
        return cls(
            config=config,
            clock=clock,
            cycle_config_service=cycle_config_service,
            photoperiod_service=photoperiod_service,
        )
