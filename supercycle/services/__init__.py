"""Application services wired together by :class:`ServiceContainer`."""

from supercycle.services.container import ServiceContainer
from supercycle.services.cycle_config_service import CycleConfigService
from supercycle.services.photoperiod_service import PhotoperiodService

__all__ = ["CycleConfigService", "PhotoperiodService", "ServiceContainer"]
