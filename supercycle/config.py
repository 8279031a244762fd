"""
Configuration for SuperCycle
============================
Main application runtime settings loaded from environment variables.
Sets up the logging configuration as well.
"""

import os
from contextlib import suppress
from dataclasses import dataclass, field
from typing import Any

from supercycle.constants import (
    DEFAULT_DARK_HOURS,
    DEFAULT_DURATION_DAYS,
    DEFAULT_LIGHT_HOURS,
)
from supercycle.domain.exceptions import ConfigurationError


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "t", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer.") from None


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be a number.") from None


@dataclass
class AppConfig:
    """Runtime settings; every field reads a ``SUPERCYCLE_*`` environment variable."""

    environment: str = field(default_factory=lambda: os.getenv("SUPERCYCLE_ENV", "development"))
    secret_key: str = field(default_factory=lambda: os.getenv("SUPERCYCLE_SECRET_KEY", "SuperCycleDevSecretKey"))
    host: str = field(default_factory=lambda: os.getenv("SUPERCYCLE_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: _env_int("SUPERCYCLE_PORT", 8000))

    DEBUG: bool = field(default_factory=lambda: _env_bool("SUPERCYCLE_DEBUG", False))
    log_level: str = field(default_factory=lambda: os.getenv("SUPERCYCLE_LOG_LEVEL", "INFO"))
    # Empty string disables the rotating file handler
    log_file: str = field(default_factory=lambda: os.getenv("SUPERCYCLE_LOG_FILE", "logs/supercycle.log"))

    # Cadence at which clients should re-poll the status endpoint
    tick_seconds: int = field(default_factory=lambda: _env_int("SUPERCYCLE_TICK_SECONDS", 30))

    # Values restored by a reset
    default_light_hours: float = field(
        default_factory=lambda: _env_float("SUPERCYCLE_DEFAULT_LIGHT_HOURS", DEFAULT_LIGHT_HOURS)
    )
    default_dark_hours: float = field(
        default_factory=lambda: _env_float("SUPERCYCLE_DEFAULT_DARK_HOURS", DEFAULT_DARK_HOURS)
    )
    default_duration_days: int = field(
        default_factory=lambda: _env_int("SUPERCYCLE_DEFAULT_DURATION_DAYS", DEFAULT_DURATION_DAYS)
    )

    # Reject import uploads larger than this
    max_import_kb: int = field(default_factory=lambda: _env_int("SUPERCYCLE_MAX_IMPORT_KB", 64))

    def as_flask_config(self) -> dict[str, Any]:
        """Subset of the configuration handed to ``flask_app.config``."""
        if not self.secret_key:
            raise ConfigurationError(
                "Missing SUPERCYCLE_SECRET_KEY environment variable. "
                "Production systems must set an explicit secret key."
            )

        return {
            "ENV": self.environment,
            "SECRET_KEY": self.secret_key,
            "DEBUG": self.DEBUG,
            "MAX_CONTENT_LENGTH": self.max_import_kb * 1024,
            "SUPERCYCLE_TICK_SECONDS": self.tick_seconds,
        }


# ==================== VALIDATION ====================


def validate_app_config(config: AppConfig) -> list[str]:
    """
    Validate runtime configuration and return list of warnings.

    Args:
        config: AppConfig instance

    Returns:
        List of warning messages (empty if all valid)
    """
    warnings = []

    if config.tick_seconds < 1:
        warnings.append(f"Tick interval ({config.tick_seconds}s) must be at least 1 second.")

    if config.default_light_hours < 0 or config.default_dark_hours < 0:
        warnings.append(
            f"Default photoperiod ({config.default_light_hours}/{config.default_dark_hours}) "
            "has negative hours; resets will produce an invalid configuration."
        )

    if config.default_duration_days < 1:
        warnings.append(f"Default duration ({config.default_duration_days} days) is below the 1 day minimum.")

    if config.environment == "production" and config.secret_key == "SuperCycleDevSecretKey":
        warnings.append("Running in production with the development secret key.")

    return warnings


_CONSOLE_HANDLER = "supercycle_console"
_FILE_HANDLER = "supercycle_file"
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(debug: bool, log_level: str | None) -> int:
    import logging

    if debug:
        return logging.DEBUG
    level = logging.getLevelName((log_level or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(debug: bool = False, *, log_level: str | None = None, log_file: str | None = None) -> None:
    """
    Attach the SuperCycle console (and optional rotating file) handlers to the root logger.

    Safe to call once per ``create_app``: handlers are looked up by name and
    only their level is refreshed on later calls.
    """
    import logging
    import sys
    from logging.handlers import RotatingFileHandler

    level = _resolve_level(debug, log_level)
    root = logging.getLogger()
    root.setLevel(level)

    existing = {getattr(h, "name", "") for h in root.handlers}
    formatter = logging.Formatter(_LOG_FORMAT)
    new_handlers: list[logging.Handler] = []

    if _CONSOLE_HANDLER not in existing:
        # UTF-8 on Windows consoles
        stream = sys.stdout
        with suppress(AttributeError, ValueError):
            stream.reconfigure(encoding="utf-8", errors="replace")
        console = logging.StreamHandler(stream=stream)
        console.name = _CONSOLE_HANDLER
        new_handlers.append(console)

    if log_file and _FILE_HANDLER not in existing:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        rotating = RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
        rotating.name = _FILE_HANDLER
        new_handlers.append(rotating)

    for handler in new_handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for handler in root.handlers:
        if getattr(handler, "name", "") in {_CONSOLE_HANDLER, _FILE_HANDLER}:
            handler.setLevel(level)

    if new_handlers:
        root.info("Logging initialized at level: %s", logging.getLevelName(level))

    if _env_bool("SUPERCYCLE_SILENCE_WERKZEUG", True):
        logging.getLogger("werkzeug").setLevel(logging.WARNING)


def load_config() -> AppConfig:
    """Read ``AppConfig`` from the environment and log any configuration warnings."""
    import logging

    config = AppConfig()
    logger = logging.getLogger("supercycle.config")
    for warning in validate_app_config(config):
        logger.warning("Configuration warning: %s", warning)
    return config
