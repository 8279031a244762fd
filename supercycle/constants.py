"""
SuperCycle Constants
====================

Fixed values shared by the cycle arithmetic and the configuration layer.
Values that operators may tune live in ``supercycle.config.AppConfig``.
"""

# Substitute cycle length used when light + dark hours sum to zero or less
CYCLE_LENGTH_EPSILON = 1e-7

# Calendar horizon bounds (days)
MIN_DURATION_DAYS = 1
MAX_DURATION_DAYS = 9999

HOURS_PER_DAY = 24
MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = HOURS_PER_DAY * MINUTES_PER_HOUR

# Fraction of elapsed time lit under the 12-on/12-off reference cycle
REFERENCE_LIGHT_FRACTION = 0.5

# Defaults applied on reset (overridable through AppConfig)
DEFAULT_LIGHT_HOURS = 13.0
DEFAULT_DARK_HOURS = 14.0
DEFAULT_DURATION_DAYS = 60

# Transfer-record keys for import/export
SETTINGS_FIELDS = ("startDate", "lightHours", "darkHours", "durationDays")

EXPORT_FILENAME = "supercycle-config.json"
