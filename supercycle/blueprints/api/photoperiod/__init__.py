"""
Photoperiod API Module
======================

Endpoints organized by concern:
- settings.py: live configuration, validation, import/export, reset
- status.py: evaluation of the live configuration (status, calendar, full)
"""

from flask import Blueprint

from supercycle.utils.http import error_response

# Create blueprint here to avoid circular imports
photoperiod_api = Blueprint("photoperiod_api", __name__)


# Error handlers
@photoperiod_api.errorhandler(404)
def not_found(error):
    """Handle 404 errors"""
    return error_response("Resource not found", 404)


@photoperiod_api.errorhandler(413)
def payload_too_large(error):
    """Handle oversized imports"""
    return error_response("Payload too large", 413)


@photoperiod_api.errorhandler(500)
def internal_error(error):
    """Handle 500 errors"""
    return error_response("Internal server error", 500)


# Import submodules to register routes (must be after blueprint creation)
from . import settings, status

__all__ = ["photoperiod_api"]
