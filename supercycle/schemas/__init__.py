"""
Schemas Module
==============

This module provides Pydantic models for request validation.
"""

from supercycle.schemas.photoperiod import CycleSettingsSchema, EvaluationQuerySchema, error_list

__all__ = ["CycleSettingsSchema", "EvaluationQuerySchema", "error_list"]
