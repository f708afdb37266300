"""Pydantic schemas for API request/response validation.

This module exports all Pydantic schemas used throughout the application.
"""

from chart_analyst.schemas.analysis import AnalysisRequest, AnalysisResponse, PriceBarIn
from chart_analyst.schemas.base import StrictBaseModel

__all__ = [
    "AnalysisRequest",
    "AnalysisResponse",
    "PriceBarIn",
    "StrictBaseModel",
]
