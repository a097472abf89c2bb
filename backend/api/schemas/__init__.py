"""
API Schemas

Pydantic models for request/response validation.
"""

from .analysis import (
    SeverityEnum,
    ComparisonSourceEnum,
    ComparisonPointSchema,
    ComparisonDataSchema,
    PhaseMarkerSchema,
    StatComparisonSchema,
    StatisticsSchema,
    PrioritySchema,
    StrengthSchema,
    DrillSchema,
    RecommendationsSchema,
    AnchorSetSchema,
    StrokeComparisonResponse,
    AnalyzeFramesRequest,
    HealthResponse,
)

__all__ = [
    "SeverityEnum",
    "ComparisonSourceEnum",
    "ComparisonPointSchema",
    "ComparisonDataSchema",
    "PhaseMarkerSchema",
    "StatComparisonSchema",
    "StatisticsSchema",
    "PrioritySchema",
    "StrengthSchema",
    "DrillSchema",
    "RecommendationsSchema",
    "AnchorSetSchema",
    "StrokeComparisonResponse",
    "AnalyzeFramesRequest",
    "HealthResponse",
]
