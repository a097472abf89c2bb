"""
Domain Models

Pure data structures representing stroke comparison concepts.
No external dependencies - just Python dataclasses and enums.
"""

from .pose import Joint, JointPosition, PersonPose, PoseFrame
from .analysis import (
    PlayerType,
    MetricKind,
    Severity,
    MetricSample,
    StrokeMetrics,
    AnchorSet,
    ComparisonPoint,
    ComparisonData,
    PhaseMarker,
    PHASE_MARKERS,
    StatComparison,
    StatisticsBundle,
    Priority,
    Strength,
    Drill,
    RecommendationReport,
    ComparisonSource,
    StrokeComparison,
)

__all__ = [
    "Joint",
    "JointPosition",
    "PersonPose",
    "PoseFrame",
    "PlayerType",
    "MetricKind",
    "Severity",
    "MetricSample",
    "StrokeMetrics",
    "AnchorSet",
    "ComparisonPoint",
    "ComparisonData",
    "PhaseMarker",
    "PHASE_MARKERS",
    "StatComparison",
    "StatisticsBundle",
    "Priority",
    "Strength",
    "Drill",
    "RecommendationReport",
    "ComparisonSource",
    "StrokeComparison",
]
