"""
Analysis API Schemas

Pydantic models for stroke comparison API requests and responses.
"""

from pydantic import BaseModel, Field
from typing import Any, Optional, List
from enum import Enum
from datetime import datetime


class SeverityEnum(str, Enum):
    """Priority severities for API."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ComparisonSourceEnum(str, Enum):
    """Origin of a comparison for API."""
    ANALYSIS = "analysis"
    DEMO = "demo"


class ComparisonPointSchema(BaseModel):
    """
    Pro and trainee value of one metric at one point of the stroke.
    """
    stroke_percent: int = Field(..., ge=0, le=100, description="Stroke progress (%)")
    pro_value: float = Field(..., description="Pro metric value")
    trainee_value: float = Field(..., description="Trainee metric value")


class ComparisonDataSchema(BaseModel):
    """
    Four aligned curves, 51 points each (0, 2, ..., 100%).
    """
    wrist_hip: List[ComparisonPointSchema] = Field(default_factory=list, description="Wrist-hip differential (px)")
    shoulder_rotation: List[ComparisonPointSchema] = Field(default_factory=list, description="Shoulder rotation proxy (degrees)")
    weight_transfer: List[ComparisonPointSchema] = Field(default_factory=list, description="Weight on right foot (%)")
    arm_extension: List[ComparisonPointSchema] = Field(default_factory=list, description="Arm extension (px)")


class PhaseMarkerSchema(BaseModel):
    """
    Named stroke phase on the percent axis.
    """
    phase: str = Field(..., description="Phase name")
    start: int = Field(..., ge=0, le=100, description="Start percent")
    end: int = Field(..., ge=0, le=100, description="End percent")
    color: str = Field(..., description="Chart color")

    class Config:
        json_schema_extra = {
            "example": {
                "phase": "Backswing",
                "start": 0,
                "end": 30,
                "color": "#82ca9d"
            }
        }


class StatComparisonSchema(BaseModel):
    """
    One pro-vs-trainee statistic, formatted at fixed precision.
    """
    pro: str = Field(..., description="Pro value")
    trainee: str = Field(..., description="Trainee value")
    difference: str = Field(..., description="Trainee minus pro")


class StatisticsSchema(BaseModel):
    """
    Summary statistics contrasting the two strokes.
    """
    stroke_duration: StatComparisonSchema = Field(..., description="Seconds; difference in ms")
    peak_rotation: StatComparisonSchema = Field(..., description="Peak shoulder rotation (degrees)")
    peak_extension: StatComparisonSchema = Field(..., description="Peak arm extension (px)")
    wrist_drop: StatComparisonSchema = Field(..., description="Lowest wrist-hip differential (px)")

    class Config:
        json_schema_extra = {
            "example": {
                "stroke_duration": {"pro": "1.50", "trainee": "1.75", "difference": "250"},
                "peak_rotation": {"pro": "45.0", "trainee": "35.0", "difference": "-10.0"},
                "peak_extension": {"pro": "100.0", "trainee": "80.0", "difference": "-20.0"},
                "wrist_drop": {"pro": "-60.0", "trainee": "-45.0", "difference": "15.0"}
            }
        }


class PrioritySchema(BaseModel):
    """
    Something the trainee should work on.
    """
    severity: SeverityEnum = Field(..., description="high, medium or low")
    metric: str = Field(..., description="Metric name (e.g., 'Shoulder Rotation')")
    issue: str = Field(..., description="What is wrong")
    detail: str = Field(..., description="Why it matters")
    improvement: str = Field(..., description="How to fix it")


class StrengthSchema(BaseModel):
    """
    Something the trainee already does well.
    """
    metric: str = Field(..., description="Metric name")
    achievement: str = Field(..., description="Short summary")
    detail: str = Field(..., description="Supporting detail")


class DrillSchema(BaseModel):
    """
    Practice drill for a top priority.
    """
    name: str = Field(..., description="Drill name")
    description: str = Field(..., description="How to perform it")
    reps: str = Field(..., description="Sets and reps")


class RecommendationsSchema(BaseModel):
    """
    Coaching report.
    """
    priorities: List[PrioritySchema] = Field(default_factory=list, description="Issues, high severity first")
    strengths: List[StrengthSchema] = Field(default_factory=list, description="Positive findings")
    drills: List[DrillSchema] = Field(default_factory=list, description="Up to 3 drills")
    overall_score: int = Field(..., ge=0, le=100, description="Overall score")
    grade: str = Field(..., description="Letter grade (A-F)")
    component_scores: dict[str, int] = Field(default_factory=dict, description="Score per rule")


class AnchorSetSchema(BaseModel):
    """
    Phase anchors, as indices into the wrist-hip series.
    """
    backswing_start: int = Field(..., ge=0)
    backswing_peak: int = Field(..., ge=0)
    forward_swing_start: int = Field(..., ge=0)
    follow_through_end: int = Field(..., ge=0)
    min_value: float = Field(..., description="Lowest wrist-hip value (px)")


class StrokeComparisonResponse(BaseModel):
    """
    Complete stroke comparison result.

    This is the main response from the analysis endpoints.
    """
    # Identification
    id: str = Field(..., description="Unique comparison ID")
    timestamp: datetime = Field(..., description="When the comparison was computed")
    trainee_label: str = Field(..., description="Trainee file name or demo label")
    source: ComparisonSourceEnum = Field(..., description="analysis or demo")

    # Results
    comparison: ComparisonDataSchema = Field(..., description="Aligned metric curves")
    phases: List[PhaseMarkerSchema] = Field(default_factory=list, description="Stroke phases")
    stats: StatisticsSchema = Field(..., description="Summary statistics")
    recommendations: RecommendationsSchema = Field(..., description="Coaching report")

    # Anchors (analysis only)
    pro_anchors: Optional[AnchorSetSchema] = Field(None, description="Pro phase anchors")
    trainee_anchors: Optional[AnchorSetSchema] = Field(None, description="Trainee phase anchors")

    class Config:
        json_schema_extra = {
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "timestamp": "2024-01-15T10:30:00Z",
                "trainee_label": "Demo Trainee Data",
                "source": "demo"
            }
        }


class AnalyzeFramesRequest(BaseModel):
    """
    Request to compare pose frames sent in the request body.

    Frames use the same structure as an uploaded file.
    """
    frames: List[Any] = Field(..., description="List of pose frame objects")
    trainee_label: str = Field("Trainee", description="Label shown for the trainee")


class HealthResponse(BaseModel):
    """
    Health check response.
    """
    status: str = Field("healthy", description="Service status")
    version: str = Field(..., description="API version")
    reference_available: bool = Field(..., description="Whether the pro reference loaded")
    reference_frames: int = Field(0, ge=0, description="Frames in the pro reference")
