"""
REST API Routes

FastAPI routes for pickleball stroke comparison.
Handles HTTP requests for trainee uploads and comparison results.
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, HTTPException, UploadFile, File

from .schemas import (
    AnalyzeFramesRequest,
    AnchorSetSchema,
    ComparisonDataSchema,
    ComparisonPointSchema,
    ComparisonSourceEnum,
    DrillSchema,
    HealthResponse,
    PhaseMarkerSchema,
    PrioritySchema,
    RecommendationsSchema,
    SeverityEnum,
    StatComparisonSchema,
    StatisticsSchema,
    StrengthSchema,
    StrokeComparisonResponse,
)
from .session import session
from core.domain.analysis import (
    PHASE_MARKERS,
    AnchorSet,
    MetricKind,
    StatComparison,
    StrokeComparison,
)
from core.services import InvalidPoseDocumentError, load_reference_frames

# Configure logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter()

API_VERSION = "1.0.0"

INVALID_FILE_MESSAGE = "Error loading file. Please ensure it's a valid JSON file with pose data."

# =============================================================================
# Health Check
# =============================================================================

@router.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Health check endpoint"
)
async def health_check() -> HealthResponse:
    """
    Check if the API is running and the pro reference is loaded.

    Returns:
        Health status and version information
    """
    reference_frames = 0
    reference_ok = False
    try:
        reference_frames = len(load_reference_frames())
        reference_ok = True
    except (OSError, InvalidPoseDocumentError) as e:
        logger.warning(f"Pro reference not available: {e}")

    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        reference_available=reference_ok,
        reference_frames=reference_frames,
    )


# =============================================================================
# Phases
# =============================================================================

@router.get(
    "/phases",
    response_model=List[PhaseMarkerSchema],
    tags=["Stroke Comparison"],
    summary="Stroke phase markers"
)
async def get_phases() -> List[PhaseMarkerSchema]:
    """
    The fixed stroke phases used to annotate the percent axis.
    """
    return [_convert_phase(marker) for marker in PHASE_MARKERS]


# =============================================================================
# Stroke Comparison
# =============================================================================

@router.get(
    "/analysis/latest",
    response_model=StrokeComparisonResponse,
    tags=["Stroke Comparison"],
    summary="Most recent comparison"
)
async def get_latest() -> StrokeComparisonResponse:
    """
    Return the latest comparison.

    Starts out as the demo comparison and is replaced by every
    successful upload.
    """
    return _convert_comparison_to_response(session.get_latest())


@router.post(
    "/analysis/demo",
    response_model=StrokeComparisonResponse,
    tags=["Stroke Comparison"],
    summary="Reset to the demo comparison"
)
async def load_demo() -> StrokeComparisonResponse:
    """
    Replace the latest comparison with synthetic demo data.

    Useful for frontend development and testing.
    """
    return _convert_comparison_to_response(session.load_demo())


@router.post(
    "/analysis/upload",
    response_model=StrokeComparisonResponse,
    tags=["Stroke Comparison"],
    summary="Compare an uploaded trainee recording"
)
async def upload_trainee(
    file: UploadFile = File(..., description="JSON file of trainee pose frames"),
) -> StrokeComparisonResponse:
    """
    Compare a trainee pose recording against the pro reference.

    The file is:
    1. Parsed as a JSON list of frames
    2. Reduced to wrist-hip, rotation, weight and extension metrics
    3. Aligned with the pro stroke on a 0-100% axis
    4. Scored and given coaching recommendations

    A file without usable poses yields the demo comparison.
    A malformed file is rejected and the previous result is kept.

    Args:
        file: JSON file upload

    Returns:
        Complete stroke comparison
    """
    content = await file.read()
    return _run_upload(content, file.filename or "Trainee")


@router.post(
    "/analysis/frames",
    response_model=StrokeComparisonResponse,
    tags=["Stroke Comparison"],
    summary="Compare trainee frames sent as JSON"
)
async def compare_frames(request: AnalyzeFramesRequest) -> StrokeComparisonResponse:
    """
    Same as the upload endpoint, with frames in the request body.
    """
    return _run_upload(request.frames, request.trainee_label)


# =============================================================================
# Helper Functions
# =============================================================================

def _run_upload(content, trainee_label: str) -> StrokeComparisonResponse:
    try:
        result = session.upload(content, trainee_label)
    except InvalidPoseDocumentError as e:
        logger.warning(f"Rejected trainee document '{trainee_label}': {e}")
        raise HTTPException(status_code=400, detail=f"{INVALID_FILE_MESSAGE} ({e})")
    except Exception as e:
        logger.error(f"Stroke comparison failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return _convert_comparison_to_response(result)


def _convert_phase(marker) -> PhaseMarkerSchema:
    return PhaseMarkerSchema(
        phase=marker.phase,
        start=marker.start,
        end=marker.end,
        color=marker.color,
    )


def _convert_comparison_to_response(result: StrokeComparison) -> StrokeComparisonResponse:
    """Convert domain StrokeComparison to API response schema."""

    def convert_points(points) -> List[ComparisonPointSchema]:
        return [
            ComparisonPointSchema(
                stroke_percent=p.stroke_percent,
                pro_value=p.pro_value,
                trainee_value=p.trainee_value,
            )
            for p in points
        ]

    def convert_stat(stat: StatComparison) -> StatComparisonSchema:
        return StatComparisonSchema(
            pro=stat.pro,
            trainee=stat.trainee,
            difference=stat.difference,
        )

    def convert_anchors(anchors: Optional[AnchorSet]) -> Optional[AnchorSetSchema]:
        if anchors is None:
            return None
        return AnchorSetSchema(
            backswing_start=anchors.backswing_start,
            backswing_peak=anchors.backswing_peak,
            forward_swing_start=anchors.forward_swing_start,
            follow_through_end=anchors.follow_through_end,
            min_value=anchors.min_value,
        )

    report = result.recommendations

    return StrokeComparisonResponse(
        id=result.id,
        timestamp=result.timestamp,
        trainee_label=result.trainee_label,
        source=ComparisonSourceEnum(result.source.value),
        comparison=ComparisonDataSchema(**{
            kind.value: convert_points(result.comparison.series(kind))
            for kind in MetricKind
        }),
        phases=[_convert_phase(marker) for marker in result.phases],
        stats=StatisticsSchema(
            stroke_duration=convert_stat(result.stats.stroke_duration),
            peak_rotation=convert_stat(result.stats.peak_rotation),
            peak_extension=convert_stat(result.stats.peak_extension),
            wrist_drop=convert_stat(result.stats.wrist_drop),
        ),
        recommendations=RecommendationsSchema(
            priorities=[
                PrioritySchema(
                    severity=SeverityEnum(p.severity.value),
                    metric=p.metric,
                    issue=p.issue,
                    detail=p.detail,
                    improvement=p.improvement,
                )
                for p in report.priorities
            ],
            strengths=[
                StrengthSchema(metric=s.metric, achievement=s.achievement, detail=s.detail)
                for s in report.strengths
            ],
            drills=[
                DrillSchema(name=d.name, description=d.description, reps=d.reps)
                for d in report.drills
            ],
            overall_score=report.overall_score,
            grade=report.grade,
            component_scores=dict(report.component_scores),
        ),
        pro_anchors=convert_anchors(result.pro_anchors),
        trainee_anchors=convert_anchors(result.trainee_anchors),
    )
