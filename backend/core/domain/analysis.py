"""
Stroke Analysis Domain Models

Data structures for representing a pro-vs-trainee stroke comparison,
including metric series, phase anchors, aligned curves, statistics and
coaching feedback.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class PlayerType(str, Enum):
    """Which recording a metric sample came from."""
    PRO = "Pro"
    TRAINEE = "Trainee"


class MetricKind(str, Enum):
    """
    The four kinematic metrics extracted from every frame.

    - WRIST_HIP: rightWrist.y - rightHip.y (pixels, negative = wrist above hip)
    - SHOULDER_ROTATION: shoulder-width rotation proxy (degrees)
    - WEIGHT_TRANSFER: share of ankle x on the right foot (percent)
    - ARM_EXTENSION: right shoulder to right wrist distance (pixels)
    """
    WRIST_HIP = "wrist_hip"
    SHOULDER_ROTATION = "shoulder_rotation"
    WEIGHT_TRANSFER = "weight_transfer"
    ARM_EXTENSION = "arm_extension"


class Severity(str, Enum):
    """How urgently a coaching priority should be addressed."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort key: high first."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {Severity.HIGH: 0, Severity.MEDIUM: 1, Severity.LOW: 2}


@dataclass(frozen=True)
class MetricSample:
    """One scalar measurement taken from a single valid frame."""
    frame_id: Optional[int]
    timestamp: float
    value: float
    player_type: PlayerType


@dataclass(frozen=True)
class StrokeMetrics:
    """
    All metric series extracted from one recording.

    Each series only holds frames where its joints were detected, so the
    series can differ in length and in which frames they cover.
    """
    player_type: PlayerType
    wrist_hip: tuple[MetricSample, ...] = ()
    shoulder_rotation: tuple[MetricSample, ...] = ()
    weight_transfer: tuple[MetricSample, ...] = ()
    arm_extension: tuple[MetricSample, ...] = ()
    frame_ids: tuple[Optional[int], ...] = ()

    def series(self, kind: MetricKind) -> tuple[MetricSample, ...]:
        """Get the sample series for one metric kind."""
        return getattr(self, kind.value)

    def values(self, kind: MetricKind) -> list[float]:
        return [sample.value for sample in self.series(kind)]


@dataclass(frozen=True)
class AnchorSet:
    """
    Phase anchors found in a wrist-hip series.

    Indices point into the wrist-hip series, not at frame ids.
    Intended ordering is start <= peak <= forward <= end, but
    forward < end is not guaranteed by the detector.
    """
    backswing_start: int
    backswing_peak: int
    forward_swing_start: int
    follow_through_end: int
    min_value: float

    @property
    def span(self) -> int:
        """Number of samples covered by the normalized stroke."""
        return self.follow_through_end - self.backswing_start

    @property
    def is_degenerate(self) -> bool:
        """True when the forward swing never starts before the follow-through ends."""
        return self.forward_swing_start >= self.follow_through_end


@dataclass(frozen=True)
class ComparisonPoint:
    """Pro and trainee value of one metric at one stroke percent."""
    stroke_percent: int
    pro_value: float
    trainee_value: float


@dataclass(frozen=True)
class ComparisonData:
    """Four 51-point curves on the shared stroke-progress axis."""
    wrist_hip: tuple[ComparisonPoint, ...] = ()
    shoulder_rotation: tuple[ComparisonPoint, ...] = ()
    weight_transfer: tuple[ComparisonPoint, ...] = ()
    arm_extension: tuple[ComparisonPoint, ...] = ()

    def series(self, kind: MetricKind) -> tuple[ComparisonPoint, ...]:
        return getattr(self, kind.value)


@dataclass(frozen=True)
class PhaseMarker:
    """A named stroke phase on the percent axis, with its chart color."""
    phase: str
    start: int
    end: int
    color: str


# Identical for every comparison
PHASE_MARKERS: tuple[PhaseMarker, ...] = (
    PhaseMarker(phase="Backswing", start=0, end=30, color="#82ca9d"),
    PhaseMarker(phase="Forward Swing", start=30, end=60, color="#ff7300"),
    PhaseMarker(phase="Contact", start=60, end=70, color="#ff0000"),
    PhaseMarker(phase="Follow-through", start=70, end=100, color="#0088fe"),
)


@dataclass(frozen=True)
class StatComparison:
    """
    One pro-vs-trainee statistic.

    Values are pre-formatted strings at fixed precision; difference is
    always trainee minus pro.
    """
    pro: str
    trainee: str
    difference: str

    @property
    def difference_value(self) -> float:
        """The formatted difference read back as a number."""
        return float(self.difference)


@dataclass(frozen=True)
class StatisticsBundle:
    """
    Summary statistics contrasting the two recordings.

    Attributes:
        stroke_duration: seconds per side, difference in milliseconds
        peak_rotation: max shoulder rotation proxy (degrees)
        peak_extension: max arm extension (pixels)
        wrist_drop: minimum wrist-hip differential (pixels)
    """
    stroke_duration: StatComparison
    peak_rotation: StatComparison
    peak_extension: StatComparison
    wrist_drop: StatComparison


@dataclass(frozen=True)
class Priority:
    """A weakness the trainee should work on."""
    severity: Severity
    metric: str
    issue: str
    detail: str
    improvement: str


@dataclass(frozen=True)
class Strength:
    """Something the trainee already does well."""
    metric: str
    achievement: str
    detail: str


@dataclass(frozen=True)
class Drill:
    """A practice drill targeting one metric."""
    name: str
    description: str
    reps: str


@dataclass
class RecommendationReport:
    """
    Coaching feedback generated from the statistics.

    Attributes:
        priorities: Issues sorted by severity (high first)
        strengths: Positive findings in rule order
        drills: At most 3 drills taken from the top priorities
        overall_score: Rounded mean of the component scores (0-100)
        component_scores: Score of each rule, keyed by rule name
    """
    priorities: list[Priority] = field(default_factory=list)
    strengths: list[Strength] = field(default_factory=list)
    drills: list[Drill] = field(default_factory=list)
    overall_score: int = 0
    component_scores: dict[str, int] = field(default_factory=dict)

    @property
    def grade(self) -> str:
        """Convert overall score to letter grade."""
        if self.overall_score >= 90:
            return "A"
        elif self.overall_score >= 80:
            return "B"
        elif self.overall_score >= 70:
            return "C"
        elif self.overall_score >= 60:
            return "D"
        else:
            return "F"


class ComparisonSource(str, Enum):
    """Where a comparison's curves and statistics came from."""
    ANALYSIS = "analysis"
    DEMO = "demo"


@dataclass(frozen=True)
class StrokeComparison:
    """
    Complete result of comparing a trainee stroke against the pro stroke.

    This is the main result object returned by the analysis pipeline.
    A new one is built for every invocation.
    """
    # Identification
    id: str
    timestamp: datetime
    trainee_label: str

    # Results
    source: ComparisonSource
    comparison: ComparisonData
    phases: tuple[PhaseMarker, ...]
    stats: StatisticsBundle
    recommendations: RecommendationReport

    # Anchors are only known when real data was analyzed
    pro_anchors: Optional[AnchorSet] = None
    trainee_anchors: Optional[AnchorSet] = None

    @property
    def is_demo(self) -> bool:
        return self.source == ComparisonSource.DEMO
