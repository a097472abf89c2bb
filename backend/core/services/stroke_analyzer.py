"""
Stroke Analyzer Service

High-level service that runs the whole comparison pipeline:

    frames -> metrics -> anchors -> normalized curves -> statistics
           -> recommendations

This is the main entry point for comparing a trainee stroke with the pro
reference.
"""

import logging
import uuid
from datetime import datetime
from typing import Any, Optional, Sequence

from ..domain.pose import PoseFrame
from ..domain.analysis import (
    PHASE_MARKERS,
    AnchorSet,
    ComparisonData,
    ComparisonSource,
    PlayerType,
    StatisticsBundle,
    StrokeComparison,
    StrokeMetrics,
)
from .metric_extractor import MetricExtractor
from .anchor_detector import find_anchor_points
from .temporal_normalizer import normalize_and_align
from .comparator import calculate_comparison_stats
from .recommendation_engine import RecommendationEngine
from .demo_generator import generate_demo_comparison, generate_demo_stats
from .reference_data import load_reference_frames, parse_pose_document

logger = logging.getLogger(__name__)

DEMO_TRAINEE_LABEL = "Demo Trainee Data"


class StrokeAnalyzer:
    """
    Compares trainee strokes against a pro reference recording.

    Every call returns a new StrokeComparison; the analyzer keeps no
    results between calls.

    Usage:
        analyzer = StrokeAnalyzer()

        # From an uploaded document
        result = analyzer.compare_document(raw_bytes, trainee_label="me.json")
        print(f"Overall score: {result.recommendations.overall_score}")

        # Or from parsed frames
        result = analyzer.compare_frames(frames)
    """

    def __init__(self, pro_frames: Optional[Sequence[PoseFrame]] = None):
        """
        Args:
            pro_frames: Reference recording; defaults to the bundled pro data
        """
        self._pro_frames = tuple(pro_frames) if pro_frames is not None else None
        self.recommendation_engine = RecommendationEngine()

    @property
    def pro_frames(self) -> tuple[PoseFrame, ...]:
        if self._pro_frames is None:
            self._pro_frames = load_reference_frames()
        return self._pro_frames

    # -------------------------------------------------------------------------
    # Main Analysis Methods
    # -------------------------------------------------------------------------

    def compare_document(self, content: Any, trainee_label: str = "Trainee") -> StrokeComparison:
        """
        Compare a raw trainee pose document against the pro.

        Raises:
            InvalidPoseDocumentError: if the document cannot be parsed
        """
        frames = parse_pose_document(content)
        return self.compare_frames(frames, trainee_label=trainee_label)

    def compare_frames(
        self,
        trainee_frames: Sequence[PoseFrame],
        trainee_label: str = "Trainee",
    ) -> StrokeComparison:
        """
        Compare trainee frames against the pro.

        Falls back to the demo comparison when either recording lacks the
        data needed for alignment.
        """
        pro_metrics = MetricExtractor.extract(self.pro_frames, PlayerType.PRO)
        trainee_metrics = MetricExtractor.extract(trainee_frames, PlayerType.TRAINEE)

        logger.info(
            f"Extracted metrics: pro {len(pro_metrics.wrist_hip)} wrist-hip samples, "
            f"trainee {len(trainee_metrics.wrist_hip)} wrist-hip samples"
        )

        analyzed = self._normalize(pro_metrics, trainee_metrics)
        if analyzed is None:
            return self.demo()

        comparison, stats, pro_anchors, trainee_anchors = analyzed
        return self._build_result(
            source=ComparisonSource.ANALYSIS,
            trainee_label=trainee_label,
            comparison=comparison,
            stats=stats,
            pro_anchors=pro_anchors,
            trainee_anchors=trainee_anchors,
        )

    def demo(self) -> StrokeComparison:
        """The fixed demo comparison, with recommendations computed from it."""
        return self._build_result(
            source=ComparisonSource.DEMO,
            trainee_label=DEMO_TRAINEE_LABEL,
            comparison=generate_demo_comparison(),
            stats=generate_demo_stats(),
        )

    # -------------------------------------------------------------------------
    # Pipeline steps
    # -------------------------------------------------------------------------

    def _normalize(
        self,
        pro: StrokeMetrics,
        trainee: StrokeMetrics,
    ) -> Optional[tuple[ComparisonData, StatisticsBundle, AnchorSet, AnchorSet]]:
        """Align and compare both recordings, or None if data is insufficient."""
        if not pro.wrist_hip or not trainee.wrist_hip:
            logger.info("No wrist-hip samples on one side - using demo data")
            return None

        pro_anchors = find_anchor_points(pro.wrist_hip)
        trainee_anchors = find_anchor_points(trainee.wrist_hip)
        if pro_anchors is None or trainee_anchors is None:
            logger.info("Anchor detection failed - using demo data")
            return None

        if pro_anchors.span <= 0 or trainee_anchors.span <= 0:
            logger.info("Zero-length stroke span - using demo data")
            return None

        if not (pro.shoulder_rotation and trainee.shoulder_rotation
                and pro.arm_extension and trainee.arm_extension):
            logger.info("Missing rotation or extension samples - using demo data")
            return None

        comparison = normalize_and_align(pro, trainee, pro_anchors, trainee_anchors)
        stats = calculate_comparison_stats(pro, trainee, pro_anchors, trainee_anchors)
        return comparison, stats, pro_anchors, trainee_anchors

    def _build_result(
        self,
        source: ComparisonSource,
        trainee_label: str,
        comparison: ComparisonData,
        stats: StatisticsBundle,
        pro_anchors: Optional[AnchorSet] = None,
        trainee_anchors: Optional[AnchorSet] = None,
    ) -> StrokeComparison:
        recommendations = self.recommendation_engine.generate(stats, comparison)
        return StrokeComparison(
            id=str(uuid.uuid4()),
            timestamp=datetime.now(),
            trainee_label=trainee_label,
            source=source,
            comparison=comparison,
            phases=PHASE_MARKERS,
            stats=stats,
            recommendations=recommendations,
            pro_anchors=pro_anchors,
            trainee_anchors=trainee_anchors,
        )
