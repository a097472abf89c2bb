"""
Recommendation Engine Service

Rule-based coaching report built from the comparison statistics and the
normalized weight-transfer curve.

Five rules run in a fixed order. Each one may add a priority or a
strength and always contributes one component score; the overall score
is their rounded mean.
"""

import math

import numpy as np

from ..domain.analysis import (
    ComparisonData,
    Drill,
    Priority,
    RecommendationReport,
    Severity,
    StatisticsBundle,
    Strength,
)
from .. import thresholds
from .comparator import to_fixed


class RecommendationEngine:
    """
    Generates priorities, strengths, drills and an overall score.

    Stateless: the same statistics and curves always produce the same
    report.

    Usage:
        engine = RecommendationEngine()
        report = engine.generate(stats, comparison)
        print(f"Overall score: {report.overall_score}")
    """

    # -------------------------------------------------------------------------
    # Drill library, keyed by priority metric name
    # -------------------------------------------------------------------------

    DRILLS = {
        "Shoulder Rotation": Drill(
            name="Wall Rotation Drill",
            description="Stand with back against wall, practice rotating shoulders while maintaining contact",
            reps="3 sets of 15 reps",
        ),
        "Wrist Position": Drill(
            name="Paddle Drop Drill",
            description="Practice letting paddle drop naturally during backswing, pause at lowest point",
            reps="3 sets of 10 slow-motion swings",
        ),
        "Weight Transfer": Drill(
            name="Step and Drive Drill",
            description="Practice stepping back, loading, then driving forward without hitting",
            reps="3 sets of 12 reps",
        ),
        "Arm Extension": Drill(
            name="Target Reach Drill",
            description="Place target cone 2 feet past contact point, practice reaching paddle to cone",
            reps="3 sets of 15 swings",
        ),
        "Stroke Tempo": Drill(
            name="Rhythm Training",
            description='Count "1-2-3" for backswing-forward-follow through, maintain consistent tempo',
            reps="5 sets of 10 swings",
        ),
    }

    def generate(
        self,
        stats: StatisticsBundle,
        comparison: ComparisonData,
    ) -> RecommendationReport:
        """
        Build the coaching report.

        Args:
            stats: Pro-vs-trainee statistics
            comparison: Normalized curves (only weight transfer is used)

        Returns:
            RecommendationReport with severity-sorted priorities
        """
        report = RecommendationReport()

        scores = {
            "shoulder_rotation": self._analyze_shoulder_rotation(stats, report),
            "wrist_position": self._analyze_wrist_position(stats, report),
            "weight_transfer": self._analyze_weight_transfer(comparison, report),
            "arm_extension": self._analyze_arm_extension(stats, report),
            "stroke_tempo": self._analyze_stroke_tempo(stats, report),
        }
        report.component_scores = scores
        report.overall_score = _round_half_up(sum(scores.values()) / len(scores))

        # sort() is stable, so rule order is kept within a severity
        report.priorities.sort(key=lambda p: p.severity.rank)
        report.drills = self._select_drills(report.priorities)

        return report

    # -------------------------------------------------------------------------
    # Rules
    # -------------------------------------------------------------------------

    def _analyze_shoulder_rotation(
        self,
        stats: StatisticsBundle,
        report: RecommendationReport,
    ) -> int:
        """Peak shoulder rotation versus the pro."""
        scores = thresholds.SCORES["shoulder_rotation"]
        diff = stats.peak_rotation.difference_value

        if diff < thresholds.ROTATION_HIGH_BELOW:
            report.priorities.append(Priority(
                severity=Severity.HIGH,
                metric="Shoulder Rotation",
                issue=f"Insufficient rotation ({to_fixed(abs(diff), 0)}° less than optimal)",
                detail="Limited shoulder turn reduces power generation and can lead to arm-dominant swings",
                improvement="Focus on turning your back to the target during backswing",
            ))
            return scores["high"]
        elif diff < thresholds.ROTATION_MEDIUM_BELOW:
            report.priorities.append(Priority(
                severity=Severity.MEDIUM,
                metric="Shoulder Rotation",
                issue=f"Below optimal rotation ({to_fixed(abs(diff), 0)}° less)",
                detail="More rotation would increase power",
                improvement="Practice shadow swings with exaggerated shoulder turn",
            ))
            return scores["medium"]
        elif diff > thresholds.ROTATION_STRENGTH_ABOVE:
            report.strengths.append(Strength(
                metric="Shoulder Rotation",
                achievement="Excellent shoulder turn",
                detail=(
                    f"Achieving {stats.peak_rotation.trainee}° rotation "
                    f"(pro level: {stats.peak_rotation.pro}°)"
                ),
            ))
            return scores["strength"]

        return scores["neutral"]

    def _analyze_wrist_position(
        self,
        stats: StatisticsBundle,
        report: RecommendationReport,
    ) -> int:
        """Depth of the wrist drop versus the pro (positive = shallower)."""
        scores = thresholds.SCORES["wrist_position"]
        diff = stats.wrist_drop.difference_value

        if diff > thresholds.WRIST_HIGH_ABOVE:
            report.priorities.append(Priority(
                severity=Severity.HIGH,
                metric="Wrist Position",
                issue=f"Shallow wrist drop ({to_fixed(diff, 0)}px higher than optimal)",
                detail="Limited wrist drop reduces power and spin potential",
                improvement="Allow the paddle to drop naturally during backswing, creating lag",
            ))
            return scores["high"]
        elif diff > thresholds.WRIST_MEDIUM_ABOVE:
            report.priorities.append(Priority(
                severity=Severity.MEDIUM,
                metric="Wrist Position",
                issue="Wrist position could be lower",
                detail="Deeper drop would improve power generation",
                improvement="Practice feeling the paddle weight during backswing",
            ))
            return scores["medium"]

        report.strengths.append(Strength(
            metric="Wrist Mechanics",
            achievement="Good wrist lag",
            detail="Proper wrist position for power generation",
        ))
        return scores["strength"]

    def _analyze_weight_transfer(
        self,
        comparison: ComparisonData,
        report: RecommendationReport,
    ) -> int:
        """Range of the trainee's weight shift versus the pro's range."""
        scores = thresholds.SCORES["weight_transfer"]
        trainee_range = _value_range([p.trainee_value for p in comparison.weight_transfer])
        optimal_range = _value_range([p.pro_value for p in comparison.weight_transfer])

        if trainee_range < optimal_range * thresholds.WEIGHT_HIGH_RATIO:
            report.priorities.append(Priority(
                severity=Severity.HIGH,
                metric="Weight Transfer",
                issue="Limited weight shift",
                detail="Insufficient weight transfer reduces power and balance",
                improvement="Practice loading back foot, then driving forward through contact",
            ))
            return scores["high"]
        elif trainee_range < optimal_range * thresholds.WEIGHT_MEDIUM_RATIO:
            report.priorities.append(Priority(
                severity=Severity.MEDIUM,
                metric="Weight Transfer",
                issue="Moderate weight transfer",
                detail="More dynamic weight shift would improve power",
                improvement="Exaggerate the back-to-front movement in practice",
            ))
            return scores["medium"]

        report.strengths.append(Strength(
            metric="Weight Transfer",
            achievement="Dynamic weight shift",
            detail="Good transfer from back to front foot",
        ))
        return scores["strength"]

    def _analyze_arm_extension(
        self,
        stats: StatisticsBundle,
        report: RecommendationReport,
    ) -> int:
        """Peak arm extension versus the pro."""
        scores = thresholds.SCORES["arm_extension"]
        diff = stats.peak_extension.difference_value

        if diff < thresholds.EXTENSION_HIGH_BELOW:
            report.priorities.append(Priority(
                severity=Severity.HIGH,
                metric="Arm Extension",
                issue=f"Limited extension ({to_fixed(abs(diff), 0)} units less)",
                detail="Incomplete extension reduces reach and power",
                improvement="Focus on extending through the ball toward your target",
            ))
            return scores["high"]
        elif diff < thresholds.EXTENSION_MEDIUM_BELOW:
            report.priorities.append(Priority(
                severity=Severity.MEDIUM,
                metric="Arm Extension",
                issue="Could extend more fully",
                detail="Fuller extension improves control and power",
                improvement="Practice reaching toward target on follow-through",
            ))
            return scores["medium"]

        report.strengths.append(Strength(
            metric="Arm Extension",
            achievement="Full extension through contact",
            detail="Good reach and follow-through",
        ))
        return scores["strength"]

    def _analyze_stroke_tempo(
        self,
        stats: StatisticsBundle,
        report: RecommendationReport,
    ) -> int:
        """Stroke duration versus the pro, in milliseconds."""
        scores = thresholds.SCORES["stroke_tempo"]
        diff = stats.stroke_duration.difference_value

        if diff > thresholds.TEMPO_SLOW_ABOVE_MS:
            report.priorities.append(Priority(
                severity=Severity.MEDIUM,
                metric="Stroke Tempo",
                issue=f"Slow stroke execution ({to_fixed(diff, 0)}ms slower)",
                detail="Slower tempo may affect reaction time",
                improvement="Work on smoother, more efficient transitions",
            ))
            return scores["medium"]
        elif diff < thresholds.TEMPO_STRENGTH_BELOW_MS:
            report.strengths.append(Strength(
                metric="Stroke Timing",
                achievement="Efficient tempo",
                detail="Quick, smooth execution",
            ))
            return scores["strength"]

        return scores["neutral"]

    # -------------------------------------------------------------------------
    # Drills
    # -------------------------------------------------------------------------

    def _select_drills(self, priorities: list[Priority]) -> list[Drill]:
        """One drill per distinct metric among the top priorities."""
        drills = []
        seen = set()
        for priority in priorities[:thresholds.MAX_DRILLS]:
            drill = self.DRILLS.get(priority.metric)
            if drill is None or priority.metric in seen:
                continue
            seen.add(priority.metric)
            drills.append(drill)
        return drills


def _value_range(values: list[float]) -> float:
    if not values:
        return 0.0
    return float(np.max(values) - np.min(values))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
