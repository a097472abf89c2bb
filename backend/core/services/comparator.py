"""
Comparator Service

Summary statistics contrasting the pro and trainee strokes.
Every difference is trainee minus pro.
"""

from decimal import ROUND_HALF_UP, Decimal

import numpy as np

from ..domain.analysis import (
    AnchorSet,
    MetricKind,
    StatComparison,
    StatisticsBundle,
    StrokeMetrics,
)
from .. import thresholds


def to_fixed(value: float, digits: int) -> str:
    """
    Format with a fixed number of decimals, rounding ties away from zero.

    Works on the exact binary value of the float, so 14.25 gives "14.3"
    while 1.005 (stored as 1.00499...) gives "1.00".
    """
    exponent = Decimal(10) ** -digits
    return format(Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP), "f")


def stroke_duration_seconds(anchors: AnchorSet) -> float:
    """Duration of the normalized stroke, assuming CAPTURE_FPS."""
    return (anchors.follow_through_end - anchors.backswing_start) / thresholds.CAPTURE_FPS


def _peak(metrics: StrokeMetrics, kind: MetricKind) -> float:
    values = metrics.values(kind)
    if not values:
        raise ValueError(f"No {kind.value} samples for {metrics.player_type.value}")
    return float(np.max(values))


def calculate_comparison_stats(
    pro: StrokeMetrics,
    trainee: StrokeMetrics,
    pro_anchors: AnchorSet,
    trainee_anchors: AnchorSet,
) -> StatisticsBundle:
    """
    Compare duration, peak rotation, peak extension and wrist drop.

    Raises:
        ValueError: if either side has no shoulder-rotation or
            arm-extension samples to take a peak from
    """
    pro_duration = stroke_duration_seconds(pro_anchors)
    trainee_duration = stroke_duration_seconds(trainee_anchors)

    pro_rotation = _peak(pro, MetricKind.SHOULDER_ROTATION)
    trainee_rotation = _peak(trainee, MetricKind.SHOULDER_ROTATION)

    pro_extension = _peak(pro, MetricKind.ARM_EXTENSION)
    trainee_extension = _peak(trainee, MetricKind.ARM_EXTENSION)

    return StatisticsBundle(
        stroke_duration=StatComparison(
            pro=to_fixed(pro_duration, 2),
            trainee=to_fixed(trainee_duration, 2),
            difference=to_fixed((trainee_duration - pro_duration) * 1000, 0),
        ),
        peak_rotation=_one_decimal(pro_rotation, trainee_rotation),
        peak_extension=_one_decimal(pro_extension, trainee_extension),
        wrist_drop=_one_decimal(pro_anchors.min_value, trainee_anchors.min_value),
    )


def _one_decimal(pro: float, trainee: float) -> StatComparison:
    return StatComparison(
        pro=to_fixed(pro, 1),
        trainee=to_fixed(trainee, 1),
        difference=to_fixed(trainee - pro, 1),
    )
