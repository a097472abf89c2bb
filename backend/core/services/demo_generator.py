"""
Demo Generator Service

Fixed synthetic comparison used whenever real data cannot be analyzed,
so callers always have something to show.
"""

from ..domain.analysis import (
    ComparisonData,
    ComparisonPoint,
    StatComparison,
    StatisticsBundle,
)
from .. import thresholds


def _wrist_hip(percent: int) -> tuple[float, float]:
    if percent < 30:
        return -30 - percent * 1, -25 - percent * 0.8
    elif percent < 60:
        progress = (percent - 30) / 30
        return -60 + progress * 40, -45 + progress * 35
    elif percent < 70:
        return -20, -10
    else:
        progress = (percent - 70) / 30
        return -20 + progress * 5, -10 + progress * 2


def _shoulder_rotation(percent: int) -> tuple[float, float]:
    if percent < 30:
        return 10 + percent * 1.17, 10 + percent * 0.83
    elif percent < 60:
        progress = (percent - 30) / 30
        return 45 - progress * 15, 35 - progress * 10
    else:
        return 30 - (percent - 60) * 0.5, 25 - (percent - 60) * 0.3


def _weight_transfer(percent: int) -> tuple[float, float]:
    if percent < 30:
        return 50 - percent * 0.83, 50 - percent * 0.5
    elif percent < 70:
        progress = (percent - 30) / 40
        return 25 + progress * 50, 35 + progress * 30
    else:
        return 75 + (percent - 70) * 0.17, 65 + (percent - 70) * 0.1


def _arm_extension(percent: int) -> tuple[float, float]:
    if percent < 30:
        return 50 - percent * 0.33, 50 - percent * 0.2
    elif percent < 70:
        progress = (percent - 30) / 40
        return 40 + progress * 40, 45 + progress * 25
    else:
        progress = (percent - 70) / 30
        return 80 + progress * 20, 70 + progress * 10


def _curve(shape) -> tuple[ComparisonPoint, ...]:
    points = []
    for percent in thresholds.PERCENT_POINTS:
        pro_value, trainee_value = shape(percent)
        points.append(ComparisonPoint(
            stroke_percent=percent,
            pro_value=pro_value,
            trainee_value=trainee_value,
        ))
    return tuple(points)


def generate_demo_comparison() -> ComparisonData:
    """Synthetic pro/trainee curves on the standard percent axis."""
    return ComparisonData(
        wrist_hip=_curve(_wrist_hip),
        shoulder_rotation=_curve(_shoulder_rotation),
        weight_transfer=_curve(_weight_transfer),
        arm_extension=_curve(_arm_extension),
    )


def generate_demo_stats() -> StatisticsBundle:
    """Fixed statistics matching the demo curves."""
    return StatisticsBundle(
        stroke_duration=StatComparison(pro="1.50", trainee="1.75", difference="250"),
        peak_rotation=StatComparison(pro="45.0", trainee="35.0", difference="-10.0"),
        peak_extension=StatComparison(pro="100.0", trainee="80.0", difference="-20.0"),
        wrist_drop=StatComparison(pro="-60.0", trainee="-45.0", difference="15.0"),
    )
