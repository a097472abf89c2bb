"""
Temporal Normalizer Service

Warps two recordings onto a shared 0-100% stroke-progress axis.

Every percent point is mapped through each recording's own anchors into
that recording's sample-index space; metric values are then linearly
interpolated there. All four metrics of a recording share the timeline
derived from its wrist-hip anchors.
"""

import math
from typing import Sequence

from ..domain.analysis import (
    AnchorSet,
    ComparisonData,
    ComparisonPoint,
    MetricKind,
    MetricSample,
    StrokeMetrics,
)
from .. import thresholds


def map_percent_to_index(percent: float, anchors: AnchorSet) -> float:
    """Fractional sample index of a stroke percent between the anchors."""
    stroke_start = anchors.backswing_start
    stroke_length = anchors.follow_through_end - anchors.backswing_start
    return stroke_start + stroke_length * percent / 100


def interpolate_value(data: Sequence[MetricSample], index: float) -> float:
    """
    Value of a series at a fractional index.

    Indices at or past the last sample return the last value (no
    extrapolation). An empty series reads as 0.
    """
    if not data:
        return 0

    floor_index = math.floor(index)
    ceil_index = math.ceil(index)

    if floor_index >= len(data) - 1:
        return data[-1].value
    if floor_index == ceil_index:
        return data[floor_index].value

    fraction = index - floor_index
    floor_value = data[floor_index].value
    ceil_value = data[ceil_index].value

    return floor_value + (ceil_value - floor_value) * fraction


def normalize_and_align(
    pro: StrokeMetrics,
    trainee: StrokeMetrics,
    pro_anchors: AnchorSet,
    trainee_anchors: AnchorSet,
) -> ComparisonData:
    """
    Build the paired 51-point curves for every metric.

    Args:
        pro: Metrics of the reference recording
        trainee: Metrics of the trainee recording
        pro_anchors: Anchors of the reference wrist-hip series
        trainee_anchors: Anchors of the trainee wrist-hip series

    Returns:
        ComparisonData with one point per percent in PERCENT_POINTS
    """
    curves: dict[MetricKind, list[ComparisonPoint]] = {kind: [] for kind in MetricKind}

    for percent in thresholds.PERCENT_POINTS:
        pro_index = map_percent_to_index(percent, pro_anchors)
        trainee_index = map_percent_to_index(percent, trainee_anchors)

        for kind in MetricKind:
            curves[kind].append(ComparisonPoint(
                stroke_percent=percent,
                pro_value=interpolate_value(pro.series(kind), pro_index),
                trainee_value=interpolate_value(trainee.series(kind), trainee_index),
            ))

    return ComparisonData(
        wrist_hip=tuple(curves[MetricKind.WRIST_HIP]),
        shoulder_rotation=tuple(curves[MetricKind.SHOULDER_ROTATION]),
        weight_transfer=tuple(curves[MetricKind.WEIGHT_TRANSFER]),
        arm_extension=tuple(curves[MetricKind.ARM_EXTENSION]),
    )
