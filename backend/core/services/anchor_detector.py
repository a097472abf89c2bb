"""
Anchor Detector Service

Locates the phase boundaries of a stroke in its wrist-hip series.

Anchors are found with fixed rate thresholds on the first difference of
the series:
- BACKSWING_PEAK: global minimum (deepest wrist position)
- BACKSWING_START: a few frames before the wrist starts moving fast
- FORWARD_SWING_START: first fast rise after the peak
- FOLLOW_THROUGH_END: a few frames after the motion settles
"""

import logging
from typing import Optional, Sequence

import numpy as np

from ..domain.analysis import AnchorSet, MetricSample
from .. import thresholds

logger = logging.getLogger(__name__)


def find_anchor_points(wrist_hip: Sequence[MetricSample]) -> Optional[AnchorSet]:
    """
    Detect stroke anchors in a wrist-hip series.

    Args:
        wrist_hip: Wrist-hip samples of one recording, in order

    Returns:
        AnchorSet with indices into ``wrist_hip``, or None if the series
        is empty
    """
    if not wrist_hip:
        return None

    values = np.array([sample.value for sample in wrist_hip], dtype=float)
    n = len(values)

    # np.argmin returns the first occurrence on ties
    peak = int(np.argmin(values))
    min_value = float(values[peak])

    backswing_start = 0
    for i in range(1, peak):
        if values[i] - values[i - 1] < thresholds.BACKSWING_ONSET_RATE:
            backswing_start = max(0, i - thresholds.BACKSWING_START_LOOKBACK)
            break

    forward_swing_start = peak
    for i in range(peak + 1, n - 1):
        if values[i + 1] - values[i] > thresholds.FORWARD_SWING_ONSET_RATE:
            forward_swing_start = i
            break

    follow_through_end = n - 1
    for i in range(forward_swing_start + thresholds.FOLLOW_THROUGH_MIN_GAP,
                   n - thresholds.FOLLOW_THROUGH_TAIL):
        if abs(values[i + 1] - values[i]) < thresholds.FOLLOW_THROUGH_SETTLE_RATE:
            follow_through_end = i + thresholds.FOLLOW_THROUGH_TAIL
            break

    anchors = AnchorSet(
        backswing_start=backswing_start,
        backswing_peak=peak,
        forward_swing_start=forward_swing_start,
        follow_through_end=follow_through_end,
        min_value=min_value,
    )

    if anchors.is_degenerate:
        logger.warning(
            f"Forward swing start ({forward_swing_start}) is not before "
            f"follow-through end ({follow_through_end}) in {n} samples"
        )

    return anchors
