"""
Metric Extractor Service

Turns a recorded frame sequence into the four kinematic metric series
used to compare strokes.

This is pure mathematics - no external dependencies except numpy.
"""

from typing import Iterable, Optional

import numpy as np

from ..domain.pose import Joint, PersonPose, PoseFrame
from ..domain.analysis import MetricSample, PlayerType, StrokeMetrics
from .. import thresholds


class MetricExtractor:
    """
    Extracts stroke metrics from pose frames.

    Each metric has its own joint requirements. A frame that is missing
    the joints for one metric still contributes to the others.

    All methods are static - no state needed.
    """

    # -------------------------------------------------------------------------
    # Per-frame metrics
    # -------------------------------------------------------------------------

    @staticmethod
    def wrist_hip_differential(pose: PersonPose) -> Optional[float]:
        """
        Vertical offset of the right wrist from the right hip.

        Negative means the wrist is above the hip (image y grows downward).
        """
        wrist = pose.get_joint(Joint.RIGHT_WRIST)
        hip = pose.get_joint(Joint.RIGHT_HIP)
        if not (wrist and hip and wrist.has_valid_y and hip.has_valid_y):
            return None
        return wrist.y - hip.y

    @staticmethod
    def shoulder_rotation(pose: PersonPose) -> Optional[float]:
        """
        Shoulder rotation proxy in degrees.

        Linear in the horizontal shoulder width: 50 px reads as 45 degrees.
        Not a true rotation angle.
        """
        left = pose.get_joint(Joint.LEFT_SHOULDER)
        right = pose.get_joint(Joint.RIGHT_SHOULDER)
        if not (left and right and left.has_valid_x and right.has_valid_x):
            return None
        width = abs(left.x - right.x)
        return (width / thresholds.ROTATION_REFERENCE_WIDTH_PX) * thresholds.ROTATION_SCALE_DEG

    @staticmethod
    def weight_transfer(pose: PersonPose) -> Optional[float]:
        """Percent of weight on the right foot, from ankle x positions."""
        left = pose.get_joint(Joint.LEFT_ANKLE)
        right = pose.get_joint(Joint.RIGHT_ANKLE)
        if not (left and right and left.has_valid_x and right.has_valid_x):
            return None
        return right.x / (left.x + right.x) * 100

    @staticmethod
    def arm_extension(pose: PersonPose) -> Optional[float]:
        """Distance from right shoulder to right wrist in pixels."""
        shoulder = pose.get_joint(Joint.RIGHT_SHOULDER)
        wrist = pose.get_joint(Joint.RIGHT_WRIST)
        if not (shoulder and wrist and shoulder.is_valid and wrist.is_valid):
            return None
        v = np.array([wrist.x - shoulder.x, wrist.y - shoulder.y])
        return float(np.linalg.norm(v))

    # -------------------------------------------------------------------------
    # Whole recording
    # -------------------------------------------------------------------------

    @classmethod
    def extract(
        cls,
        frames: Iterable[PoseFrame],
        player_type: PlayerType,
    ) -> StrokeMetrics:
        """
        Extract every metric series from a recording.

        Args:
            frames: Frames in recording order
            player_type: Which recording this is (Pro or Trainee)

        Returns:
            StrokeMetrics with one series per metric and the ids of all
            frames that carried a pose
        """
        extractors = {
            "wrist_hip": cls.wrist_hip_differential,
            "shoulder_rotation": cls.shoulder_rotation,
            "weight_transfer": cls.weight_transfer,
            "arm_extension": cls.arm_extension,
        }
        series: dict[str, list[MetricSample]] = {name: [] for name in extractors}
        frame_ids = []

        for frame in frames:
            pose = frame.primary_pose
            if pose is None:
                continue

            for name, extractor in extractors.items():
                value = extractor(pose)
                if value is not None:
                    series[name].append(MetricSample(
                        frame_id=frame.frame_id,
                        timestamp=frame.timestamp,
                        value=value,
                        player_type=player_type,
                    ))

            frame_ids.append(frame.frame_id)

        return StrokeMetrics(
            player_type=player_type,
            wrist_hip=tuple(series["wrist_hip"]),
            shoulder_rotation=tuple(series["shoulder_rotation"]),
            weight_transfer=tuple(series["weight_transfer"]),
            arm_extension=tuple(series["arm_extension"]),
            frame_ids=tuple(frame_ids),
        )
