"""
Pose Domain Models

Data structures for representing the 2-D body joints of a recorded stroke.

Recordings arrive as a list of frame objects:

    {
        "frameId": 12,
        "timestamp": 400,
        "primitives": {
            "people": [
                {"pose": {"rightWrist": {"x": 352.0, "y": 310.5}, ...}}
            ]
        }
    }

Coordinates are image pixels. A coordinate of 0 (or below) is the
detector's sentinel for "joint not found", never a real measurement.
"""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class Joint(str, Enum):
    """
    Named joints used by the stroke metrics.

    Values match the keys of the ``pose`` object in the input document.
    """
    # Upper body
    LEFT_SHOULDER = "leftShoulder"
    RIGHT_SHOULDER = "rightShoulder"
    LEFT_ELBOW = "leftElbow"
    RIGHT_ELBOW = "rightElbow"
    LEFT_WRIST = "leftWrist"
    RIGHT_WRIST = "rightWrist"

    # Lower body
    LEFT_HIP = "leftHip"
    RIGHT_HIP = "rightHip"
    LEFT_KNEE = "leftKnee"
    RIGHT_KNEE = "rightKnee"
    LEFT_ANKLE = "leftAnkle"
    RIGHT_ANKLE = "rightAnkle"


@dataclass(frozen=True)
class JointPosition:
    """
    A single detected joint in image coordinates.

    Attributes:
        x: Horizontal position in pixels
        y: Vertical position in pixels (grows downward)
    """
    x: float
    y: float

    @property
    def has_valid_x(self) -> bool:
        """True when the x coordinate was actually detected."""
        return self.x > 0

    @property
    def has_valid_y(self) -> bool:
        """True when the y coordinate was actually detected."""
        return self.y > 0

    @property
    def is_valid(self) -> bool:
        """True when both coordinates were detected."""
        return self.has_valid_x and self.has_valid_y

    @classmethod
    def from_dict(cls, data: Any) -> Optional["JointPosition"]:
        """Build from ``{"x": .., "y": ..}``; anything unusable maps to None."""
        if not isinstance(data, dict):
            return None
        x = _as_number(data.get("x"))
        y = _as_number(data.get("y"))
        # A missing axis reads as 0, the "not detected" sentinel
        return cls(x=x if x is not None else 0.0, y=y if y is not None else 0.0)


@dataclass(frozen=True)
class PersonPose:
    """Joint positions of one detected person, keyed by joint name."""
    joints: dict[str, Optional[JointPosition]] = field(default_factory=dict)

    def get_joint(self, joint: Joint) -> Optional[JointPosition]:
        """Get a joint, or None if it was never reported."""
        return self.joints.get(joint.value)

    @classmethod
    def from_dict(cls, data: dict) -> "PersonPose":
        return cls(joints={
            str(name): JointPosition.from_dict(value)
            for name, value in data.items()
        })


@dataclass(frozen=True)
class PoseFrame:
    """
    One sample of a recording.

    Attributes:
        frame_id: Source-assigned identifier (not necessarily contiguous)
        timestamp: Source timestamp, 0 when absent
        people: Poses of every detected person, in detector order
    """
    frame_id: Optional[int]
    timestamp: float = 0
    people: tuple[PersonPose, ...] = ()

    @property
    def primary_pose(self) -> Optional[PersonPose]:
        """Pose of the first detected person. Other people are ignored."""
        return self.people[0] if self.people else None

    @classmethod
    def from_dict(cls, data: Any) -> "PoseFrame":
        """
        Build a frame from one element of the input document.

        Missing or oddly-shaped sections yield a frame with no people
        rather than an error; only the document as a whole can be malformed.
        """
        if not isinstance(data, dict):
            return cls(frame_id=None)

        frame_id = data.get("frameId")
        if isinstance(frame_id, float):
            frame_id = int(frame_id) if math.isfinite(frame_id) else None
        elif isinstance(frame_id, bool) or not isinstance(frame_id, int):
            frame_id = None

        timestamp = _as_number(data.get("timestamp")) or 0

        people = []
        primitives = data.get("primitives")
        raw_people = primitives.get("people") if isinstance(primitives, dict) else None
        if isinstance(raw_people, list):
            for person in raw_people:
                pose = person.get("pose") if isinstance(person, dict) else None
                # Keep the slot so "first person" keeps its meaning
                people.append(PersonPose.from_dict(pose) if isinstance(pose, dict) else None)

        # A first person without a pose means the frame has no usable pose
        if people and people[0] is None:
            people = []
        return cls(
            frame_id=frame_id,
            timestamp=timestamp,
            people=tuple(p for p in people if p is not None),
        )


def _as_number(value: Any) -> Optional[float]:
    """Finite int or float as a float; anything else (bools, NaN, inf) is None."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        value = float(value)
    except OverflowError:
        return None
    return value if math.isfinite(value) else None
