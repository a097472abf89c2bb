# tests/conftest.py
#
# Synthetic pose-document builders shared by the test modules.
# Frames use the same JSON structure as an uploaded trainee file.

import json

import pytest

from core.services.reference_data import parse_pose_document
from core import thresholds


def _point(x, y):
    return {"x": x, "y": y}


def make_frame(frame_id, joints=None, timestamp=None, people=None):
    """One frame dict; ``joints`` maps joint name -> (x, y)."""
    frame = {"frameId": frame_id}
    if timestamp is not None:
        frame["timestamp"] = timestamp
    if people is None:
        people = [] if joints is None else [
            {"pose": {name: _point(*xy) for name, xy in joints.items()}}
        ]
    frame["primitives"] = {"people": people}
    return frame


def stroke_joints(wrist_hip, shoulder_width=50.0, right_ankle_x=300.0):
    """
    Joints for one frame of a synthetic stroke.

    rightHip sits at y=400 so rightWrist.y = 400 + wrist_hip.
    """
    return {
        "leftShoulder": (330.0 - shoulder_width, 250.0),
        "rightShoulder": (330.0, 250.0),
        "rightWrist": (350.0, 400.0 + wrist_hip),
        "rightHip": (300.0, 400.0),
        "leftAnkle": (200.0, 560.0),
        "rightAnkle": (right_ankle_x, 560.0),
    }


def stroke_document(wrist_hip_values, shoulder_widths=None, right_ankles=None):
    """A full synthetic recording from a wrist-hip profile."""
    frames = []
    for i, value in enumerate(wrist_hip_values):
        width = shoulder_widths[i] if shoulder_widths else 50.0
        ankle = right_ankles[i] if right_ankles else 300.0
        frames.append(make_frame(i, stroke_joints(value, width, ankle), timestamp=i * 33))
    return frames


# A stroke with known anchors: start 2, peak 11, forward 12, end 27
STROKE_PROFILE = (
    [0.0] * 7
    + [-3.0, -6.0, -9.0, -12.0, -15.0]
    + [-14.0, -11.0, -8.0, -5.0, -2.0, 1.0, 4.0, 4.5, 4.8, 5.0]
    + [5.1] * 19
)


@pytest.fixture
def stroke_profile():
    return list(STROKE_PROFILE)


@pytest.fixture
def stroke_frames():
    return parse_pose_document(stroke_document(STROKE_PROFILE))


@pytest.fixture
def reference_document():
    """Raw bytes of the bundled pro recording."""
    with open(thresholds.pro_data_path(), "rb") as f:
        return f.read()


@pytest.fixture
def reference_json(reference_document):
    return json.loads(reference_document)
