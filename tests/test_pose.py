# tests/test_pose.py
#
# Tests for core/domain/pose.py: joint validity and tolerant frame parsing.

from conftest import make_frame


def test_joint_validity_requires_positive_coordinates():
    from core.domain.pose import JointPosition
    assert JointPosition(10.0, 20.0).is_valid
    assert not JointPosition(0.0, 20.0).is_valid
    assert JointPosition(0.0, 20.0).has_valid_y
    assert not JointPosition(-1.0, 20.0).has_valid_x
    assert not JointPosition(5.0, 0.0).has_valid_y


def test_non_finite_numbers_read_as_missing():
    from core.domain.pose import Joint, PoseFrame
    frame = PoseFrame.from_dict({
        "frameId": float("inf"),
        "timestamp": float("nan"),
        "primitives": {"people": [{"pose": {
            "rightWrist": {"x": float("-inf"), "y": 310.0},
            "rightHip": {"x": 300.0, "y": float("nan")},
        }}]},
    })
    assert frame.frame_id is None
    assert frame.timestamp == 0
    wrist = frame.primary_pose.get_joint(Joint.RIGHT_WRIST)
    hip = frame.primary_pose.get_joint(Joint.RIGHT_HIP)
    assert not wrist.has_valid_x and wrist.has_valid_y
    assert hip.has_valid_x and not hip.has_valid_y


def test_large_integer_frame_id_is_kept():
    from core.domain.pose import PoseFrame
    assert PoseFrame.from_dict({"frameId": 2 ** 60 + 1}).frame_id == 2 ** 60 + 1
    assert PoseFrame.from_dict({"frameId": 12.0}).frame_id == 12


def test_frame_from_dict_reads_first_person():
    from core.domain.pose import Joint, PoseFrame
    frame = PoseFrame.from_dict({
        "frameId": 7,
        "timestamp": 233,
        "primitives": {"people": [
            {"pose": {"rightWrist": {"x": 1.0, "y": 2.0}}},
            {"pose": {"rightWrist": {"x": 9.0, "y": 9.0}}},
        ]},
    })
    assert frame.frame_id == 7
    assert frame.timestamp == 233
    wrist = frame.primary_pose.get_joint(Joint.RIGHT_WRIST)
    assert (wrist.x, wrist.y) == (1.0, 2.0)


def test_frame_without_timestamp_defaults_to_zero():
    from core.domain.pose import PoseFrame
    frame = PoseFrame.from_dict(make_frame(3, {"rightHip": (1.0, 1.0)}))
    assert frame.timestamp == 0


def test_frame_without_people_has_no_pose():
    from core.domain.pose import PoseFrame
    assert PoseFrame.from_dict(make_frame(1)).primary_pose is None
    assert PoseFrame.from_dict({"frameId": 1}).primary_pose is None
    assert PoseFrame.from_dict({"primitives": {"people": [{}]}}).primary_pose is None
    assert PoseFrame.from_dict("garbage").primary_pose is None


def test_missing_and_malformed_joints():
    from core.domain.pose import Joint, PoseFrame
    frame = PoseFrame.from_dict({
        "primitives": {"people": [{"pose": {
            "rightWrist": {"x": 5.0},
            "rightHip": "n/a",
        }}]},
    })
    pose = frame.primary_pose
    wrist = pose.get_joint(Joint.RIGHT_WRIST)
    assert wrist.has_valid_x and not wrist.has_valid_y
    assert pose.get_joint(Joint.RIGHT_HIP) is None
    assert pose.get_joint(Joint.LEFT_ANKLE) is None
    assert frame.frame_id is None
