# tests/test_stroke_analyzer.py
#
# End-to-end tests for core/services/stroke_analyzer.py against the bundled
# pro recording and synthetic strokes.

import copy
import json

import pytest

from conftest import make_frame, stroke_document, STROKE_PROFILE


@pytest.fixture
def analyzer():
    from core.services.stroke_analyzer import StrokeAnalyzer
    return StrokeAnalyzer()


def _assert_demo(result):
    assert result.is_demo
    assert result.trainee_label == "Demo Trainee Data"
    assert result.stats.stroke_duration.pro == "1.50"
    assert result.stats.peak_rotation.difference == "-10.0"
    assert result.stats.wrist_drop.difference == "15.0"
    assert result.pro_anchors is None
    assert result.recommendations.overall_score == 76


def test_reference_loads(reference_json):
    from core.services.reference_data import load_reference_frames
    frames = load_reference_frames()
    assert len(frames) == len(reference_json)
    assert frames is load_reference_frames()


def test_identical_trainee_matches_pro(analyzer, reference_document):
    result = analyzer.compare_document(reference_document, trainee_label="pro_copy.json")

    assert not result.is_demo
    assert result.trainee_label == "pro_copy.json"
    assert result.stats.stroke_duration.difference == "0"
    assert result.stats.peak_rotation.difference == "0.0"
    assert result.stats.peak_extension.difference == "0.0"
    assert result.stats.wrist_drop.difference == "0.0"
    assert result.recommendations.overall_score >= 90
    assert result.recommendations.priorities == []
    assert result.pro_anchors == result.trainee_anchors


def test_reference_anchors(analyzer, reference_document):
    anchors = analyzer.compare_document(reference_document).pro_anchors
    assert anchors.backswing_start < anchors.backswing_peak
    assert anchors.backswing_peak <= anchors.forward_swing_start < anchors.follow_through_end
    assert not anchors.is_degenerate


def test_narrower_shoulder_turn(analyzer, reference_json):
    trainee = copy.deepcopy(reference_json)
    for frame in trainee:
        people = frame["primitives"]["people"]
        if people:
            # 10 px less shoulder width everywhere = 9 degrees less rotation
            people[0]["pose"]["leftShoulder"]["x"] += 10

    result = analyzer.compare_document(json.dumps(trainee))

    assert result.stats.peak_rotation.difference == "-9.0"
    assert result.stats.wrist_drop.difference == "0.0"
    assert result.stats.stroke_duration.difference == "0"
    report = result.recommendations
    assert [(p.severity.value, p.metric) for p in report.priorities] == [
        ("medium", "Shoulder Rotation"),
    ]
    assert [d.name for d in report.drills] == ["Wall Rotation Drill"]
    assert report.overall_score == 89


def test_comparison_points_on_percent_axis(analyzer, reference_document):
    result = analyzer.compare_document(reference_document)
    for kind in ("wrist_hip", "shoulder_rotation", "weight_transfer", "arm_extension"):
        points = getattr(result.comparison, kind)
        assert [p.stroke_percent for p in points] == list(range(0, 101, 2))
        for p in points:
            assert p.pro_value == pytest.approx(p.trainee_value)
    assert [m.phase for m in result.phases] == [
        "Backswing", "Forward Swing", "Contact", "Follow-through",
    ]


def test_custom_pro_recording():
    from core.services.reference_data import parse_pose_document
    from core.services.stroke_analyzer import StrokeAnalyzer

    pro = parse_pose_document(stroke_document(STROKE_PROFILE))
    # Same shape, every other sample dropped: half the stroke duration
    trainee = stroke_document(STROKE_PROFILE[::2])

    result = StrokeAnalyzer(pro_frames=pro).compare_document(trainee)

    assert not result.is_demo
    assert result.pro_anchors.span == 25
    assert result.stats.stroke_duration.pro == "0.83"
    assert result.stats.stroke_duration.difference_value < 0
    assert result.stats.peak_rotation.difference == "0.0"


@pytest.mark.parametrize("document", [
    [],
    "[]",
    b"[]",
    {"frames": []},
    [make_frame(1), make_frame(2)],
    [{"frameId": 1}, {"frameId": 2, "primitives": {}}],
])
def test_empty_trainee_falls_back_to_demo(analyzer, document):
    _assert_demo(analyzer.compare_document(document))


def test_trainee_without_shoulders_falls_back_to_demo(analyzer):
    frames = [
        make_frame(i, {"rightWrist": (350.0, 400.0 + v), "rightHip": (300.0, 400.0)})
        for i, v in enumerate(STROKE_PROFILE)
    ]
    _assert_demo(analyzer.compare_document(frames))


def test_single_sample_trainee_falls_back_to_demo(analyzer):
    _assert_demo(analyzer.compare_document(stroke_document([-20.0])))


@pytest.mark.parametrize("payload", [
    "not json at all",
    b"\xff\xfe\x00garbage",
    '{"frameId": 1}',
    "42",
])
def test_malformed_document_raises(analyzer, payload):
    from core.services.reference_data import InvalidPoseDocumentError
    with pytest.raises(InvalidPoseDocumentError):
        analyzer.compare_document(payload)


def test_invalid_document_error_is_value_error():
    from core.services.reference_data import InvalidPoseDocumentError
    assert issubclass(InvalidPoseDocumentError, ValueError)


def test_each_call_returns_a_new_result(analyzer):
    first = analyzer.demo()
    second = analyzer.demo()
    assert first.id != second.id
    assert first.stats == second.stats


def test_degenerate_trainee_anchors_are_still_compared(analyzer, caplog):
    # Wrist only ever drops: forward swing and follow-through collapse
    # onto the last sample, but the stroke still spans 4 samples
    with caplog.at_level("WARNING"):
        result = analyzer.compare_document(stroke_document([10.0, 7.0, 4.0, 1.0, -2.0]))

    assert not result.is_demo
    anchors = result.trainee_anchors
    assert anchors.is_degenerate
    assert anchors.span == 4
    assert "Forward swing start" in caplog.text

    for kind in ("wrist_hip", "shoulder_rotation", "weight_transfer", "arm_extension"):
        assert len(getattr(result.comparison, kind)) == 51
    assert result.comparison.wrist_hip[0].trainee_value == pytest.approx(10.0)
    assert result.comparison.wrist_hip[-1].trainee_value == pytest.approx(-2.0)
    assert result.stats.wrist_drop.trainee == "-2.0"
    assert result.stats.stroke_duration.trainee == "0.13"


@pytest.mark.parametrize("token", ["Infinity", "-Infinity", "NaN"])
def test_non_finite_json_tokens_are_malformed(analyzer, reference_document, token):
    from core.services.reference_data import InvalidPoseDocumentError
    payload = reference_document.replace(b'"y": ', f'"y": {token}, "_y": '.encode(), 1)
    assert token.encode() in payload
    with pytest.raises(InvalidPoseDocumentError):
        analyzer.compare_document(payload)


def test_overflowing_numbers_read_as_missing(analyzer):
    from core.domain.pose import Joint
    from core.services.reference_data import parse_pose_document

    frames = parse_pose_document('[{"frameId": 1e400, "primitives": {"people": ['
                                 '{"pose": {"leftAnkle": {"x": 1e400, "y": 560}}}]}}]')
    assert frames[0].frame_id is None
    assert not frames[0].primary_pose.get_joint(Joint.LEFT_ANKLE).has_valid_x

    # No 500 for an overflowing frame id; the frame just carries no pose
    assert analyzer.compare_document('[{"frameId": 1e400}]').is_demo
