# tests/test_comparator.py
#
# Tests for core/services/comparator.py: formatting and the
# trainee-minus-pro sign convention.

import pytest


def _samples(values, player):
    from core.domain.analysis import MetricSample, PlayerType
    return tuple(
        MetricSample(frame_id=i, timestamp=0, value=v, player_type=PlayerType(player))
        for i, v in enumerate(values)
    )


def _metrics(player, rotation, extension):
    from core.domain.analysis import PlayerType, StrokeMetrics
    return StrokeMetrics(
        player_type=PlayerType(player),
        wrist_hip=_samples([0.0], player),
        shoulder_rotation=_samples(rotation, player),
        arm_extension=_samples(extension, player),
    )


def _anchors(start, end, min_value):
    from core.domain.analysis import AnchorSet
    return AnchorSet(
        backswing_start=start,
        backswing_peak=start,
        forward_swing_start=start,
        follow_through_end=end,
        min_value=min_value,
    )


def test_comparison_stats():
    from core.services.comparator import calculate_comparison_stats
    pro = _metrics("Pro", rotation=[20.0, 45.0, 30.0], extension=[90.0, 100.04])
    trainee = _metrics("Trainee", rotation=[30.0, 12.0], extension=[80.0])

    stats = calculate_comparison_stats(
        pro, trainee,
        _anchors(0, 45, -60.0),
        _anchors(3, 57, -45.0),
    )

    assert stats.stroke_duration.pro == "1.50"
    assert stats.stroke_duration.trainee == "1.80"
    assert stats.stroke_duration.difference == "300"

    assert stats.peak_rotation.pro == "45.0"
    assert stats.peak_rotation.trainee == "30.0"
    assert stats.peak_rotation.difference == "-15.0"

    assert stats.peak_extension.pro == "100.0"
    assert stats.peak_extension.difference == "-20.0"

    assert stats.wrist_drop.pro == "-60.0"
    assert stats.wrist_drop.trainee == "-45.0"
    assert stats.wrist_drop.difference == "15.0"
    assert stats.wrist_drop.difference_value == 15.0


def test_difference_sign_is_trainee_minus_pro():
    from core.services.comparator import calculate_comparison_stats
    pro = _metrics("Pro", rotation=[30.0], extension=[80.0])
    trainee = _metrics("Trainee", rotation=[40.0], extension=[95.5])
    stats = calculate_comparison_stats(
        pro, trainee, _anchors(0, 30, -50.0), _anchors(0, 24, -70.0),
    )
    assert stats.peak_rotation.difference_value == pytest.approx(10.0)
    assert stats.peak_extension.difference_value == pytest.approx(15.5)
    assert stats.wrist_drop.difference_value == pytest.approx(-20.0)
    assert stats.stroke_duration.difference_value == pytest.approx(-200.0)


def test_identical_sides_have_zero_difference():
    from core.services.comparator import calculate_comparison_stats
    metrics = _metrics("Pro", rotation=[12.3, 40.1], extension=[77.7])
    anchors = _anchors(4, 68, -110.0)
    stats = calculate_comparison_stats(metrics, metrics, anchors, anchors)
    assert stats.stroke_duration.difference == "0"
    assert stats.peak_rotation.difference == "0.0"
    assert stats.peak_extension.difference == "0.0"
    assert stats.wrist_drop.difference == "0.0"


def test_missing_peak_series_raises():
    from core.services.comparator import calculate_comparison_stats
    pro = _metrics("Pro", rotation=[], extension=[80.0])
    trainee = _metrics("Trainee", rotation=[40.0], extension=[95.5])
    with pytest.raises(ValueError):
        calculate_comparison_stats(pro, trainee, _anchors(0, 30, 0.0), _anchors(0, 30, 0.0))


@pytest.mark.parametrize("value, digits, expected", [
    (14.25, 1, "14.3"),
    (-14.25, 1, "-14.3"),
    (12.5, 0, "13"),
    (-2.5, 0, "-3"),
    (1.005, 2, "1.00"),
    (0.0, 1, "0.0"),
    (250.0, 0, "250"),
])
def test_to_fixed_rounds_ties_away_from_zero(value, digits, expected):
    from core.services.comparator import to_fixed
    assert to_fixed(value, digits) == expected


def test_stats_round_ties_away_from_zero():
    from core.services.comparator import calculate_comparison_stats
    pro = _metrics("Pro", rotation=[30.0], extension=[80.0])
    trainee = _metrics("Trainee", rotation=[44.25], extension=[80.0])
    stats = calculate_comparison_stats(
        pro, trainee, _anchors(0, 30, -50.0), _anchors(0, 30, -50.0),
    )
    assert stats.peak_rotation.trainee == "44.3"
    assert stats.peak_rotation.difference == "14.3"
