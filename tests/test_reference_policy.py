"""Tests for the reference ball position/size policy."""

import pytest

from marker_viz_utils.markers.reference_policy import (
    ReferenceMode,
    ball_size,
    has_reference,
    reference_ball_position,
)
from marker_viz_utils.session_state import ReferencePosition
from marker_viz_utils.trajectories import GeometryBounds, generate_trajectory, resolve_coefficients

ORIGIN = (0.5059, 0.0, 0.4346)


@pytest.fixture(scope="module")
def trajectory():
    return generate_trajectory(resolve_coefficients(3), GeometryBounds(), ORIGIN, 200)


@pytest.mark.parametrize("mode", list(ReferenceMode))
def test_fallback_to_first_point(trajectory, mode):
    point, size = reference_ball_position(ReferencePosition(), trajectory, ORIGIN, mode)
    assert point == trajectory.first_point
    assert size == pytest.approx(0.015 + 0.1 / 20)


@pytest.mark.parametrize("y, z", [(0.0, 0.0), (0.2, -0.3), (1.0, 1.0)])
def test_legacy_sentinel_ignores_y_and_z(trajectory, y, z):
    ref = ReferencePosition()
    ref.overwrite(0.0, y, z)
    point, _ = reference_ball_position(ref, trajectory, ORIGIN, ReferenceMode.LEGACY_SENTINEL)
    assert point == trajectory.first_point


def test_presence_mode_trusts_received_zero_x(trajectory):
    ref = ReferencePosition()
    ref.overwrite(0.0, 0.1, 0.4)
    point, size = reference_ball_position(ref, trajectory, ORIGIN, ReferenceMode.PRESENCE)
    assert point == (0.0, 0.1, 0.4)
    assert size == pytest.approx(0.015 + (0.0 - ORIGIN[0] + 0.05) / 20)


@pytest.mark.parametrize("mode", list(ReferenceMode))
def test_live_reference_size(trajectory, mode):
    ref = ReferencePosition()
    ref.overwrite(0.55, 0.0, 0.45)
    point, size = reference_ball_position(ref, trajectory, ORIGIN, mode)
    assert point == (0.55, 0.0, 0.45)
    assert size == pytest.approx(0.015 + (0.55 - 0.5059 + 0.05) / 20)
    assert size == pytest.approx(0.019705)


def test_size_grows_with_distance():
    assert ball_size(0.2) > ball_size(0.1) > ball_size(0.0) == 0.015


def test_has_reference_modes():
    ref = ReferencePosition()
    assert not has_reference(ref, ReferenceMode.PRESENCE)
    assert not has_reference(ref, ReferenceMode.LEGACY_SENTINEL)
    ref.x = 0.3
    assert has_reference(ref, ReferenceMode.LEGACY_SENTINEL)
    assert not has_reference(ref, ReferenceMode.PRESENCE)


def test_has_reference_rejects_unknown_mode():
    with pytest.raises(ValueError):
        has_reference(ReferencePosition(), "bogus")


def test_overwrite_replaces_all_components():
    ref = ReferencePosition()
    ref.overwrite(1, 2, 3)
    ref.overwrite(0.5, -0.1, 0.2)
    assert (ref.x, ref.y, ref.z, ref.received) == (0.5, -0.1, 0.2, True)
