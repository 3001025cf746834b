"""Tests for the countdown state machine and its label rendering."""

import pytest

from marker_viz_utils.countdown import CountdownState, STOP_COUNT
from marker_viz_utils.markers.marker_types import Color, MarkerId, MarkerType

BAR_CENTER = (0.3, 0.0, 0.05)


class TestUpdate:
    def test_default_count(self):
        assert CountdownState().count == 5

    def test_elapsed_sequence(self):
        state = CountdownState(max_smoothing_time=5)
        counts = [state.update(elapsed) for elapsed in [0, 1, 2, 3, 4, 5]]
        assert counts == [5, 4, 3, 2, 1, 0]

    def test_zero_keeps_previous_count(self):
        state = CountdownState(max_smoothing_time=5)
        state.update(3)
        assert state.update(0) == 2

    def test_zero_resets_when_enabled(self):
        state = CountdownState(max_smoothing_time=5, reset_on_zero=True)
        state.update(3)
        assert state.update(0) == 5

    def test_stop_value(self):
        state = CountdownState(max_smoothing_time=5)
        assert state.update(15) == STOP_COUNT

    def test_fractional_seconds_truncate(self):
        state = CountdownState(max_smoothing_time=5)
        assert state.update(2.9) == 3


class TestRender:
    @pytest.mark.parametrize("count", [5, 4, 3])
    def test_red_digits(self, count):
        label = CountdownState.render(count, BAR_CENTER)
        assert label.text == str(count)
        assert label.color == Color(r=1.0, g=0.0, b=0.0, a=1.0)

    @pytest.mark.parametrize("count", [2, 1])
    def test_yellow_digits(self, count):
        label = CountdownState.render(count, BAR_CENTER)
        assert label.text == str(count)
        assert label.color == Color(r=1.0, g=1.0, b=0.0, a=1.0)

    def test_go(self):
        label = CountdownState.render(0, BAR_CENTER)
        assert label.text == "Go!"
        assert label.color == Color(r=0.0, g=1.0, b=0.0, a=1.0)

    def test_stop(self):
        label = CountdownState.render(-10, BAR_CENTER)
        assert label.text == "Stop!"
        assert label.color == Color(r=1.0, g=0.0, b=0.0, a=1.0)

    @pytest.mark.parametrize("count", [6, 10, -1, -5, -9, -11])
    def test_no_label_outside_known_counts(self, count):
        assert CountdownState.render(count, BAR_CENTER) is None

    def test_label_floats_above_bar(self):
        label = CountdownState.render(3, BAR_CENTER)
        assert label.position == pytest.approx((0.3, 0.0, 0.1))

    def test_to_marker(self):
        marker = CountdownState.render(0, BAR_CENTER).to_marker()
        assert marker.marker_id == MarkerId.COUNTDOWN
        assert marker.marker_type == MarkerType.TEXT_VIEW_FACING
        assert marker.frame_id == "/panda_link0"
        assert marker.scale[2] == 0.2
        assert marker.text == "Go!"

    def test_current_label_follows_updates(self):
        state = CountdownState(max_smoothing_time=5)
        state.update(5)
        assert state.current_label(BAR_CENTER).text == "Go!"
        state.update(8)
        assert state.current_label(BAR_CENTER) is None
