"""
Countdown State
===============

Turns the controller's elapsed smoothing time into the label floating above
the progress bar. The controller publishes elapsed seconds; this module keeps
only the latest remaining count, so display states the signal never reaches
are simply never shown.

    count     text      color
    5, 4, 3   "5".."3"  red
    2, 1      "2", "1"  yellow
    0         "Go!"     green
    -10       "Stop!"   red
    other     (no label)
"""

from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from marker_viz_utils.markers.marker_types import (
    BASE_FRAME,
    GREEN,
    RED,
    YELLOW,
    Color,
    MarkerId,
    MarkerRecord,
    MarkerType,
    Point3,
)

MAX_SMOOTHING_TIME = 5      # [seconds]
INITIAL_COUNT = 5
STOP_COUNT = -10
LABEL_HEIGHT = 0.2          # height of 'A' [m]
LABEL_Z_OFFSET = 0.05       # [m] above the bar center

COUNTDOWN_COLORS: Dict[int, Color] = {
    5: RED,
    4: RED,
    3: RED,
    2: YELLOW,
    1: YELLOW,
    0: GREEN,
    STOP_COUNT: RED,
}

COUNTDOWN_TEXT: Dict[int, str] = {
    0: "Go!",
    STOP_COUNT: "Stop!",
}


@dataclass(frozen=True)
class CountdownLabel:
    text: str
    color: Color
    position: Point3

    def to_marker(self) -> MarkerRecord:
        return MarkerRecord(
            marker_id=MarkerId.COUNTDOWN,
            marker_type=MarkerType.TEXT_VIEW_FACING,
            frame_id=BASE_FRAME,
            position=self.position,
            scale=(0.0, 0.0, LABEL_HEIGHT),
            color=self.color,
            text=self.text,
        )


class CountdownState:
    """Latest remaining-seconds count, driven by the elapsed-time topic."""

    def __init__(
        self,
        max_smoothing_time: int = MAX_SMOOTHING_TIME,
        initial_count: int = INITIAL_COUNT,
        reset_on_zero: bool = False,
    ) -> None:
        self.max_smoothing_time = max_smoothing_time
        self.initial_count = initial_count
        self.reset_on_zero = reset_on_zero
        self.count: int = initial_count

    def update(self, elapsed_seconds: int) -> int:
        """Apply one elapsed-time sample and return the new count.

        An elapsed time of zero leaves the previous count in place unless
        reset_on_zero is set, in which case the count returns to its initial
        value.
        """
        elapsed_seconds = int(elapsed_seconds)
        if elapsed_seconds != 0:
            self.count = self.max_smoothing_time - elapsed_seconds
        elif self.reset_on_zero:
            self.count = self.initial_count
        return self.count

    @staticmethod
    def render(count: int, center: Sequence[float]) -> Optional[CountdownLabel]:
        if count not in COUNTDOWN_COLORS:
            return None
        text = COUNTDOWN_TEXT.get(count, str(count))
        position = (float(center[0]), float(center[1]), float(center[2]) + LABEL_Z_OFFSET)
        return CountdownLabel(text=text, color=COUNTDOWN_COLORS[count], position=position)

    def current_label(self, center: Sequence[float]) -> Optional[CountdownLabel]:
        return self.render(self.count, center)
