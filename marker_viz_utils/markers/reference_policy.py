"""Where to draw the reference ball, and how big.

The ball size encodes how far the commanded position sits from the origin
along x: 0.015 + d/20 with d = ref.x - origin.x + 0.05. Until the first
position sample arrives the ball rests on the first trajectory point with
d = 0.1.
"""

from enum import StrEnum
from typing import Sequence, Tuple

from marker_viz_utils.markers.marker_types import Point3
from marker_viz_utils.session_state import ReferencePosition
from marker_viz_utils.trajectories.curve_sampler import Trajectory

BALL_BASE_SIZE = 0.015      # [m]
FALLBACK_DISTANCE = 0.1     # 0.1 at closest, 0.0 at farthest
DISTANCE_OFFSET = 0.05      # [m]
DISTANCE_DIVISOR = 20


class ReferenceMode(StrEnum):
    PRESENCE = "presence"                   # trust ReferencePosition.received (opt-in)
    LEGACY_SENTINEL = "legacy_sentinel"     # x == 0.0 means "nothing received yet"


def ball_size(distance: float) -> float:
    return BALL_BASE_SIZE + distance / DISTANCE_DIVISOR


def has_reference(ref: ReferencePosition, mode: ReferenceMode) -> bool:
    if mode == ReferenceMode.LEGACY_SENTINEL:
        return ref.x != 0.0
    if mode == ReferenceMode.PRESENCE:
        return ref.received
    raise ValueError(f"Unknown reference mode: {mode}")


def reference_ball_position(
    ref: ReferencePosition,
    trajectory: Trajectory,
    origin: Sequence[float],
    mode: ReferenceMode = ReferenceMode.LEGACY_SENTINEL,
) -> Tuple[Point3, float]:
    """Return (position, diameter) of the reference ball for this tick."""
    if not has_reference(ref, mode):
        return trajectory.first_point, ball_size(FALLBACK_DISTANCE)

    distance = ref.x - origin[0] + DISTANCE_OFFSET
    return (ref.x, ref.y, ref.z), ball_size(distance)
