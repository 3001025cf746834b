"""
Marker Record Types
===================

Transport-neutral description of what gets drawn each tick. The ROS node
converts these into ``visualization_msgs/Marker`` messages right before
publishing (see ``ros_conversion``), which keeps everything upstream of the
publisher testable without a ROS installation.

Field meanings follow ``visualization_msgs/Marker``:
- SPHERE uses scale.x/y/z as diameters
- LINE_STRIP uses only scale.x, as the line width
- TEXT_VIEW_FACING uses only scale.z, as the height of an uppercase 'A'
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator, Optional, Tuple

Point3 = Tuple[float, float, float]
Quaternion = Tuple[float, float, float, float]  # (x, y, z, w)

BASE_FRAME = "/panda_link0"
TCP_FRAME = "/panda_hand_tcp"
MARKER_NAMESPACE = "marker_publisher"


class MarkerType(IntEnum):
    """Same integer values as visualization_msgs/Marker type constants."""
    SPHERE = 2
    LINE_STRIP = 4
    TEXT_VIEW_FACING = 9


class MarkerId(IntEnum):
    REFERENCE_BALL = 0
    TCP = 1
    TRAJECTORY = 2
    COUNTDOWN = 10


@dataclass(frozen=True)
class Color:
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


RED = Color(r=1.0)
YELLOW = Color(r=1.0, g=1.0)
GREEN = Color(g=1.0)


@dataclass(frozen=True)
class MarkerRecord:
    marker_id: int
    marker_type: MarkerType
    frame_id: str
    position: Point3 = (0.0, 0.0, 0.0)
    orientation: Quaternion = (0.0, 0.0, 0.0, 1.0)
    scale: Point3 = (0.0, 0.0, 0.0)
    color: Color = field(default_factory=Color)
    points: Tuple[Point3, ...] = ()
    text: str = ""
    ns: str = MARKER_NAMESPACE


@dataclass(frozen=True)
class MarkerSet:
    """Ordered markers for a single emission: trajectory, tcp, ball, [countdown]."""
    trajectory: MarkerRecord
    tcp: MarkerRecord
    reference_ball: MarkerRecord
    countdown: Optional[MarkerRecord] = None

    @property
    def markers(self) -> Tuple[MarkerRecord, ...]:
        ordered = (self.trajectory, self.tcp, self.reference_ball)
        if self.countdown is not None:
            ordered += (self.countdown,)
        return ordered

    def __iter__(self) -> Iterator[MarkerRecord]:
        return iter(self.markers)

    def __len__(self) -> int:
        return len(self.markers)
