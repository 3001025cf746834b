"""
Marker Factory
==============

Builds the per-tick MarkerSet out of:
- the trajectory line strip (sampled once, reused every tick)
- the tool-center-point sphere (fixed, attached to the hand tcp frame)
- the reference ball (position and size from reference_policy)
- the countdown label, when the current count has one
"""

from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np
from scipy.spatial.transform import Rotation as R

from marker_viz_utils.countdown.countdown_state import CountdownLabel
from marker_viz_utils.markers.marker_types import (
    BASE_FRAME,
    GREEN,
    RED,
    TCP_FRAME,
    Color,
    MarkerId,
    MarkerRecord,
    MarkerSet,
    MarkerType,
    Point3,
    Quaternion,
)
from marker_viz_utils.trajectories.curve_sampler import Trajectory

TRAJ_LINE_WIDTH = 0.015     # [m]
TRAJ_COLOR = Color(b=1.0, a=0.2)
TCP_DIAMETER = 0.015        # [m]
TCP_COLOR = RED
BALL_COLOR = Color(g=GREEN.g, a=0.35)


@dataclass(frozen=True)
class TcpPose:
    """Offset of the tcp marker inside the hand tcp frame."""
    position: Point3 = (0.0, 0.0, 0.0)
    rpy: Point3 = (0.0, 0.0, 0.0)   # roll, pitch, yaw [rad]


def quaternion_from_rpy(rpy: Sequence[float]) -> Quaternion:
    """(x, y, z, w) quaternion, the order geometry_msgs/Quaternion uses."""
    qx, qy, qz, qw = R.from_euler('xyz', np.asarray(rpy, dtype=np.float64), degrees=False).as_quat()
    return (float(qx), float(qy), float(qz), float(qw))


def trajectory_marker(trajectory: Trajectory) -> MarkerRecord:
    return MarkerRecord(
        marker_id=MarkerId.TRAJECTORY,
        marker_type=MarkerType.LINE_STRIP,
        frame_id=BASE_FRAME,
        scale=(TRAJ_LINE_WIDTH, 0.0, 0.0),
        color=TRAJ_COLOR,
        points=tuple(trajectory),
    )


def tcp_marker(pose: TcpPose = TcpPose()) -> MarkerRecord:
    return MarkerRecord(
        marker_id=MarkerId.TCP,
        marker_type=MarkerType.SPHERE,
        frame_id=TCP_FRAME,
        position=tuple(float(v) for v in pose.position),
        orientation=quaternion_from_rpy(pose.rpy),
        scale=(TCP_DIAMETER, TCP_DIAMETER, TCP_DIAMETER),
        color=TCP_COLOR,
    )


def reference_ball_marker(position: Sequence[float], size: float) -> MarkerRecord:
    return MarkerRecord(
        marker_id=MarkerId.REFERENCE_BALL,
        marker_type=MarkerType.SPHERE,
        frame_id=BASE_FRAME,
        position=tuple(float(v) for v in position),
        scale=(size, size, size),
        color=BALL_COLOR,
    )


def assemble_marker_set(
    trajectory: MarkerRecord,
    tcp: MarkerRecord,
    reference_ball: MarkerRecord,
    countdown: Optional[CountdownLabel] = None,
) -> MarkerSet:
    """Combine one tick's markers in publishing order."""
    return MarkerSet(
        trajectory=trajectory,
        tcp=tcp,
        reference_ball=reference_ball,
        countdown=countdown.to_marker() if countdown is not None else None,
    )
