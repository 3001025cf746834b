"""
Marker Manager Module
=====================

Owns everything the marker publisher node needs between ticks: the sampled
trajectory, the latest reference position and the countdown. The node only
forwards events into it and publishes what ``tick()`` returns, so the whole
per-tick pipeline runs (and is tested) without ROS.

Example Usage:
-------------
    manager = MarkerManager(traj_id=3, use_depth=False)

    # subscription callbacks
    manager.on_position_update(0.55, 0.0, 0.45)
    manager.on_elapsed_time(2.7)

    # timer callback
    marker_set = manager.tick()
    for marker in marker_set:
        ...
"""

import math as m
from dataclasses import dataclass, field
from typing import Optional, Tuple

from marker_viz_utils.countdown.countdown_state import (
    CountdownLabel,
    CountdownState,
    MAX_SMOOTHING_TIME,
)
from marker_viz_utils.markers.marker_factory import (
    TcpPose,
    assemble_marker_set,
    reference_ball_marker,
    tcp_marker,
    trajectory_marker,
)
from marker_viz_utils.markers.marker_types import MarkerRecord, MarkerSet, Point3
from marker_viz_utils.markers.reference_policy import (
    ReferenceMode,
    reference_ball_position,
)
from marker_viz_utils.session_state import ReferencePosition, SessionState
from marker_viz_utils.trajectories import (
    MAX_POINTS,
    TRAJ_PRESET_REGISTRY,
    GeometryBounds,
    Trajectory,
    TrajectoryCoefficients,
    generate_trajectory,
    resolve_coefficients,
)


@dataclass
class MarkerParams:
    """Session constants shared with the real controller.

    Attributes:
        origin: Trajectory origin in the robot base frame [m]
                - Must match the controller's origin or the ball drifts off the curve
        max_points: Number of line-strip segments (points = max_points + 1)
        pub_freq: Marker publishing rate [Hz]
        max_smoothing_time: Length of the countdown [s]
        bar_center: Progress bar center; the label floats 5 cm above it
        traj_height, traj_width, traj_depth: Curve amplitudes [m]
    """
    origin: Point3 = (0.5059, 0.0, 0.4346)
    max_points: int = MAX_POINTS
    pub_freq: int = 50
    max_smoothing_time: int = MAX_SMOOTHING_TIME
    bar_center: Point3 = (0.3, 0.0, 0.05)
    traj_height: float = 0.1
    traj_width: float = 0.3
    traj_depth: float = 0.1
    tcp_pose: TcpPose = field(default_factory=TcpPose)


class MarkerManager:
    """Builds one MarkerSet per tick from the session state.

    Responsibilities:
    ----------------
    1. Resolve the trajectory preset and sample the curve once
    2. Apply inbound position / elapsed-time events to the session state
    3. Assemble trajectory, tcp, ball and countdown markers on every tick
    """

    def __init__(
        self,
        traj_id: int,
        use_depth: bool,
        params: Optional[MarkerParams] = None,
        reference_mode: ReferenceMode = ReferenceMode.LEGACY_SENTINEL,
        strict_traj_id: bool = True,
        reset_countdown_on_zero: bool = False,
    ):
        """Resolve the preset and sample the trajectory.

        Raises:
            ValueError: traj_id is not a known preset and strict_traj_id is set,
                        or reference_mode is not a ReferenceMode value
        """
        self.params = params or MarkerParams()
        self.reference_mode = ReferenceMode(reference_mode)
        self.coefficients: TrajectoryCoefficients = resolve_coefficients(traj_id, strict=strict_traj_id)
        self.bounds = GeometryBounds(
            height=self.params.traj_height,
            width=self.params.traj_width,
            depth=self.params.traj_depth,
            use_depth=bool(use_depth),
        )
        self.trajectory: Trajectory = generate_trajectory(
            self.coefficients, self.bounds, self.params.origin, self.params.max_points
        )

        self.state = SessionState(
            reference=ReferencePosition(),
            countdown=CountdownState(
                max_smoothing_time=self.params.max_smoothing_time,
                reset_on_zero=reset_countdown_on_zero,
            ),
        )

        # Trajectory and tcp markers never change during a session
        self._trajectory_marker: MarkerRecord = trajectory_marker(self.trajectory)
        self._tcp_marker: MarkerRecord = tcp_marker(self.params.tcp_pose)

    @property
    def is_known_preset(self) -> bool:
        return self.coefficients.traj_id in TRAJ_PRESET_REGISTRY

    # ----------------------- Inbound Events --------------------------
    def on_position_update(self, x: float, y: float, z: float) -> None:
        self.state.reference.overwrite(x, y, z)

    def on_elapsed_time(self, value: float) -> int:
        """Truncate to whole seconds and advance the countdown.

        Non-finite samples are ignored and the current count is returned.
        """
        if not m.isfinite(value):
            return self.state.countdown.count
        return self.state.countdown.update(int(value))

    # ----------------------- Per-tick Output --------------------------
    def reference_ball(self) -> Tuple[Point3, float]:
        return reference_ball_position(
            self.state.reference, self.trajectory, self.params.origin, self.reference_mode
        )

    def countdown_label(self) -> Optional[CountdownLabel]:
        return self.state.countdown.current_label(self.params.bar_center)

    def tick(self) -> MarkerSet:
        position, size = self.reference_ball()
        return assemble_marker_set(
            trajectory=self._trajectory_marker,
            tcp=self._tcp_marker,
            reference_ball=reference_ball_marker(position, size),
            countdown=self.countdown_label(),
        )
