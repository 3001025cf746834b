#!/usr/bin/env python3
"""
ROS2 Node for Publishing Demonstration Markers to RViz
======================================================

Publishes, at 50 Hz, a MarkerArray describing the state of the robot-control
demonstration:

1. **Reference trajectory** (blue line strip) sampled once from the preset
   selected by the ``traj_id`` parameter
2. **TCP marker** (red sphere) fixed to the hand tcp frame
3. **Reference ball** (green sphere) following ``tcp_position``, sized by its
   distance from the trajectory origin
4. **Countdown label** driven by the controller's ``countdown`` topic

All per-tick logic lives in MarkerManager; this node only wires ROS
parameters, subscriptions and the publishing timer to it. The executor is
single-threaded, so callbacks never run concurrently with the timer.

Key Dependencies:
----------------
- rclpy: ROS2 Python client library
- visualization_msgs / std_msgs / tutorial_interfaces: message types
- marker_viz_utils: trajectory sampling, countdown and marker assembly
"""

import rclpy
from rclpy.node import Node
from std_msgs.msg import Float64
from visualization_msgs.msg import MarkerArray
from tutorial_interfaces.msg import PosInfo

from marker_viz_utils.main_utils import BANNER
from marker_viz_utils.marker_manager import MarkerManager, MarkerParams
from marker_viz_utils.markers.reference_policy import ReferenceMode
from marker_viz_utils.ros_conversion import to_marker_array


class MarkerPublisher(Node):
    """Publishes trajectory, tcp, reference ball and countdown markers."""

    param_names = ["use_depth", "part_id", "alpha_id", "traj_id"]

    def __init__(self) -> None:
        super().__init__('marker_publisher')

        # ----------------------- Parameters --------------------------
        for name in self.param_names:
            self.declare_parameter(name, 0)
        self.declare_parameter('strict_traj_id', True)
        self.declare_parameter('reference_mode', str(ReferenceMode.LEGACY_SENTINEL))
        self.declare_parameter('reset_countdown_on_zero', False)

        self.use_depth = int(self.get_parameter('use_depth').value)
        self.part_id = int(self.get_parameter('part_id').value)
        self.alpha_id = int(self.get_parameter('alpha_id').value)
        self.traj_id = int(self.get_parameter('traj_id').value)
        strict_traj_id = bool(self.get_parameter('strict_traj_id').value)
        reference_mode = str(self.get_parameter('reference_mode').value)
        reset_on_zero = bool(self.get_parameter('reset_countdown_on_zero').value)
        self.print_params()

        # ----------------------- Marker Manager --------------------------
        # KEEP CONSISTENT WITH REAL CONTROLLER
        self.params = MarkerParams()
        self.manager = MarkerManager(
            traj_id=self.traj_id,
            use_depth=bool(self.use_depth),
            params=self.params,
            reference_mode=reference_mode,
            strict_traj_id=strict_traj_id,
            reset_countdown_on_zero=reset_on_zero,
        )
        if not self.manager.is_known_preset:
            self.get_logger().warn(
                f"Trajectory ID {self.traj_id} is not a known preset; publishing a flat trajectory")

        # ----------------------- Publishers --------------------------
        self.marker_pub = self.create_publisher(MarkerArray, 'visualization_marker_array', 10)

        # ----------------------- Subscribers --------------------------
        self.ref_sub = self.create_subscription(
            PosInfo, 'tcp_position', self.ref_callback, 10)
        self.count_sub = self.create_subscription(
            Float64, 'countdown', self.count_callback, 10)

        self.marker_timer_period = 1.0 / self.params.pub_freq
        self.marker_timer = self.create_timer(self.marker_timer_period, self.marker_timer_callback)

    def print_params(self) -> None:
        self.get_logger().info(
            f"{BANNER}"
            f"The current parameters [marker_publisher] are as follows:\n"
            f"Use depth parameter = {self.use_depth}\n"
            f"Participant ID = {self.part_id}\n"
            f"Alpha ID = {self.alpha_id}\n"
            f"Trajectory ID = {self.traj_id}"
            f"{BANNER}"
        )

    def marker_timer_callback(self) -> None:
        """Assemble this tick's markers and publish them."""
        marker_set = self.manager.tick()
        stamp = self.get_clock().now().to_msg()
        self.marker_pub.publish(to_marker_array(marker_set, stamp))

    def ref_callback(self, msg) -> None:
        """Callback function for tcp_position topic subscriber."""
        self.manager.on_position_update(msg.ref_position[0], msg.ref_position[1], msg.ref_position[2])

    def count_callback(self, msg) -> None:
        """Callback function for countdown topic subscriber."""
        self.manager.on_elapsed_time(msg.data)


def main(args=None) -> None:
    print('Starting marker publisher node...')
    rclpy.init(args=args)
    marker_publisher = MarkerPublisher()
    rclpy.spin(marker_publisher)
    marker_publisher.destroy_node()
    rclpy.shutdown()


if __name__ == '__main__':
    main()
