"""Conversion of MarkerRecord / MarkerSet into visualization_msgs messages.

Kept apart from the rest of the package so that only the node (and this
module) need a sourced ROS 2 workspace.
"""

from builtin_interfaces.msg import Time
from geometry_msgs.msg import Point
from visualization_msgs.msg import Marker, MarkerArray

from marker_viz_utils.markers.marker_types import MarkerRecord, MarkerSet


def to_marker_msg(record: MarkerRecord, stamp: Time) -> Marker:
    msg = Marker()
    msg.header.frame_id = record.frame_id
    msg.header.stamp = stamp
    msg.ns = record.ns
    msg.id = int(record.marker_id)
    msg.type = int(record.marker_type)
    msg.action = Marker.ADD

    msg.pose.position.x, msg.pose.position.y, msg.pose.position.z = (float(v) for v in record.position)
    (msg.pose.orientation.x, msg.pose.orientation.y,
     msg.pose.orientation.z, msg.pose.orientation.w) = (float(v) for v in record.orientation)
    msg.scale.x, msg.scale.y, msg.scale.z = (float(v) for v in record.scale)

    msg.color.r = float(record.color.r)
    msg.color.g = float(record.color.g)
    msg.color.b = float(record.color.b)
    msg.color.a = float(record.color.a)

    msg.points = [Point(x=x, y=y, z=z) for x, y, z in record.points]
    msg.text = record.text
    return msg


def to_marker_array(marker_set: MarkerSet, stamp: Time) -> MarkerArray:
    """Every marker in one emission shares the same stamp."""
    array = MarkerArray()
    array.markers = [to_marker_msg(record, stamp) for record in marker_set]
    return array
