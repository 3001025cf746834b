from dataclasses import dataclass, field

from marker_viz_utils.countdown.countdown_state import CountdownState


@dataclass
class ReferencePosition:
    """Latest commanded tcp position; no history is kept."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    received: bool = False

    def overwrite(self, x: float, y: float, z: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.received = True


@dataclass
class SessionState:
    """All state mutated by inbound events.

    Owned by one MarkerManager and only touched from the node's
    single-threaded executor, so it needs no locking.
    """
    reference: ReferencePosition = field(default_factory=ReferencePosition)
    countdown: CountdownState = field(default_factory=CountdownState)
