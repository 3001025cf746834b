from .curve_sampler import (
    MAX_POINTS,
    Trajectory,
    generate_trajectory,
)

from .trajectory_context import GeometryBounds
from .trajectory_interface import (
    TrajectoryCoefficients,
    TrajectoryPreset,
    TRAJ_PRESET_REGISTRY,
    resolve_coefficients,
)
