import numpy as np
import jax.numpy as jnp
from dataclasses import dataclass
from typing import Sequence, Tuple

from marker_viz_utils.jax_utils import jit
from marker_viz_utils.trajectories.trajectory_context import GeometryBounds
from marker_viz_utils.trajectories.trajectory_interface import TrajectoryCoefficients

# Number of segments in the published line strip (points = MAX_POINTS + 1)
MAX_POINTS = 200

Point3 = Tuple[float, float, float]


@dataclass(frozen=True, eq=False)
class Trajectory:
    """Read-only (N+1, 3) buffer of sampled points in the base frame."""
    points: np.ndarray

    def __len__(self) -> int:
        return self.points.shape[0]

    def __getitem__(self, idx: int) -> Point3:
        x, y, z = self.points[idx]
        return (float(x), float(y), float(z))

    def __iter__(self):
        for idx in range(len(self)):
            yield self[idx]

    @property
    def first_point(self) -> Point3:
        return self[0]


@jit(static_argnames=("max_points", "use_depth"))
def _sample_curve(origin, pa, pb, pc, ps, ph, height, width, depth, max_points: int, use_depth: bool):
    count = jnp.arange(max_points + 1, dtype=jnp.float64)
    t = count / max_points * 2 * jnp.pi  # one full period, [0, 2pi]

    if use_depth:
        x = jnp.abs(t - jnp.pi) / jnp.pi * depth - (depth / 2)
    else:
        x = jnp.zeros_like(t)

    y = t / (2 * jnp.pi) * width - (width / 2)
    z = (ph * height) * (jnp.sin(pa * (t + ps)) + jnp.sin(pb * (t + ps)) + jnp.sin(pc * (t + ps)))

    return jnp.stack([x, y, z], axis=1) + origin


def generate_trajectory(
    coefficients: TrajectoryCoefficients,
    bounds: GeometryBounds,
    origin: Sequence[float],
    max_points: int = MAX_POINTS,
) -> Trajectory:
    """Sample the reference curve once; the result is immutable."""
    if max_points < 1:
        raise ValueError(f"max_points must be >= 1, got {max_points}")

    pts = _sample_curve(
        jnp.asarray(origin, dtype=jnp.float64),
        float(coefficients.pa),
        float(coefficients.pb),
        float(coefficients.pc),
        float(coefficients.ps),
        float(coefficients.ph),
        float(bounds.height),
        float(bounds.width),
        float(bounds.depth),
        max_points=int(max_points),
        use_depth=bool(bounds.use_depth),
    )
    host = np.array(pts, dtype=np.float64)
    host.setflags(write=False)
    return Trajectory(points=host)
