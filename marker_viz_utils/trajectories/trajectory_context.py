from dataclasses import dataclass


# -------- Geometry every sampled curve receives --------
@dataclass(frozen=True)
class GeometryBounds:
    """
    Amplitude knobs shared by every preset so the sampler call is uniform:
    generate_trajectory(coefficients, bounds, origin, max_points) -> Trajectory
    """
    height: float = 0.1          # [m] vertical amplitude, scaled by the preset's ph
    width: float = 0.3           # [m] sweep along y, centred on the origin
    depth: float = 0.1           # [m] peak-to-peak of the V-shaped x profile
    use_depth: bool = False      # x stays at the origin when False
