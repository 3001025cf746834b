import math as m
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict


@dataclass(frozen=True)
class TrajectoryCoefficients:
    """Three-harmonic sine coefficients for one reference curve.

    pa, pb, pc are the harmonic multipliers, ps the common phase shift and
    ph the amplitude gain applied on top of GeometryBounds.height.
    """
    pa: int = 0
    pb: int = 0
    pc: int = 0
    ps: float = 0.0
    ph: float = 0.0
    traj_id: int = -1


class TrajectoryPreset(IntEnum):
    PRESET_0 = 0
    PRESET_1 = 1
    PRESET_2 = 2
    PRESET_3 = 3
    PRESET_4 = 4
    PRESET_5 = 5


TRAJ_PRESET_REGISTRY: Dict[int, TrajectoryCoefficients] = {
    TrajectoryPreset.PRESET_0: TrajectoryCoefficients(pa=1, pb=1, pc=4, ps=m.pi,       ph=0.25, traj_id=0),
    TrajectoryPreset.PRESET_1: TrajectoryCoefficients(pa=2, pb=3, pc=4, ps=4*m.pi/3,   ph=0.25, traj_id=1),
    TrajectoryPreset.PRESET_2: TrajectoryCoefficients(pa=1, pb=3, pc=4, ps=m.pi,       ph=0.25, traj_id=2),
    TrajectoryPreset.PRESET_3: TrajectoryCoefficients(pa=2, pb=2, pc=5, ps=m.pi,       ph=0.2,  traj_id=3),
    TrajectoryPreset.PRESET_4: TrajectoryCoefficients(pa=2, pb=3, pc=5, ps=8*m.pi/5,   ph=0.2,  traj_id=4),
    TrajectoryPreset.PRESET_5: TrajectoryCoefficients(pa=2, pb=4, pc=5, ps=m.pi,       ph=0.2,  traj_id=5),
}


def resolve_coefficients(traj_id: int, strict: bool = True) -> TrajectoryCoefficients:
    """Look up the preset for `traj_id`.

    With strict=False an unknown id falls back to all-zero coefficients, which
    samples a flat line through the origin (the legacy behaviour).
    """
    if traj_id in TRAJ_PRESET_REGISTRY:
        return TRAJ_PRESET_REGISTRY[traj_id]
    if strict:
        raise ValueError(
            f"trajectory preset #{traj_id} not found "
            f"(known: {sorted(int(k) for k in TRAJ_PRESET_REGISTRY)})"
        )
    return TrajectoryCoefficients(traj_id=traj_id)
