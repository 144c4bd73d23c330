"""Initial-condition samplers."""

from typing import Optional
import numpy as np
from nbody_sim.presets.base import Preset
from nbody_sim.presets.disc import UniformRadiusDisc
from nbody_sim.presets.ball import UniformRadiusBall


def preset_for_dimensions(
    dimensions: int,
    n_bodies: int,
    mass: float,
    velocity_scale: float,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> Preset:
    """Get the sampler matching a dimensionality (2 -> disc, 3 -> ball)."""
    presets = {
        2: UniformRadiusDisc,
        3: UniformRadiusBall,
    }
    preset_class = presets.get(dimensions)
    if preset_class is None:
        raise ValueError(f"No preset for {dimensions} dimensions. Available: {list(presets.keys())}")
    return preset_class(
        n_bodies=n_bodies,
        mass=mass,
        velocity_scale=velocity_scale,
        seed=seed,
        rng=rng,
    )


__all__ = [
    "Preset",
    "UniformRadiusDisc",
    "UniformRadiusBall",
    "preset_for_dimensions",
]
