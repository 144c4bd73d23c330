"""Spherical ball preset (3D)."""

import math
import numpy as np
from nbody_sim.physics import vector as vec
from nbody_sim.presets.base import Preset


class UniformRadiusBall(Preset):
    """Bodies scattered in the unit ball using uniform spherical coordinates.

    theta ~ U[0, 2pi), phi ~ U[0, pi), r ~ U[0, 1). Uniform phi bunches
    points near the poles and uniform r bunches them near the centre.
    """

    @property
    def dimensions(self) -> int:
        return 3

    @property
    def name(self) -> str:
        return "ball"

    def sample_point(self) -> np.ndarray:
        theta = self.rng.random() * math.pi * 2
        phi = self.rng.random() * math.pi
        r = self.rng.random()
        return vec.vector(
            math.sin(phi) * math.cos(theta) * r,
            math.sin(phi) * math.sin(theta) * r,
            math.cos(phi) * r,
        )
