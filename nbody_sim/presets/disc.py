"""Flat disc preset (2D)."""

import math
import numpy as np
from nbody_sim.physics import vector as vec
from nbody_sim.presets.base import Preset


class UniformRadiusDisc(Preset):
    """Bodies scattered in the unit disc.

    The angle and the radius are both drawn uniformly, so points crowd
    toward the centre (density per unit area falls off as 1/r). This is
    deliberately not the area-uniform ``sqrt(u)`` law.
    """

    @property
    def dimensions(self) -> int:
        return 2

    @property
    def name(self) -> str:
        return "disc"

    def sample_point(self) -> np.ndarray:
        theta = self.rng.random() * math.pi * 2
        r = self.rng.random()
        return vec.vector(math.cos(theta) * r, math.sin(theta) * r)
