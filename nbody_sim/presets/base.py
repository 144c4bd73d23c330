"""Base class for initial-condition samplers."""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
import numpy as np
from nbody_sim.physics.body import Body, bodies_from_arrays


class Preset(ABC):
    """Abstract base class for initial-condition samplers.

    Each body draws its position and then its velocity from ``sample_point``,
    in body order, so a seeded generator yields the same bodies every time.
    """

    def __init__(
        self,
        n_bodies: int = 100,
        mass: float = 1.0,
        velocity_scale: float = 0.02,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """Initialize preset.

        Args:
            n_bodies: Number of bodies
            mass: Mass given to every body
            velocity_scale: Factor applied to each sampled velocity
            seed: Random seed for reproducibility (ignored when rng is given)
            rng: Optional generator to draw from
        """
        if n_bodies < 1:
            raise ValueError(f"n_bodies must be at least 1, got {n_bodies}")
        self.n_bodies = n_bodies
        self.mass = mass
        self.velocity_scale = velocity_scale
        self.seed = seed
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    @property
    @abstractmethod
    def dimensions(self) -> int:
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass

    @abstractmethod
    def sample_point(self) -> np.ndarray:
        """Draw one point from the preset's sampling law."""
        pass

    def generate(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Generate initial conditions.

        Returns:
            Tuple of (positions, velocities, masses)
        """
        n = self.n_bodies
        positions = np.empty((n, self.dimensions))
        velocities = np.empty((n, self.dimensions))
        for i in range(n):
            positions[i] = self.sample_point()
            velocities[i] = self.sample_point() * self.velocity_scale
        masses = np.full(n, self.mass, dtype=np.float64)
        return positions, velocities, masses

    def bodies(self) -> List[Body]:
        """Generate initial conditions as a body list."""
        return bodies_from_arrays(*self.generate())
