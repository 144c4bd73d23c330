"""Pairwise gravitational force accumulation.

Exact O(n²) summation over unordered pairs in ascending index order, so the
floating-point result is identical from run to run. Each pair is visited
once and both bodies are updated (Newton's third law applied in one pass).
"""

import math
import numpy as np
from typing import Sequence
from nbody_sim.physics import vector as vec
from nbody_sim.physics.body import Body

MIN_DISTANCE_DEFAULT = 1.0
MIN_EPS_DEFAULT = 1e-4


class ForceCalculator:
    """Accumulates gravitational accelerations into a body list.

    The force term for the pair (i, j) is

        r = x_j - x_i
        force_dir = r / (max(|r|², min_eps) * max(|r|, min_distance))

    and body i receives ``+G * m_j * force_dir`` while body j receives
    ``-G * m_i * force_dir``. The distance floor keeps close encounters from
    blowing up; ``min_eps`` bounds the squared factor when two bodies
    coincide exactly.
    """

    G = 1.0  # Gravitational constant (normalized units)

    def __init__(
        self,
        min_distance: float = MIN_DISTANCE_DEFAULT,
        min_eps: float = MIN_EPS_DEFAULT,
    ):
        """Initialize force calculator.

        Args:
            min_distance: Floor applied to the linear distance factor
            min_eps: Floor applied to the squared distance factor

        Raises:
            ValueError: If a floor is not positive, or sqrt(min_eps) exceeds min_distance
        """
        if min_distance <= 0 or min_eps <= 0:
            raise ValueError(
                f"min_distance and min_eps must be positive, got {min_distance} and {min_eps}"
            )
        if math.sqrt(min_eps) > min_distance:
            raise ValueError(
                f"sqrt(min_eps)={math.sqrt(min_eps):.4g} must not exceed min_distance={min_distance}"
            )
        self.min_distance = float(min_distance)
        self.min_eps = float(min_eps)

    def pair_term(self, position_i: np.ndarray, position_j: np.ndarray) -> np.ndarray:
        """Return the mass-free force term pulling body i toward body j."""
        r = vec.sub(position_j, position_i)
        mag_sq = vec.length_squared(r)
        mag = math.sqrt(mag_sq)
        if mag < self.min_distance:
            mag = self.min_distance
        return vec.scale(r, 1.0 / (max(mag_sq, self.min_eps) * mag))

    def accumulate(self, bodies: Sequence[Body]):
        """Add every pairwise contribution into ``body.acceleration``.

        Accelerations are expected to be zero on entry; the integrator resets
        them after each step. Nothing else may touch the acceleration fields
        while this runs.
        """
        n = len(bodies)
        for i in range(n):
            body_i = bodies[i]
            p1 = body_i.position
            m1 = body_i.mass
            for j in range(i + 1, n):
                body_j = bodies[j]
                force_dir = self.pair_term(p1, body_j.position)
                vec.add_in_place(body_i.acceleration, vec.scale(force_dir, self.G * body_j.mass))
                vec.sub_in_place(body_j.acceleration, vec.scale(force_dir, self.G * m1))

    def compute_accelerations(self, bodies: Sequence[Body]) -> np.ndarray:
        """Return the (n, dim) accelerations the next pass would produce.

        Works on copies; the bodies themselves are left untouched.
        """
        scratch = [body.copy() for body in bodies]
        for body in scratch:
            body.reset_acceleration()
        self.accumulate(scratch)
        return np.array([body.acceleration for body in scratch])

    def pair_potential(self, distance: float) -> float:
        """Potential per unit mass product (G * m_i * m_j factored out).

        Piecewise so that its radial derivative equals the clamped force
        magnitude: inverse-square beyond ``min_distance``, 1/r between
        ``sqrt(min_eps)`` and ``min_distance``, linear (harmonic) inside.
        """
        d0 = self.min_distance
        r_eps = math.sqrt(self.min_eps)
        if distance >= d0:
            return -1.0 / distance
        if distance >= r_eps:
            return (-1.0 + math.log(distance / d0)) / d0
        phi_eps = (-1.0 + math.log(r_eps / d0)) / d0
        return phi_eps + (distance * distance - self.min_eps) / (2.0 * self.min_eps * d0)
