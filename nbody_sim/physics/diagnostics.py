"""Diagnostics for N-body simulations."""

import numpy as np
from typing import Optional, Sequence, Tuple, Union
from nbody_sim.physics import vector as vec
from nbody_sim.physics.body import Body
from nbody_sim.physics.force_calculator import ForceCalculator
from nbody_sim.physics.normalization import center_of_mass


class Diagnostics:
    """Compute conserved quantities consistent with the force law."""

    def __init__(self, force_calculator: Optional[ForceCalculator] = None):
        """Initialize diagnostics.

        Args:
            force_calculator: Calculator whose distance floors define the
                potential (default: the standard floors)
        """
        self.force_calculator = force_calculator or ForceCalculator()

    def kinetic_energy(self, bodies: Sequence[Body]) -> float:
        """K = 0.5 * Σ m_i * v_i^2"""
        return 0.5 * sum(body.mass * vec.length_squared(body.velocity) for body in bodies)

    def potential_energy(self, bodies: Sequence[Body]) -> float:
        """U = G * Σ_{i<j} m_i * m_j * phi(r_ij), phi matching the clamped force."""
        calc = self.force_calculator
        U = 0.0
        n = len(bodies)
        for i in range(n):
            for j in range(i + 1, n):
                r = vec.length(vec.sub(bodies[j].position, bodies[i].position))
                U += calc.G * bodies[i].mass * bodies[j].mass * calc.pair_potential(r)
        return U

    def compute_energies(self, bodies: Sequence[Body]) -> Tuple[float, float, float]:
        """Compute kinetic, potential and total energy.

        Returns:
            Tuple of (kinetic_energy, potential_energy, total_energy)
        """
        K = self.kinetic_energy(bodies)
        U = self.potential_energy(bodies)
        return K, U, K + U

    def total_momentum(self, bodies: Sequence[Body]) -> np.ndarray:
        """P = Σ m_i * v_i"""
        P = vec.zeros(bodies[0].dimensions)
        for body in bodies:
            vec.add_in_place(P, body.momentum())
        return P

    def center_of_mass(self, bodies: Sequence[Body]) -> Tuple[np.ndarray, np.ndarray]:
        """Return mass-weighted mean (position, velocity)."""
        return center_of_mass(bodies)

    def angular_momentum(self, bodies: Sequence[Body]) -> Union[float, np.ndarray]:
        """L = Σ m_i * (r_i x v_i) about the origin.

        Returns:
            Lz as a float for 2D, the full vector for 3D
        """
        positions = np.array([body.position for body in bodies])
        momenta = np.array([body.momentum() for body in bodies])
        if positions.shape[1] == 2:
            return float(np.sum(positions[:, 0] * momenta[:, 1] - positions[:, 1] * momenta[:, 0]))
        return np.sum(np.cross(positions, momenta), axis=0)
