"""Numerical integrators for N-body simulations."""

from nbody_sim.physics.integrators.base import Integrator
from nbody_sim.physics.integrators.euler import EulerIntegrator
from nbody_sim.physics.integrators.symplectic_euler import SymplecticEulerIntegrator

INTEGRATORS = {
    "symplectic_euler": SymplecticEulerIntegrator,
    "euler": EulerIntegrator,
}


def get_integrator(name: str) -> Integrator:
    """Get an integrator instance by name.

    Raises:
        ValueError: If the name is unknown
    """
    integrator_class = INTEGRATORS.get(name.lower())
    if integrator_class is None:
        raise ValueError(f"Unknown integrator: {name}. Available: {list(INTEGRATORS.keys())}")
    return integrator_class()


__all__ = [
    "Integrator",
    "EulerIntegrator",
    "SymplecticEulerIntegrator",
    "INTEGRATORS",
    "get_integrator",
]
