"""
N-body Simulator - exact pairwise gravitational point-mass simulation.

Features:
- Exact O(n²) force accumulation in a fixed, deterministic order
- Semi-implicit (symplectic) Euler integration at a fixed time step
- Bounded 2D variant with reflecting walls and initial normalization
- Unbounded 3D variant with free drift
- Matplotlib viewer and CLI
"""

__version__ = "0.1.0"

from nbody_sim.physics.body import Body
from nbody_sim.physics.simulator import (
    SimulationState,
    Simulator,
    initialize,
    from_bodies,
    step,
    positions_of,
)
from nbody_sim.utils.config import SimulationConfig

__all__ = [
    "Body",
    "SimulationConfig",
    "SimulationState",
    "Simulator",
    "initialize",
    "from_bodies",
    "step",
    "positions_of",
]
