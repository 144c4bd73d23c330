"""Physics engine for N-body simulations."""

from nbody_sim.physics.body import Body
from nbody_sim.physics.force_calculator import ForceCalculator
from nbody_sim.physics.simulator import (
    SimulationState,
    Simulator,
    initialize,
    from_bodies,
    step,
    positions_of,
)

__all__ = [
    "Body",
    "ForceCalculator",
    "SimulationState",
    "Simulator",
    "initialize",
    "from_bodies",
    "step",
    "positions_of",
]
