"""Simulation state and the step driver."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple
import numpy as np
from nbody_sim.physics.body import Body
from nbody_sim.physics.boundary import BoundaryPolicy, get_boundary
from nbody_sim.physics.diagnostics import Diagnostics
from nbody_sim.physics.force_calculator import ForceCalculator
from nbody_sim.physics.integrators import Integrator, get_integrator
from nbody_sim.physics.normalization import normalize
from nbody_sim.presets import preset_for_dimensions
from nbody_sim.utils.config import SimulationConfig
from nbody_sim.utils.reproducibility import make_rng

logger = logging.getLogger(__name__)


@dataclass
class SimulationState:
    """Ordered body collection plus simulated time.

    Body order is the identity shared with any external renderer.
    """
    bodies: List[Body]
    config: SimulationConfig
    time: float = 0.0
    step_count: int = 0

    @property
    def n_bodies(self) -> int:
        return len(self.bodies)

    @property
    def dimensions(self) -> int:
        return self.config.dimensions


def initialize(config: Optional[SimulationConfig] = None, rng: Optional[np.random.Generator] = None) -> SimulationState:
    """Sample a fresh simulation state.

    Bounded configurations are centred and rescaled to unit radius before
    being returned; unbounded ones are used as sampled.

    Args:
        config: Simulation configuration (default: bounded 2D variant)
        rng: Optional generator; otherwise one is seeded from ``config.seed``
    """
    config = config or SimulationConfig()
    if rng is None:
        rng = make_rng(config.seed)
    preset = preset_for_dimensions(
        config.dimensions,
        n_bodies=config.n_bodies,
        mass=config.mass,
        velocity_scale=config.velocity_scale,
        rng=rng,
    )
    bodies = preset.bodies()
    if config.bounded:
        max_radius = normalize(bodies)
        logger.debug("Normalized %d bodies (max radius before scaling %.4f)", len(bodies), max_radius)
    return SimulationState(bodies=bodies, config=config)


def from_bodies(bodies: Sequence[Body], config: Optional[SimulationConfig] = None) -> SimulationState:
    """Build a state from explicit bodies (copied; no normalization applied).

    Args:
        bodies: Initial bodies, all of the same dimension
        config: Configuration supplying dt, domain and force floors
            (default: an open domain of the bodies' dimension)
    """
    if not bodies:
        raise ValueError("A simulation needs at least one body")
    dim = bodies[0].dimensions
    if any(body.dimensions != dim for body in bodies):
        raise ValueError("All bodies must have the same dimension")
    if config is None:
        config = SimulationConfig(dimensions=dim, bounded=False)
    if config.dimensions != dim:
        raise ValueError(f"Bodies are {dim}D but the config is {config.dimensions}D")
    config = config.with_overrides(n_bodies=len(bodies))
    return SimulationState(bodies=[body.copy() for body in bodies], config=config)


def components_for(config: SimulationConfig) -> Tuple[ForceCalculator, Integrator, BoundaryPolicy]:
    """Build the force calculator, integrator and boundary policy for a config."""
    return (
        ForceCalculator(min_distance=config.min_distance, min_eps=config.min_eps),
        get_integrator(config.integrator),
        get_boundary(config.bounded, config.half_extent),
    )


def advance(
    state: SimulationState,
    force_calculator: ForceCalculator,
    integrator: Integrator,
    boundary: BoundaryPolicy,
) -> SimulationState:
    """Advance ``state`` by one ``dt``: accumulate, integrate, apply boundary."""
    dt = state.config.dt
    force_calculator.accumulate(state.bodies)
    integrator.step(state.bodies, dt)
    boundary.apply(state.bodies)
    state.time += dt
    state.step_count += 1
    return state


def step(state: SimulationState) -> SimulationState:
    """Advance ``state`` in place by one ``dt`` and return it."""
    return advance(state, *components_for(state.config))


def positions_of(state: SimulationState) -> np.ndarray:
    """Read-only (n, dim) snapshot of body positions in body order."""
    positions = np.array([body.position for body in state.bodies], dtype=np.float64)
    positions.flags.writeable = False
    return positions


class SimulatorStatus(Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"
    STEPPING = "stepping"


class Simulator:
    """Main simulation controller.

    Owns the simulation state and runs the step pipeline. The external
    renderer hooks in through ``on_step_callback``, which receives a
    read-only positions snapshot after every step.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        integrator: Optional[Integrator] = None,
    ):
        """Initialize simulator.

        Args:
            config: Simulation configuration (default: bounded 2D variant)
            integrator: Integrator override (default: the one named in config)
        """
        self.config = config or SimulationConfig()
        self._integrator_override = integrator
        self._build_components()

        self.state: Optional[SimulationState] = None
        self.status = SimulatorStatus.UNINITIALIZED
        self.paused = False

        # Callbacks
        self.on_step_callback: Optional[Callable[[np.ndarray], None]] = None
        self.debug_interval: int = 0

    def _build_components(self):
        self.force_calculator, integrator, self.boundary = components_for(self.config)
        self.integrator = self._integrator_override or integrator
        self.diagnostics = Diagnostics(self.force_calculator)

    def _require_state(self) -> SimulationState:
        if self.state is None:
            raise RuntimeError("Simulator not initialized. Call initialize() or load() first.")
        return self.state

    def initialize(self, config: Optional[SimulationConfig] = None, rng: Optional[np.random.Generator] = None):
        """Sample initial bodies and enter the READY state.

        Args:
            config: Optional replacement configuration
            rng: Optional generator for sampling
        """
        if config is not None:
            self.config = config
            self._build_components()
        self.state = initialize(self.config, rng)
        self.status = SimulatorStatus.READY
        logger.info(
            "Initialized %d bodies (%dD, %s domain)",
            self.state.n_bodies,
            self.config.dimensions,
            "bounded" if self.config.bounded else "open",
        )

    def load(self, bodies: Sequence[Body]):
        """Use explicit initial bodies and enter the READY state."""
        self.state = from_bodies(bodies, self.config)
        self.config = self.state.config
        self.status = SimulatorStatus.READY

    def step(self):
        """Perform one simulation step (no-op while paused)."""
        state = self._require_state()
        if self.paused:
            return
        advance(state, self.force_calculator, self.integrator, self.boundary)
        self.status = SimulatorStatus.STEPPING

        if self.debug_interval and state.step_count % self.debug_interval == 0:
            self._log_diagnostics()

        if self.on_step_callback:
            self.on_step_callback(positions_of(state))

    def _log_diagnostics(self):
        K, U, E = self.diagnostics.compute_energies(self.state.bodies)
        P = np.linalg.norm(self.diagnostics.total_momentum(self.state.bodies))
        logger.info(
            "[Diag] step=%d K=%.6f U=%.6f E=%.6f |P|=%.3e",
            self.state.step_count, K, U, E, P,
        )

    def run(self, n_steps: int):
        """Run simulation for specified number of steps.

        Args:
            n_steps: Number of steps to run
        """
        for _ in range(n_steps):
            if self.paused:
                return
            self.step()

    def pause(self):
        """Pause simulation."""
        self.paused = True

    def resume(self):
        """Resume simulation."""
        self.paused = False

    def set_integrator(self, integrator: Integrator):
        """Set integrator.

        Args:
            integrator: New integrator
        """
        self._integrator_override = integrator
        self.integrator = integrator

    @property
    def time(self) -> float:
        return self._require_state().time

    @property
    def step_count(self) -> int:
        return self._require_state().step_count

    def positions(self) -> np.ndarray:
        """Read-only positions snapshot for the renderer."""
        return positions_of(self._require_state())

    def get_state(self):
        """Get current simulation state.

        Returns:
            Tuple of (positions, velocities, masses, time, step_count), all copies
        """
        state = self._require_state()
        pos = np.array([body.position for body in state.bodies])
        vel = np.array([body.velocity for body in state.bodies])
        mass = np.array([body.mass for body in state.bodies])
        return pos, vel, mass, state.time, state.step_count

    def get_energy(self) -> float:
        """Get current total energy."""
        return self.diagnostics.compute_energies(self._require_state().bodies)[2]

    def get_kinetic_energy(self) -> float:
        return self.diagnostics.kinetic_energy(self._require_state().bodies)

    def get_potential_energy(self) -> float:
        return self.diagnostics.potential_energy(self._require_state().bodies)

    def get_momentum(self) -> np.ndarray:
        return self.diagnostics.total_momentum(self._require_state().bodies)

    def get_center_of_mass(self) -> Tuple[np.ndarray, np.ndarray]:
        """Mass-weighted (position, velocity) of the whole system."""
        return self.diagnostics.center_of_mass(self._require_state().bodies)
