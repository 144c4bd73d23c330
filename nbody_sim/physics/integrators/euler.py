"""Velocity-first Euler integrator (comparison ordering)."""

from nbody_sim.physics import vector as vec
from nbody_sim.physics.body import Body
from nbody_sim.physics.integrators.base import Integrator


class EulerIntegrator(Integrator):
    """Euler method - velocity first, then position with the new velocity.

    Since the acceleration was accumulated at the start of the step, this is
    the kick-drift ordering: cross(x_new, v_new) == cross(x, v_new), so
    total angular momentum is conserved to rounding under pairwise central
    forces.
    """

    @property
    def name(self) -> str:
        return "euler"

    @property
    def order(self) -> int:
        return 1

    def advance(self, body: Body, dt: float):
        """Euler step: v_new = v + a*dt, x_new = x + v_new*dt."""
        vec.add_in_place(body.velocity, vec.scale(body.acceleration, dt))
        vec.add_in_place(body.position, vec.scale(body.velocity, dt))
        body.reset_acceleration()
