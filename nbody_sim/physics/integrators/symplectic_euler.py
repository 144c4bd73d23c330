"""Semi-implicit Euler integrator, position first."""

from nbody_sim.physics import vector as vec
from nbody_sim.physics.body import Body
from nbody_sim.physics.integrators.base import Integrator


class SymplecticEulerIntegrator(Integrator):
    """Semi-implicit Euler - position first, then velocity.

    1. x_new = x + v*dt      (velocity from the previous step)
    2. v_new = v + a*dt      (acceleration accumulated this step)
    3. a = 0

    This is the default ordering and the one every reference trajectory is
    computed with; swapping 1 and 2 changes the trajectory.
    """

    @property
    def name(self) -> str:
        return "symplectic_euler"

    @property
    def order(self) -> int:
        return 1

    def advance(self, body: Body, dt: float):
        vec.add_in_place(body.position, vec.scale(body.velocity, dt))
        vec.add_in_place(body.velocity, vec.scale(body.acceleration, dt))
        body.reset_acceleration()
