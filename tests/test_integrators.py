"""Tests for numerical integrators."""

import numpy as np
import pytest
from nbody_sim.physics.body import Body
from nbody_sim.physics.integrators import (
    EulerIntegrator,
    SymplecticEulerIntegrator,
    get_integrator,
)


def test_symplectic_euler_uses_previous_velocity():
    """Position moves with the old velocity; velocity picks up the acceleration."""
    integrator = SymplecticEulerIntegrator()
    body = Body([-1.0, 0.0], [0.0, 0.0], 1.0, acceleration=[0.25, 0.0])

    integrator.advance(body, 0.01)

    assert np.array_equal(body.position, [-1.0, 0.0])
    assert np.allclose(body.velocity, [0.0025, 0.0], rtol=0, atol=1e-18)
    assert np.array_equal(body.acceleration, [0.0, 0.0])
    assert integrator.name == "symplectic_euler"
    assert integrator.order == 1


def test_velocity_first_euler_uses_updated_velocity():
    """Velocity-first Euler moves the position with the new velocity."""
    integrator = EulerIntegrator()
    body = Body([-1.0, 0.0], [0.0, 0.0], 1.0, acceleration=[0.25, 0.0])

    integrator.advance(body, 0.01)

    assert np.allclose(body.position, [-1.0 + 0.0025 * 0.01, 0.0])
    assert body.position[0] != -1.0
    assert np.array_equal(body.acceleration, [0.0, 0.0])
    assert integrator.name == "euler"
    assert integrator.order == 1


def test_step_advances_all_bodies():
    """Test stepping a body list with no acceleration."""
    integrator = SymplecticEulerIntegrator()
    bodies = [
        Body([0.0, 0.0, 0.0], [1.0, 0.0, 0.0], 1.0),
        Body([1.0, 1.0, 1.0], [0.0, -2.0, 0.5], 1.0),
    ]

    integrator.step(bodies, 0.5)

    assert np.allclose(bodies[0].position, [0.5, 0.0, 0.0])
    assert np.allclose(bodies[1].position, [1.0, 0.0, 1.25])
    assert np.array_equal(bodies[1].velocity, [0.0, -2.0, 0.5])


def test_get_integrator():
    assert isinstance(get_integrator("symplectic_euler"), SymplecticEulerIntegrator)
    assert isinstance(get_integrator("EULER"), EulerIntegrator)
    with pytest.raises(ValueError):
        get_integrator("rk4")
