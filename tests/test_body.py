"""Tests for the Body state container."""

import numpy as np
import pytest
from nbody_sim.physics.body import Body, bodies_from_arrays


def test_body_copies_inputs():
    """Bodies never alias the arrays they were built from."""
    position = np.array([1.0, 2.0])
    velocity = np.array([0.0, 1.0])
    body = Body(position, velocity, 1.0)

    position[0] = 99.0
    velocity[1] = 99.0

    assert np.array_equal(body.position, [1.0, 2.0])
    assert np.array_equal(body.velocity, [0.0, 1.0])
    assert np.array_equal(body.acceleration, [0.0, 0.0])
    assert body.dimensions == 2


def test_body_copy_is_independent():
    """copy() produces a deep copy."""
    body = Body([0.0, 0.0, 0.0], [1.0, 0.0, 0.0], 2.0)
    clone = body.copy()
    clone.position[0] = 5.0
    clone.acceleration[2] = 1.0

    assert body.position[0] == 0.0
    assert body.acceleration[2] == 0.0
    assert clone.mass == 2.0


def test_body_rejects_bad_mass():
    """Mass must be positive and finite."""
    for mass in (0.0, -1.0, float("inf"), float("nan")):
        with pytest.raises(ValueError):
            Body([0.0, 0.0], [0.0, 0.0], mass)


def test_body_rejects_bad_shapes():
    """Position must be 2D or 3D and velocity must match."""
    with pytest.raises(ValueError):
        Body([0.0], [0.0], 1.0)
    with pytest.raises(ValueError):
        Body([0.0, 0.0], [0.0, 0.0, 0.0], 1.0)
    with pytest.raises(ValueError):
        Body([0.0, 0.0], [0.0, 0.0], 1.0, acceleration=[0.0, 0.0, 0.0])


def test_momentum():
    body = Body([0.0, 0.0], [1.5, -2.0], 2.0)
    assert np.array_equal(body.momentum(), [3.0, -4.0])


def test_bodies_from_arrays():
    """Test building a body list from state arrays."""
    positions = np.array([[0.0, 0.0], [1.0, 0.0]])
    velocities = np.array([[0.0, 1.0], [0.0, -1.0]])
    masses = np.array([1.0, 2.0])

    bodies = bodies_from_arrays(positions, velocities, masses)

    assert len(bodies) == 2
    assert bodies[1].mass == 2.0
    assert np.array_equal(bodies[1].velocity, [0.0, -1.0])

    with pytest.raises(ValueError):
        bodies_from_arrays(positions, velocities, np.array([1.0]))
