"""Tests for pairwise force accumulation."""

import math
import numpy as np
import pytest
from nbody_sim.physics.body import Body
from nbody_sim.physics.force_calculator import ForceCalculator


def test_two_body_reference_accelerations():
    """Unit masses at x=-1 and x=+1: |r|=2, denom=8, force term 0.25."""
    calc = ForceCalculator()
    bodies = [
        Body([-1.0, 0.0], [0.0, 0.0], 1.0),
        Body([1.0, 0.0], [0.0, 0.0], 1.0),
    ]

    calc.accumulate(bodies)

    assert np.array_equal(bodies[0].acceleration, [0.25, 0.0])
    assert np.array_equal(bodies[1].acceleration, [-0.25, 0.0])


def test_newtons_third_law_unequal_masses():
    """m_i * a_i == -m_j * a_j for a single pair."""
    calc = ForceCalculator()
    bodies = [
        Body([0.3, -1.2, 0.5], [0.0, 0.0, 0.0], 2.0),
        Body([2.1, 0.4, -0.7], [0.0, 0.0, 0.0], 5.0),
    ]

    calc.accumulate(bodies)

    assert np.allclose(bodies[0].acceleration * 2.0, -bodies[1].acceleration * 5.0, rtol=1e-14, atol=0)
    # Body 0 is pulled toward body 1
    r = bodies[1].position - bodies[0].position
    assert np.dot(bodies[0].acceleration, r) > 0


def test_net_force_vanishes_for_many_bodies():
    """Σ m_i a_i == 0 over the whole system."""
    rng = np.random.default_rng(3)
    bodies = [
        Body(rng.uniform(-2, 2, 3), np.zeros(3), m)
        for m in rng.uniform(0.5, 3.0, 12)
    ]

    ForceCalculator().accumulate(bodies)

    net = sum(body.mass * body.acceleration for body in bodies)
    assert np.allclose(net, 0.0, atol=1e-12)


def test_distance_floor_applies_below_min_distance():
    """At |r|=0.5 the linear factor is floored to 1: term = r / 0.25."""
    calc = ForceCalculator()
    term = calc.pair_term(np.array([0.0, 0.0]), np.array([0.5, 0.0]))
    assert np.allclose(term, [2.0, 0.0])


def test_min_eps_guard_for_very_close_bodies():
    """Below sqrt(min_eps) the squared factor is floored to min_eps."""
    calc = ForceCalculator()
    term = calc.pair_term(np.array([0.0, 0.0]), np.array([0.001, 0.0]))
    assert np.allclose(term, [10.0, 0.0])


def test_coincident_bodies_do_not_produce_nan():
    """Exactly coincident bodies contribute nothing and never divide by zero."""
    calc = ForceCalculator()
    bodies = [
        Body([0.5, 0.5], [0.0, 0.0], 1.0),
        Body([0.5, 0.5], [0.0, 0.0], 1.0),
    ]

    calc.accumulate(bodies)

    assert np.all(np.isfinite(bodies[0].acceleration))
    assert np.array_equal(bodies[0].acceleration, [0.0, 0.0])


def test_accumulate_adds_to_existing_acceleration():
    """accumulate() sums into the fields; resetting is the integrator's job."""
    calc = ForceCalculator()
    bodies = [
        Body([-1.0, 0.0], [0.0, 0.0], 1.0, acceleration=[1.0, 0.0]),
        Body([1.0, 0.0], [0.0, 0.0], 1.0),
    ]

    calc.accumulate(bodies)

    assert np.array_equal(bodies[0].acceleration, [1.25, 0.0])


def test_compute_accelerations_leaves_bodies_untouched():
    calc = ForceCalculator()
    bodies = [
        Body([-1.0, 0.0], [0.0, 0.0], 1.0),
        Body([1.0, 0.0], [0.0, 0.0], 3.0),
    ]

    acc = calc.compute_accelerations(bodies)

    assert acc.shape == (2, 2)
    assert np.allclose(acc[0], [0.75, 0.0])
    assert np.allclose(acc[1], [-0.25, 0.0])
    assert np.array_equal(bodies[0].acceleration, [0.0, 0.0])


def test_pair_potential_matches_force_law():
    """-dphi/dr equals the clamped force magnitude on every branch."""
    calc = ForceCalculator()
    h = 1e-7
    for r in (0.005, 0.05, 0.5, 1.5, 4.0):
        slope = (calc.pair_potential(r + h) - calc.pair_potential(r - h)) / (2 * h)
        term = calc.pair_term(np.array([0.0, 0.0]), np.array([r, 0.0]))
        assert math.isclose(slope, np.linalg.norm(term), rel_tol=1e-5)


def test_pair_potential_is_continuous():
    calc = ForceCalculator()
    for r in (calc.min_distance, math.sqrt(calc.min_eps)):
        assert math.isclose(calc.pair_potential(r * (1 - 1e-12)), calc.pair_potential(r), abs_tol=1e-8)
    assert calc.pair_potential(2.0) == -0.5


def test_invalid_floors_rejected():
    with pytest.raises(ValueError):
        ForceCalculator(min_distance=0.0)
    with pytest.raises(ValueError):
        ForceCalculator(min_eps=-1.0)
    with pytest.raises(ValueError):
        ForceCalculator(min_distance=0.01, min_eps=1.0)
