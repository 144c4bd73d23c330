"""Initial-state normalization for the bounded variant.

Removes bulk drift, centres the system on the origin and rescales it so the
farthest body sits on the unit circle. Runs once, before the first step.
"""

import logging
from typing import Sequence, Tuple
import numpy as np
from nbody_sim.physics import vector as vec
from nbody_sim.physics.body import Body

logger = logging.getLogger(__name__)


def center_of_mass(bodies: Sequence[Body]) -> Tuple[np.ndarray, np.ndarray]:
    """Return mass-weighted mean (position, velocity)."""
    dim = bodies[0].dimensions
    total_mass = 0.0
    pos_sum = vec.zeros(dim)
    vel_sum = vec.zeros(dim)
    for body in bodies:
        vec.add_in_place(pos_sum, vec.scale(body.position, body.mass))
        vec.add_in_place(vel_sum, vec.scale(body.velocity, body.mass))
        total_mass += body.mass
    return vec.scale(pos_sum, 1.0 / total_mass), vec.scale(vel_sum, 1.0 / total_mass)


def center_bodies(bodies: Sequence[Body]) -> Tuple[np.ndarray, np.ndarray]:
    """Shift bodies so the centre of mass is at rest at the origin.

    Offsets are divided by total mass, not body count, so unequal or
    non-unit masses still end up centred.

    Returns:
        The (position, velocity) offsets that were removed
    """
    if not bodies:
        raise ValueError("Cannot center an empty body list")
    com, com_v = center_of_mass(bodies)
    for body in bodies:
        vec.sub_in_place(body.velocity, com_v)
        vec.sub_in_place(body.position, com)
    logger.debug("Removed COM offset %s and drift %s", com.tolist(), com_v.tolist())
    return com, com_v


def scale_to_unit_radius(bodies: Sequence[Body]) -> float:
    """Divide every position by the largest distance from the origin.

    A zero max radius (a lone body at the origin, or all bodies coincident)
    leaves positions untouched.

    Returns:
        The max radius before scaling
    """
    max_radius = max(vec.length(body.position) for body in bodies)
    if max_radius == 0.0:
        logger.debug("All bodies at the origin; skipping radius normalization")
        return max_radius
    for body in bodies:
        vec.scale_in_place(body.position, 1.0 / max_radius)
    logger.debug("Rescaled positions by 1/%g", max_radius)
    return max_radius


def normalize(bodies: Sequence[Body]) -> float:
    """Center the system, then rescale it to unit radius.

    Returns:
        The max radius before scaling
    """
    center_bodies(bodies)
    return scale_to_unit_radius(bodies)
