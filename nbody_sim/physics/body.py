"""Physical state of a single point mass."""

import math
import numpy as np
from typing import Optional
from nbody_sim.physics import vector as vec


class Body:
    """A point mass with position, velocity and per-step acceleration.

    The constructor copies its vector inputs, so a body never shares storage
    with the caller. ``acceleration`` only holds the contributions of the
    current accumulation pass and is zeroed by the integrator after use.
    """

    def __init__(self, position, velocity, mass: float, acceleration=None):
        """Initialize body.

        Args:
            position: Initial position (2 or 3 components)
            velocity: Initial velocity, same dimension as position
            mass: Body mass, must be positive and finite
            acceleration: Optional starting acceleration (default: zero)
        """
        self.position = np.array(position, dtype=np.float64)
        self.velocity = np.array(velocity, dtype=np.float64)

        if self.position.ndim != 1 or self.position.shape[0] not in (2, 3):
            raise ValueError(f"Body position must have 2 or 3 components, got shape {self.position.shape}")
        if self.velocity.shape != self.position.shape:
            raise ValueError(
                f"Velocity shape {self.velocity.shape} does not match position shape {self.position.shape}"
            )
        mass = float(mass)
        if not math.isfinite(mass) or mass <= 0:
            raise ValueError(f"Body mass must be positive and finite, got {mass}")
        self.mass = mass

        if acceleration is None:
            self.acceleration = vec.zeros(self.position.shape[0])
        else:
            self.acceleration = np.array(acceleration, dtype=np.float64)
            if self.acceleration.shape != self.position.shape:
                raise ValueError(
                    f"Acceleration shape {self.acceleration.shape} does not match position shape {self.position.shape}"
                )

    @property
    def dimensions(self) -> int:
        return self.position.shape[0]

    def reset_acceleration(self):
        self.acceleration.fill(0.0)

    def copy(self) -> "Body":
        return Body(self.position, self.velocity, self.mass, self.acceleration)

    def momentum(self) -> np.ndarray:
        return vec.scale(self.velocity, self.mass)

    def __repr__(self) -> str:
        return (
            f"Body(position={self.position.tolist()}, velocity={self.velocity.tolist()}, "
            f"mass={self.mass})"
        )


def bodies_from_arrays(positions, velocities, masses, accelerations: Optional[np.ndarray] = None) -> list:
    """Build a body list from (n, dim) position/velocity arrays and (n,) masses."""
    positions = np.asarray(positions, dtype=np.float64)
    velocities = np.asarray(velocities, dtype=np.float64)
    masses = np.asarray(masses, dtype=np.float64).flatten()
    if positions.shape != velocities.shape:
        raise ValueError(f"positions {positions.shape} and velocities {velocities.shape} differ in shape")
    if positions.shape[0] != masses.shape[0]:
        raise ValueError(f"Got {positions.shape[0]} positions but {masses.shape[0]} masses")
    bodies = []
    for i in range(positions.shape[0]):
        acc = None if accelerations is None else accelerations[i]
        bodies.append(Body(positions[i], velocities[i], masses[i], acc))
    return bodies
