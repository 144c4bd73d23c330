"""Domain boundary policies applied after integration."""

import logging
from abc import ABC, abstractmethod
from typing import Sequence
from nbody_sim.physics.body import Body

logger = logging.getLogger(__name__)


class BoundaryPolicy(ABC):
    """Abstract interface for post-integration boundary handling."""

    @abstractmethod
    def apply_to(self, body: Body) -> int:
        """Apply the policy to one body.

        Returns:
            Number of velocity components that were changed
        """
        pass

    def apply(self, bodies: Sequence[Body]) -> int:
        """Apply the policy to every body; returns the total number of changes."""
        return sum(self.apply_to(body) for body in bodies)

    @property
    @abstractmethod
    def name(self) -> str:
        pass


class OpenDomain(BoundaryPolicy):
    """Infinite domain: bodies drift freely."""

    @property
    def name(self) -> str:
        return "open"

    def apply_to(self, body: Body) -> int:
        return 0

    def apply(self, bodies: Sequence[Body]) -> int:
        return 0


class ReflectingBox(BoundaryPolicy):
    """Axis-aligned box ``[-half_extent, half_extent]^dim`` with elastic walls.

    A velocity component is negated whenever the matching coordinate is on
    or beyond a wall. Positions are not clamped, so a body can sit outside
    the box for a frame (and is reflected again if it is still outside on
    the next step).
    """

    def __init__(self, half_extent: float = 3.0):
        if half_extent <= 0:
            raise ValueError(f"half_extent must be positive, got {half_extent}")
        self.half_extent = float(half_extent)

    @property
    def name(self) -> str:
        return "reflecting_box"

    def apply_to(self, body: Body) -> int:
        h = self.half_extent
        reflected = 0
        for axis in range(body.dimensions):
            coord = body.position[axis]
            if coord <= -h or coord >= h:
                body.velocity[axis] *= -1
                reflected += 1
        return reflected

    def apply(self, bodies: Sequence[Body]) -> int:
        reflected = super().apply(bodies)
        if reflected:
            logger.debug("Reflected %d velocity components at |x| >= %g", reflected, self.half_extent)
        return reflected


def get_boundary(bounded: bool, half_extent: float = 3.0) -> BoundaryPolicy:
    """Return the boundary policy for a bounded or unbounded domain."""
    if bounded:
        return ReflectingBox(half_extent)
    return OpenDomain()
