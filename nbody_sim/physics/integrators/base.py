"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from typing import Sequence
from nbody_sim.physics.body import Body


class Integrator(ABC):
    """Abstract interface for fixed-step integrators.

    ``advance`` consumes the acceleration accumulated for one step and must
    leave it at zero, ready for the next accumulation pass.
    """

    @abstractmethod
    def advance(self, body: Body, dt: float):
        """Advance one body by ``dt`` in place.

        Args:
            body: Body with fully accumulated acceleration
            dt: Time step
        """
        pass

    def step(self, bodies: Sequence[Body], dt: float):
        """Advance every body by ``dt`` in index order."""
        for body in bodies:
            self.advance(body, dt)

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass
