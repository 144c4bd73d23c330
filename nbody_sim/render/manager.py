"""Render manager that picks a renderer for the simulation's dimensionality."""

from typing import Optional
import numpy as np
from nbody_sim.render.base import Renderer
from nbody_sim.render.renderer_2d import Renderer2D
from nbody_sim.render.renderer_3d import Renderer3D
from nbody_sim.utils.config import SimulationConfig


class RenderManager:
    """Owns one renderer and feeds it position snapshots.

    ``render`` has the signature of ``Simulator.on_step_callback`` so the
    manager can be hooked in directly; ``every`` thins out frames.
    """

    def __init__(self, dimensions: int = 2, every: int = 1, **renderer_kwargs):
        """Initialize render manager.

        Args:
            dimensions: 2 or 3
            every: Render one frame out of every ``every`` calls
            **renderer_kwargs: Additional arguments for renderer
        """
        self.dimensions = dimensions
        self.every = max(1, every)
        self.renderer_kwargs = renderer_kwargs
        self.renderer: Optional[Renderer] = None
        self._calls = 0
        self._create_renderer()

    @classmethod
    def for_config(cls, config: SimulationConfig, every: int = 1, **renderer_kwargs) -> "RenderManager":
        """Renderer matching a simulation config (box outline when bounded)."""
        if config.dimensions == 2 and config.bounded:
            renderer_kwargs.setdefault('box_half_extent', config.half_extent)
        return cls(config.dimensions, every=every, **renderer_kwargs)

    def _create_renderer(self):
        """Create appropriate renderer based on dimensionality."""
        if self.renderer is not None:
            self.renderer.close()

        if self.dimensions == 2:
            self.renderer = Renderer2D(**self.renderer_kwargs)
        elif self.dimensions == 3:
            self.renderer = Renderer3D(**self.renderer_kwargs)
        else:
            raise ValueError(f"Unknown dimensionality: {self.dimensions}")

    def render(self, positions: np.ndarray):
        """Render current frame."""
        if self.renderer is None:
            raise RuntimeError("Renderer not initialized")
        if self._calls % self.every == 0:
            self.renderer.render(positions)
        self._calls += 1

    def capture_frame(self) -> np.ndarray:
        """Capture current frame."""
        if self.renderer is None:
            raise RuntimeError("Renderer not initialized")
        return self.renderer.capture_frame()

    def close(self):
        """Close renderer."""
        if self.renderer is not None:
            self.renderer.close()
            self.renderer = None
