"""Base renderer interface."""

from abc import ABC, abstractmethod
import numpy as np


class Renderer(ABC):
    """Abstract base class for renderers.

    Renderers are read-only consumers of body positions: they are handed a
    snapshot after each step and never touch simulation state.
    """

    @abstractmethod
    def render(self, positions: np.ndarray):
        """Render current frame.

        Args:
            positions: Body positions (n, 2) or (n, 3), in body order
        """
        pass

    @abstractmethod
    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array.

        Returns:
            Image array (H, W, 3) uint8
        """
        pass

    @abstractmethod
    def clear(self):
        """Clear the renderer."""
        pass

    @abstractmethod
    def close(self):
        """Close the renderer."""
        pass


def body_colors(n_bodies: int, seed: int = 0) -> np.ndarray:
    """One fixed random RGB colour per body, stable for the renderer's lifetime."""
    rng = np.random.default_rng(seed)
    return rng.uniform(0.0, 1.0, size=(n_bodies, 3))


def figure_to_rgb(fig) -> np.ndarray:
    """Draw ``fig`` and return its pixels as an (H, W, 3) uint8 array."""
    fig.canvas.draw()
    rgba = np.asarray(fig.canvas.buffer_rgba())
    return rgba[:, :, :3].copy()
