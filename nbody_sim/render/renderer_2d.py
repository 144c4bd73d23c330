"""2D renderer using matplotlib."""

import time
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle
from typing import Optional, Tuple
from nbody_sim.render.base import Renderer, body_colors, figure_to_rgb


class Renderer2D(Renderer):
    """2D real-time renderer using matplotlib.

    The view is fixed rather than following the bodies, so drift and wall
    reflections are visible as they happen.
    """

    def __init__(
        self,
        figsize: Tuple[int, int] = (8, 8),
        dpi: int = 100,
        view_extent: float = 3.0,
        box_half_extent: Optional[float] = None,
        marker_size: float = 12.0,
        interactive: bool = True,
        target_fps: float = 30.0,
    ):
        """Initialize 2D renderer.

        Args:
            figsize: Figure size (width, height)
            dpi: Dots per inch
            view_extent: Half-width of the visible square
            box_half_extent: If set, outline the reflecting box of this size
            marker_size: Scatter marker size
            interactive: Show a window; False draws off-screen only
            target_fps: Frames faster than this are skipped when interactive
        """
        self.figsize = figsize
        self.dpi = dpi
        self.view_extent = view_extent
        self.box_half_extent = box_half_extent
        self.marker_size = marker_size
        self.interactive = interactive

        self.fig: Optional[Figure] = None
        self.ax = None
        self.scatter = None
        self.initialized = False

        # Frame rate limiting
        self.frame_time = 1.0 / target_fps
        self.last_render_time = 0.0

    def _initialize(self, positions: np.ndarray):
        """Create the figure and one marker per body."""
        self.fig, self.ax = plt.subplots(figsize=self.figsize, dpi=self.dpi)
        self.ax.set_aspect('equal')
        self.ax.set_xlabel('X')
        self.ax.set_ylabel('Y')
        self.ax.set_title('N-body Simulation (2D)')
        self.ax.grid(True, alpha=0.3)

        extent = self.view_extent
        if self.box_half_extent is not None:
            h = self.box_half_extent
            self.ax.add_patch(Rectangle((-h, -h), 2 * h, 2 * h, fill=False, linestyle='--', alpha=0.5))
            extent = max(extent, h * 1.05)
        self.ax.set_xlim(-extent, extent)
        self.ax.set_ylim(-extent, extent)

        self.scatter = self.ax.scatter(
            positions[:, 0], positions[:, 1],
            c=body_colors(positions.shape[0]), s=self.marker_size,
        )
        if self.interactive:
            plt.show(block=False)
        self.initialized = True

    def _is_figure_open(self) -> bool:
        """Check if the figure window is still open."""
        if self.fig is None or not plt.fignum_exists(self.fig.number):
            self.initialized = False
            self.fig = None
            self.ax = None
            return False
        return True

    def render(self, positions: np.ndarray):
        """Render current frame."""
        positions = np.asarray(positions)
        if not self.initialized:
            self._initialize(positions)
        elif not self._is_figure_open():
            return

        if self.interactive:
            current_time = time.time()
            if (current_time - self.last_render_time) < self.frame_time:
                return
            self.last_render_time = current_time

        self.scatter.set_offsets(positions[:, :2])
        if self.interactive:
            self.fig.canvas.draw_idle()
            plt.pause(0.001)

    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")
        return figure_to_rgb(self.fig)

    def clear(self):
        """Clear the renderer."""
        if self.scatter is not None:
            self.scatter.set_offsets(np.empty((0, 2)))

    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.scatter = None
            self.initialized = False
