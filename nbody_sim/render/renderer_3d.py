"""3D renderer using matplotlib."""

import time
import numpy as np
import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401 (registers the 3d projection)
from matplotlib.figure import Figure
from typing import Optional, Tuple
from nbody_sim.render.base import Renderer, body_colors, figure_to_rgb


class Renderer3D(Renderer):
    """3D real-time renderer using matplotlib 3D."""

    def __init__(
        self,
        figsize: Tuple[int, int] = (8, 8),
        dpi: int = 100,
        view_extent: float = 3.0,
        marker_size: float = 20.0,
        elevation: float = 45.0,
        azimuth: float = -90.0,
        interactive: bool = True,
        target_fps: float = 30.0,
    ):
        """Initialize 3D renderer.

        Args:
            figsize: Figure size
            dpi: Dots per inch
            view_extent: Half-width of the visible cube
            marker_size: Scatter marker size
            elevation: Camera elevation angle (default looks down from above the z=0 plane)
            azimuth: Camera azimuth angle
            interactive: Show a window; False draws off-screen only
            target_fps: Frames faster than this are skipped when interactive
        """
        self.figsize = figsize
        self.dpi = dpi
        self.view_extent = view_extent
        self.marker_size = marker_size
        self.elevation = elevation
        self.azimuth = azimuth
        self.interactive = interactive

        self.fig: Optional[Figure] = None
        self.ax = None
        self.scatter = None
        self.initialized = False

        self.frame_time = 1.0 / target_fps
        self.last_render_time = 0.0

    def _initialize(self, positions: np.ndarray):
        self.fig = plt.figure(figsize=self.figsize, dpi=self.dpi)
        self.ax = self.fig.add_subplot(111, projection='3d')
        self.ax.set_xlabel('X')
        self.ax.set_ylabel('Y')
        self.ax.set_zlabel('Z')
        self.ax.set_title('N-body Simulation (3D)')
        e = self.view_extent
        self.ax.set_xlim(-e, e)
        self.ax.set_ylim(-e, e)
        self.ax.set_zlim(-e, e)
        self.ax.view_init(elev=self.elevation, azim=self.azimuth)

        self.scatter = self.ax.scatter(
            positions[:, 0], positions[:, 1], positions[:, 2],
            c=body_colors(positions.shape[0]), s=self.marker_size, depthshade=True,
        )
        if self.interactive:
            plt.show(block=False)
        self.initialized = True

    def render(self, positions: np.ndarray):
        """Render current frame."""
        positions = np.asarray(positions)
        if not self.initialized:
            self._initialize(positions)
        elif self.fig is None or not plt.fignum_exists(self.fig.number):
            return

        if self.interactive:
            current_time = time.time()
            if (current_time - self.last_render_time) < self.frame_time:
                return
            self.last_render_time = current_time

        self.scatter._offsets3d = (positions[:, 0], positions[:, 1], positions[:, 2])
        if self.interactive:
            self.fig.canvas.draw_idle()
            plt.pause(0.001)

    def capture_frame(self) -> np.ndarray:
        """Capture current frame as image array."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")
        return figure_to_rgb(self.fig)

    def set_view(self, elevation: float, azimuth: float):
        """Set camera view angles.

        Args:
            elevation: Elevation angle
            azimuth: Azimuth angle
        """
        self.elevation = elevation
        self.azimuth = azimuth
        if self.ax is not None:
            self.ax.view_init(elev=elevation, azim=azimuth)

    def clear(self):
        """Clear the renderer."""
        if self.scatter is not None:
            empty = np.empty(0)
            self.scatter._offsets3d = (empty, empty, empty)

    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.scatter = None
            self.initialized = False
