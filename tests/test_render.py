"""Tests for the off-screen renderers."""

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest
from nbody_sim.render import Renderer2D, Renderer3D, RenderManager
from nbody_sim.utils.config import SimulationConfig


def test_renderer_2d_capture():
    renderer = Renderer2D(figsize=(3, 3), dpi=50, box_half_extent=3.0, interactive=False)
    with pytest.raises(RuntimeError):
        renderer.capture_frame()

    positions = np.array([[0.0, 0.0], [1.0, -1.0], [2.5, 2.5]])
    renderer.render(positions)
    frame = renderer.capture_frame()

    assert frame.shape == (150, 150, 3)
    assert frame.dtype == np.uint8
    assert np.array_equal(renderer.scatter.get_offsets(), positions)

    renderer.clear()
    assert len(renderer.scatter.get_offsets()) == 0
    renderer.close()
    assert renderer.fig is None


def test_renderer_3d_capture():
    renderer = Renderer3D(figsize=(3, 3), dpi=50, interactive=False)
    positions = np.array([[0.0, 0.0, 0.0], [0.5, -0.5, 0.25]])

    renderer.render(positions)
    renderer.set_view(30.0, 10.0)
    frame = renderer.capture_frame()

    assert frame.shape == (150, 150, 3)
    assert frame.dtype == np.uint8
    renderer.close()


def test_render_manager_thins_frames():
    manager = RenderManager(dimensions=2, every=3, interactive=False)
    seen = []
    manager.renderer.render = seen.append

    for i in range(7):
        manager.render(np.full((1, 2), float(i)))

    assert [frame[0, 0] for frame in seen] == [0.0, 3.0, 6.0]
    manager.close()
    with pytest.raises(RuntimeError):
        manager.render(np.zeros((1, 2)))


def test_render_manager_for_config():
    bounded = RenderManager.for_config(SimulationConfig.bounded_2d(), interactive=False)
    unbounded = RenderManager.for_config(SimulationConfig.unbounded_3d(), interactive=False)

    assert isinstance(bounded.renderer, Renderer2D)
    assert bounded.renderer.box_half_extent == 3.0
    assert isinstance(unbounded.renderer, Renderer3D)

    with pytest.raises(ValueError):
        RenderManager(dimensions=4)
