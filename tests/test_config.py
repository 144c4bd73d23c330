"""Tests for configuration handling."""

import os
import tempfile
import pytest
from nbody_sim.utils.config import (
    SimulationConfig,
    load_config,
    save_config,
    variant_config,
)


def test_bounded_defaults():
    config = SimulationConfig.bounded_2d()

    assert config.dimensions == 2
    assert config.bounded is True
    assert config.half_extent == 3.0
    assert config.n_bodies == 100
    assert config.mass == 2.0
    assert config.velocity_scale == 0.002
    assert config.dt == 0.001
    assert config.integrator == "symplectic_euler"
    assert config.min_distance == 1.0
    assert config.min_eps == 1e-4


def test_unbounded_defaults_and_overrides():
    config = SimulationConfig.unbounded_3d(n_bodies=7)

    assert config.dimensions == 3
    assert config.bounded is False
    assert config.mass == 1.0
    assert config.velocity_scale == 0.02
    assert config.dt == 0.01
    assert config.n_bodies == 7


@pytest.mark.parametrize("overrides", [
    {"dimensions": 4},
    {"n_bodies": 0},
    {"dt": 0.0},
    {"mass": -1.0},
    {"velocity_scale": -0.1},
    {"half_extent": 0.0},
    {"min_distance": 0.001},
    {"dt": float("nan")},
    {"dt": "fast"},
    {"n_bodies": "ten"},
    {"n_bodies": None},
])
def test_invalid_config_raises(overrides):
    with pytest.raises(ValueError):
        SimulationConfig(**overrides)


def test_with_overrides_ignores_none():
    config = SimulationConfig.bounded_2d()

    updated = config.with_overrides(n_bodies=5, dt=None, seed=3)

    assert updated.n_bodies == 5
    assert updated.dt == config.dt
    assert updated.seed == 3
    assert config.n_bodies == 100


def test_variant_config():
    assert variant_config("unbounded").dimensions == 3
    assert variant_config("Bounded", seed=1).seed == 1
    with pytest.raises(ValueError):
        variant_config("toroidal")


@pytest.mark.parametrize("suffix", [".json", ".yaml", ".yml"])
def test_save_load_config(suffix):
    """Saving then loading gives back an equal config."""
    config = SimulationConfig.unbounded_3d(n_bodies=12, seed=42, integrator="euler")

    with tempfile.NamedTemporaryFile(mode='w', suffix=suffix, delete=False) as f:
        temp_path = f.name

    try:
        save_config(config, temp_path)
        assert load_config(temp_path) == config
    finally:
        if os.path.exists(temp_path):
            os.remove(temp_path)


def test_load_config_rejects_unknown_keys():
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        f.write("n_bodies: 10\ngravity: 9.81\n")
        temp_path = f.name

    try:
        with pytest.raises(ValueError, match="gravity"):
            load_config(temp_path)
    finally:
        os.remove(temp_path)


def test_unsupported_config_format():
    with tempfile.NamedTemporaryFile(mode='w', suffix='.toml', delete=False) as f:
        f.write("n_bodies = 10\n")
        temp_path = f.name

    try:
        with pytest.raises(ValueError):
            load_config(temp_path)
        with pytest.raises(ValueError):
            save_config(SimulationConfig(), temp_path)
    finally:
        os.remove(temp_path)


def test_load_yaml_with_exponent_notation():
    """PyYAML reads 1e-4 as a string; the config still gets floats."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        f.write("dimensions: 2\nmin_eps: 1e-4\ndt: 1e-3\nmass: 2\n")
        temp_path = f.name

    try:
        config = load_config(temp_path)
    finally:
        os.remove(temp_path)

    assert config.min_eps == 1e-4
    assert config.dt == 1e-3
    assert isinstance(config.mass, float)
    assert config == SimulationConfig.bounded_2d()
