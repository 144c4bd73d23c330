"""Utility functions for reproducibility and configuration."""

from nbody_sim.utils.reproducibility import make_rng
from nbody_sim.utils.config import (
    load_config,
    save_config,
    variant_config,
    SimulationConfig,
)

__all__ = [
    "make_rng",
    "load_config",
    "save_config",
    "variant_config",
    "SimulationConfig",
]
