"""Configuration management."""

import json
import math
import yaml
from typing import Optional
from pathlib import Path
from dataclasses import dataclass, asdict, fields, replace


@dataclass
class SimulationConfig:
    """Simulation configuration.

    Defaults describe the bounded 2D variant; use ``unbounded_3d()`` for the
    free-drifting 3D one.
    """
    # Domain
    dimensions: int = 2
    bounded: bool = True
    half_extent: float = 3.0

    # Bodies
    n_bodies: int = 100
    mass: float = 2.0
    velocity_scale: float = 0.002

    # Stepping
    dt: float = 0.001
    integrator: str = "symplectic_euler"

    # Force law floors
    min_distance: float = 1.0
    min_eps: float = 1e-4

    # Reproducibility
    seed: Optional[int] = None

    def __post_init__(self):
        # YAML 1.1 reads "1e-4" as a string
        for name in ("half_extent", "mass", "velocity_scale", "dt", "min_distance", "min_eps"):
            value = getattr(self, name)
            try:
                setattr(self, name, float(value))
            except (TypeError, ValueError):
                raise ValueError(f"{name} must be a number, got {value!r}") from None
        if self.dimensions not in (2, 3):
            raise ValueError(f"dimensions must be 2 or 3, got {self.dimensions}")
        if (not isinstance(self.n_bodies, (int, float)) or not math.isfinite(self.n_bodies)
                or int(self.n_bodies) != self.n_bodies or self.n_bodies < 1):
            raise ValueError(f"n_bodies must be a positive integer, got {self.n_bodies!r}")
        self.n_bodies = int(self.n_bodies)
        for name in ("dt", "mass", "min_distance", "min_eps"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"{name} must be positive and finite, got {value}")
        if not math.isfinite(self.velocity_scale) or self.velocity_scale < 0:
            raise ValueError(f"velocity_scale must be non-negative, got {self.velocity_scale}")
        if self.bounded and (not math.isfinite(self.half_extent) or self.half_extent <= 0):
            raise ValueError(f"half_extent must be positive for a bounded domain, got {self.half_extent}")
        if math.sqrt(self.min_eps) > self.min_distance:
            raise ValueError("sqrt(min_eps) must not exceed min_distance")

    @classmethod
    def bounded_2d(cls, **overrides) -> "SimulationConfig":
        """2D disc recentred into a reflecting [-3, 3] box."""
        return cls(**overrides)

    @classmethod
    def unbounded_3d(cls, **overrides) -> "SimulationConfig":
        """3D ball drifting in an open domain."""
        params = dict(
            dimensions=3,
            bounded=False,
            mass=1.0,
            velocity_scale=0.02,
            dt=0.01,
        )
        params.update(overrides)
        return cls(**params)

    def with_overrides(self, **overrides) -> "SimulationConfig":
        """Return a copy with the non-None overrides applied."""
        overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **overrides)


VARIANTS = {
    "bounded": SimulationConfig.bounded_2d,
    "unbounded": SimulationConfig.unbounded_3d,
}


def variant_config(name: str, **overrides) -> SimulationConfig:
    """Get the reference configuration for a named variant."""
    factory = VARIANTS.get(name.lower())
    if factory is None:
        raise ValueError(f"Unknown variant: {name}. Available: {list(VARIANTS.keys())}")
    return factory(**overrides)


def load_config(config_path: str) -> SimulationConfig:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json, .yaml or .yml)

    Returns:
        SimulationConfig object
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f)
        elif config_path.suffix == '.json':
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config format: {config_path.suffix}. Use .json or .yaml")

    data = data or {}
    known = {field.name for field in fields(SimulationConfig)}
    unknown = set(data) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")
    return SimulationConfig(**data)


def save_config(config: SimulationConfig, output_path: str):
    """Save configuration to file.

    Args:
        config: SimulationConfig object
        output_path: Output file path (.json, .yaml or .yml)
    """
    output_path = Path(output_path)
    data = asdict(config)

    if output_path.suffix not in ('.json', '.yaml', '.yml'):
        raise ValueError(f"Unsupported config format: {output_path.suffix}. Use .json or .yaml")

    with open(output_path, 'w') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
