"""CLI main entry point."""

import argparse
import logging
import sys
import numpy as np
from nbody_sim.physics.integrators import INTEGRATORS
from nbody_sim.physics.simulator import Simulator
from nbody_sim.utils.config import VARIANTS, load_config, save_config, variant_config


def build_config(args):
    """Variant defaults, then the config file, then explicit flags."""
    if args.config:
        config = load_config(args.config)
    else:
        config = variant_config(args.variant)
    return config.with_overrides(
        n_bodies=args.bodies,
        dt=args.dt,
        mass=args.mass,
        integrator=args.integrator,
        seed=args.seed,
    )


def print_row(step, time, K, U, E, P, dE):
    print(f"{step:<8} {time:<10.4f} {K:<14.6e} {U:<14.6e} {E:<14.6e} {P:<12.3e} {dE:<10.4f}%")


def run_simulation(args):
    """Run a simulation."""
    config = build_config(args)

    if args.save_config:
        save_config(config, args.save_config)
        print(f"Config saved to {args.save_config}")

    sim = Simulator(config)
    sim.initialize()

    renderer = None
    if args.render:
        from nbody_sim.render.manager import RenderManager
        renderer = RenderManager.for_config(config, every=args.render_every)
        sim.on_step_callback = renderer.render

    variant = "bounded" if config.bounded else "unbounded"
    print(f"Running simulation: {variant} {config.dimensions}D with {config.n_bodies} bodies")
    print(f"Integrator: {sim.integrator.name}, dt: {config.dt}, mass: {config.mass}, seed: {config.seed}")

    diagnostics = sim.diagnostics
    bodies = sim.state.bodies
    K0, U0, E0 = diagnostics.compute_energies(bodies)
    P0 = float(np.linalg.norm(diagnostics.total_momentum(bodies)))

    print(f"{'Step':<8} {'Time':<10} {'K':<14} {'U':<14} {'E':<14} {'|P|':<12} {'dE/E0':<10}")
    print("-" * 90)
    print_row(0, 0.0, K0, U0, E0, P0, 0.0)

    try:
        for _ in range(args.steps):
            sim.step()
            if args.debug_every and sim.step_count % args.debug_every == 0:
                K, U, E = diagnostics.compute_energies(bodies)
                P = float(np.linalg.norm(diagnostics.total_momentum(bodies)))
                dE = (E - E0) / abs(E0) * 100 if abs(E0) > 0 else 0.0
                print_row(sim.step_count, sim.time, K, U, E, P, dE)
    finally:
        if renderer:
            renderer.close()

    print("Simulation complete!")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="N-body Simulator - pairwise gravitational point masses")

    # Simulation parameters
    parser.add_argument('--variant', type=str, default='bounded',
                        choices=list(VARIANTS.keys()),
                        help='Reference configuration: bounded 2D box or unbounded 3D (default: bounded)')
    parser.add_argument('--config', type=str, default=None,
                        help='Load configuration from a .json or .yaml file (replaces --variant)')
    parser.add_argument('--bodies', type=int, default=None,
                        help='Number of bodies (default: 100)')
    parser.add_argument('--steps', type=int, default=1000,
                        help='Number of simulation steps')
    parser.add_argument('--dt', type=float, default=None,
                        help='Time step (default: 0.001 bounded, 0.01 unbounded)')
    parser.add_argument('--mass', type=float, default=None,
                        help='Mass of every body (default: 2.0 bounded, 1.0 unbounded)')
    parser.add_argument('--integrator', type=str, default=None,
                        choices=list(INTEGRATORS.keys()),
                        help='Numerical integrator (default: symplectic_euler)')
    parser.add_argument('--debug-every', type=int, default=100,
                        help='Print a diagnostics row every N steps (0 disables)')

    # Rendering
    parser.add_argument('--render', action='store_true',
                        help='Enable real-time rendering')
    parser.add_argument('--render-every', type=int, default=1,
                        help='Render every N steps')

    # Reproducibility
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducibility')
    parser.add_argument('--save-config', type=str, default=None,
                        help='Save the effective configuration to a .json or .yaml file')

    parser.add_argument('--log-level', type=str, default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: WARNING)')
    return parser


def main(argv=None):
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.steps < 0:
        parser.error("--steps must be non-negative")

    try:
        run_simulation(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
