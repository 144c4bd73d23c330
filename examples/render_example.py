"""Example with real-time rendering."""

from nbody_sim import SimulationConfig, Simulator
from nbody_sim.render.manager import RenderManager


def main():
    """Run the unbounded 3D configuration with a live view."""
    config = SimulationConfig.unbounded_3d(seed=123)

    sim = Simulator(config)
    sim.initialize()

    # The renderer only ever sees position snapshots
    renderer = RenderManager.for_config(config, every=2)
    sim.on_step_callback = renderer.render

    print("Running simulation with rendering...")
    print("Close the matplotlib window to stop.")

    try:
        sim.run(2000)
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
    finally:
        renderer.close()
        print("Simulation complete!")


if __name__ == "__main__":
    main()
