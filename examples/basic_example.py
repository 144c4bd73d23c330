"""Basic example of using the N-body simulator."""

from nbody_sim import SimulationConfig, Simulator


def main():
    """Run the bounded 2D reference configuration."""
    # 100 bodies in a unit disc, recentred and bounced inside [-3, 3]
    config = SimulationConfig.bounded_2d(seed=42)

    sim = Simulator(config)
    sim.initialize()

    print("Running simulation...")
    print(f"Initial energy: {sim.get_energy():.6f}")

    for step in range(500):
        sim.step()
        if step % 100 == 0:
            print(f"Step {step}: E = {sim.get_energy():.6f}, time = {sim.time:.3f}")

    print(f"Final energy: {sim.get_energy():.6f}")
    print(f"Total momentum: {sim.get_momentum()}")


if __name__ == "__main__":
    main()
