import random
import sys

import simpy

# Configuration
from config import load_simulation_config, SimulationConfig

# Simulator components
from simulator.infrastructure.message_broker import MessageBroker
from simulator.core.building import Building
from simulator.core.passenger import Passenger

# Analyzer
from analyzer.simulation_statistics import SimulationStatistics


def tick_driver(env, controller, tick_interval=1.0):
    """
    Host tick loop: advances every elevator one step per tick_interval.

    The elevators never schedule themselves. This process is the only thing
    that moves them.
    """
    while True:
        yield env.timeout(tick_interval)
        controller.progress()


def maintenance_scheduler(env, elevator, at):
    """Put an elevator on maintenance at simulation time `at`"""
    yield env.timeout(at)
    print(f"{env.now:.2f} [Maintenance] Taking {elevator.name} out of service.")
    elevator.set_to_maintenance()


def passenger_generator(env, building, statistics, generation_rate=0.05,
                        od_matrix=None, poll_interval=1.0):
    """
    Continuous passenger generation

    Args:
        generation_rate: Passengers per second (exponential inter-arrival times)
        od_matrix: Origin-Destination matrix (num_floors x num_floors). If None, uses uniform distribution.
        poll_interval: How often passengers look at the doors (seconds)
    """
    num_floors = building.num_floors
    if num_floors < 2 or generation_rate <= 0:
        print("--- Passenger Generation disabled ---")
        return

    print(f"--- Continuous Passenger Generation (Rate: {generation_rate} passengers/sec) ---")
    if od_matrix is not None:
        print(f"    Using OD matrix ({len(od_matrix)}x{len(od_matrix[0])}) for traffic pattern")
    else:
        print(f"    Using uniform distribution (no OD matrix)")

    passenger_id = 0
    base_names = ["Alice", "Bob", "Charlie", "David", "Eve", "Frank", "Grace", "Henry",
                  "Ivy", "Jack", "Kate", "Leo", "Mary", "Nick", "Olivia", "Paul"]

    while True:
        yield env.timeout(random.expovariate(generation_rate))

        passenger_id += 1
        name = f"{base_names[passenger_id % len(base_names)]}_{passenger_id}"
        arrival_floor, destination_floor = _choose_trip(num_floors, od_matrix)

        passenger = Passenger(env, name, building, arrival_floor, destination_floor,
                              poll_interval=poll_interval)
        statistics.register_passenger(passenger)


def _choose_trip(num_floors, od_matrix=None):
    """Pick (origin, destination) with origin != destination"""
    floors = range(num_floors)
    if od_matrix is not None and len(od_matrix) == num_floors:
        origin_weights = [sum(row) for row in od_matrix]
        if sum(origin_weights) > 0:
            arrival_floor = random.choices(floors, weights=origin_weights, k=1)[0]
            destination_weights = list(od_matrix[arrival_floor])
            destination_weights[arrival_floor] = 0.0
            if sum(destination_weights) > 0:
                destination_floor = random.choices(floors, weights=destination_weights, k=1)[0]
                return arrival_floor, destination_floor

    # Fallback: uniform random distribution
    arrival_floor = random.randrange(num_floors)
    destination_floor = random.randrange(num_floors)
    while destination_floor == arrival_floor:
        destination_floor = random.randrange(num_floors)
    return arrival_floor, destination_floor


def build_simulation(sim_config: SimulationConfig, verbose_broker=True):
    """
    Create the SimPy environment, broker, building and statistics for a config
    and register all processes.

    Returns:
        (env, building, statistics)
    """
    if sim_config.random_seed is not None:
        random.seed(sim_config.random_seed)
        print(f"Random seed fixed to {sim_config.random_seed} for reproducible results")
    else:
        print("Random seed not set - results will vary")

    env = simpy.Environment()
    broker = MessageBroker(env, verbose=verbose_broker)

    sim_stats = SimulationStatistics(env, broker.get_broadcast_pipe())
    env.process(sim_stats.start_listening())

    building = Building.from_config(sim_config, broker=broker)
    sim_stats.set_simulation_metadata({
        "num_floors": sim_config.building.num_floors,
        "elevators": [e.name for e in building.elevators],
        "tick_interval": sim_config.tick_interval,
    })

    env.process(tick_driver(env, building.controller, sim_config.tick_interval))

    for m in sim_config.maintenance:
        env.process(maintenance_scheduler(env, building.elevators[m.elevator - 1], m.at))

    env.process(passenger_generator(
        env, building, sim_stats,
        generation_rate=sim_config.traffic.passenger_generation_rate,
        od_matrix=sim_config.traffic.od_matrix,
        poll_interval=sim_config.traffic.poll_interval))

    return env, building, sim_stats


def run_simulation(sim_config_path="scenarios/simulation/default.yaml", sim_config=None,
                   plot=True, show_plot=True, event_log_path="simulation_log.jsonl"):
    """
    Set up and run the entire simulation

    Args:
        sim_config_path: Path to simulation configuration YAML file
        sim_config: SimulationConfig to use instead of loading sim_config_path
        plot: Save the trajectory diagram
        show_plot: Open the trajectory diagram window
        event_log_path: JSON Lines event log output (None to skip)

    Returns:
        (building, statistics)
    """
    print("--- Loading Configuration ---")
    if sim_config is None:
        sim_config = load_simulation_config(sim_config_path)
        print(f"Simulation Config: {sim_config_path}")
    else:
        sim_config.validate()

    print("\n--- Simulation Setup ---")
    env, building, sim_stats = build_simulation(sim_config)

    print("\n--- Simulation Start ---")
    env.run(until=sim_config.traffic.simulation_duration)
    print("\n--- Simulation End ---")

    for elevator in building.elevators:
        print(f"{elevator.name}: {elevator.get_message()}")
    unhandled = building.controller.get_unhandled_events()
    if unhandled:
        print(f"{len(unhandled)} hall call(s) still unhandled at the end of the run")

    if event_log_path:
        sim_stats.save_event_log(event_log_path)

    sim_stats.print_summary()
    sim_stats.print_passenger_metrics_summary()

    if plot:
        sim_stats.plot_trajectory_diagram(show=show_plot)

    return building, sim_stats


def main(argv=None):
    """Command line entry point: main.py [scenario name or simulation_config.yaml]"""
    argv = sys.argv[1:] if argv is None else argv
    sim_config_path = argv[0] if argv else "default"
    run_simulation(sim_config_path=sim_config_path)


if __name__ == '__main__':
    main()
