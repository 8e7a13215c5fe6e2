"""
Passenger workflow tests (SimPy)

The tick driver from main.py advances the elevators once per second and
passengers look at the doors once per second.
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import pytest
import simpy

from controller.elevator_controller import ElevatorController
from main import maintenance_scheduler, tick_driver
from simulator.core.building import Building
from simulator.core.passenger import Passenger


def create_simulation(initial_floor, num_floors=8):
    env = simpy.Environment()
    controller = ElevatorController(clock=lambda: env.now)
    building = Building(num_floors, controller)
    elevator = building.add_elevator(initial_floor)
    env.process(tick_driver(env, controller, tick_interval=1.0))
    return env, building, elevator


def test_passenger_rides_to_destination():
    env, building, elevator = create_simulation(initial_floor=0)
    passenger = Passenger(env, "Alice", building, arrival_floor=0, destination_floor=3)

    env.run(until=20)

    assert passenger.is_arrived()
    assert passenger.get_state() == "ARRIVED"
    assert passenger.boarded_elevator_name == elevator.name
    assert passenger.rejected_boardings == 0
    assert passenger.hall_calls_made == 1
    assert passenger.get_waiting_time() >= 0
    assert passenger.get_riding_time() > 0
    assert passenger.get_total_journey_time() == pytest.approx(
        passenger.get_waiting_time() + passenger.get_riding_time())
    assert elevator.current_floor == 3


def test_passenger_steps_out_of_a_car_going_the_other_way():
    env, building, elevator = create_simulation(initial_floor=4)
    # Car is committed to go down to floor 0 and stops here first
    elevator.move_to_floor(0)
    elevator.move_to_floor(4)

    passenger = Passenger(env, "Bob", building, arrival_floor=4, destination_floor=6)

    env.run(until=40)

    assert passenger.rejected_boardings == 1
    assert passenger.hall_calls_made == 2
    assert passenger.is_arrived()
    assert elevator.current_floor == 6
    assert building.controller.get_unhandled_events() == []


def test_passenger_cannot_be_on_destination_already():
    env, building, _ = create_simulation(initial_floor=0)
    with pytest.raises(ValueError):
        Passenger(env, "Carol", building, arrival_floor=2, destination_floor=2)


def test_passenger_waits_while_no_car_is_available():
    env, building, elevator = create_simulation(initial_floor=0)
    elevator.set_to_maintenance()
    passenger = Passenger(env, "Dave", building, arrival_floor=0, destination_floor=5)

    env.run(until=10)

    assert passenger.get_state() == "WAITING"
    assert passenger.get_waiting_time() is None
    assert len(building.controller.get_unhandled_events()) == 1


def test_passenger_calls_again_when_refusing_car_goes_on_maintenance():
    env = simpy.Environment()
    controller = ElevatorController(clock=lambda: env.now)
    building = Building(8, controller)
    refusing = building.add_elevator(4)
    idle = building.add_elevator(7)
    env.process(tick_driver(env, controller, tick_interval=1.0))

    # Car stops here on its way down to the lobby
    refusing.move_to_floor(0)
    refusing.move_to_floor(4)

    passenger = Passenger(env, "Bob", building, arrival_floor=4, destination_floor=6)
    # Broken down right after turning the passenger away, with a stop still pending
    env.process(maintenance_scheduler(env, refusing, at=1.5))

    env.run(until=60)

    assert refusing.is_on_maintenance()
    assert refusing.current_floor == 4
    assert refusing.moving_to_floors == {0}
    assert passenger.rejected_boardings == 1
    assert passenger.hall_calls_made == 2
    assert passenger.is_arrived()
    assert passenger.boarded_elevator_name == idle.name
    assert idle.current_floor == 6
    assert controller.get_unhandled_events() == []
