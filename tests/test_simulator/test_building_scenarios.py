"""
Integration scenarios: call panels, controller, elevator and screens together

8 floors, one elevator, one call panel and one screen per floor.
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import pytest

from simulator.core.building import Building


def create_test_elevator(current_floor=4, floor_count=8):
    """Create a building with one elevator wired to its controller"""
    building = Building(floor_count)
    elevator = building.add_elevator(current_floor)
    return building, elevator


def run_ticks(elevator, expected_messages):
    for expected in expected_messages:
        elevator.progress()
        assert elevator.get_message() == expected


def test_elevator_on_maintenance_ignores_call_panels():
    building, elevator = create_test_elevator(current_floor=4)
    elevator.set_to_maintenance()
    assert elevator.get_message() == "On maintenance."

    building.get_call_panel(0).click_up()
    assert elevator.get_message() == "On maintenance."
    assert len(building.controller.get_unhandled_events()) == 1


def test_elevator_moves_to_bottom_floor_and_opens_the_doors():
    building, elevator = create_test_elevator(current_floor=4)
    assert elevator.get_message() == "Standing at floor 4. Doors are closed."

    building.get_call_panel(0).click_up()
    assert elevator.get_message() == "Going down, on floor 4. Doors are closed."

    run_ticks(elevator, [
        "Going down, on floor 3. Doors are closed.",
        "Going down, on floor 2. Doors are closed.",
        "Going down, on floor 1. Doors are closed.",
        "Standing at floor 0. Doors are closed.",
        "Standing at floor 0. Doors are open.",
    ])


def test_elevator_goes_from_bottom_floor_to_third_floor():
    building, elevator = create_test_elevator(current_floor=0)
    assert elevator.get_message() == "Standing at floor 0. Doors are closed."

    building.get_call_panel(0).click_up()
    elevator.progress()
    assert elevator.get_message() == "Standing at floor 0. Doors are open."

    elevator.click_floor(3)
    run_ticks(elevator, [
        "Going up, on floor 0. Doors are closed.",
        "Going up, on floor 1. Doors are closed.",
        "Going up, on floor 2. Doors are closed.",
        "Standing at floor 3. Doors are closed.",
        "Standing at floor 3. Doors are open.",
    ])


def test_travels_to_sixth_and_picks_up_someone_on_third_going_to_fifth():
    building, elevator = create_test_elevator(current_floor=0)
    assert elevator.get_message() == "Standing at floor 0. Doors are closed."

    building.get_call_panel(0).click_up()
    elevator.progress()
    assert elevator.get_message() == "Standing at floor 0. Doors are open."

    # Person on floor 0 steps in and clicks floor 6
    elevator.click_floor(6)

    # Someone on floor 3 calls up
    building.get_call_panel(3).click_up()

    run_ticks(elevator, [
        "Going up, on floor 0. Doors are closed.",
        "Going up, on floor 1. Doors are closed.",
        "Going up, on floor 2. Doors are closed.",
        "Going up, on floor 3. Doors are closed.",
        "Going up, on floor 3. Doors are open.",
    ])

    # Person on floor 3 steps in and clicks floor 5
    elevator.click_floor(5)

    run_ticks(elevator, [
        "Going up, on floor 3. Doors are closed.",
        "Going up, on floor 4. Doors are closed.",
        "Going up, on floor 5. Doors are closed.",
        "Going up, on floor 5. Doors are open.",
        "Going up, on floor 5. Doors are closed.",
        "Standing at floor 6. Doors are closed.",
        "Standing at floor 6. Doors are open.",
        "Standing at floor 6. Doors are closed.",
    ])
    assert elevator.is_free()


def test_someone_travels_from_third_to_ground_floor():
    building, elevator = create_test_elevator(current_floor=0)
    assert elevator.get_message() == "Standing at floor 0. Doors are closed."

    building.get_call_panel(3).click_up()
    run_ticks(elevator, [
        "Going up, on floor 1. Doors are closed.",
        "Going up, on floor 2. Doors are closed.",
        "Standing at floor 3. Doors are closed.",
        "Standing at floor 3. Doors are open.",
    ])

    # Someone on floor 3 hops in and clicks floor 0
    elevator.click_floor(0)
    run_ticks(elevator, [
        "Going down, on floor 3. Doors are closed.",
        "Going down, on floor 2. Doors are closed.",
        "Going down, on floor 1. Doors are closed.",
        "Standing at floor 0. Doors are closed.",
        "Standing at floor 0. Doors are open.",
        "Standing at floor 0. Doors are closed.",
    ])


def test_screens_follow_the_elevator():
    building, elevator = create_test_elevator(current_floor=2)
    screens = building.get_screens(elevator)
    assert len(screens) == 8
    assert all(s.get_text() == "Standing at floor 2. Doors are closed." for s in screens)

    building.get_call_panel(3).click_down()
    elevator.progress()
    assert all(s.get_text() == "Standing at floor 3. Doors are closed." for s in screens)
    elevator.progress()
    assert all(s.get_text() == "Standing at floor 3. Doors are open." for s in screens)
    elevator.progress()
    assert all(s.get_text() == "Standing at floor 3. Doors are closed." for s in screens)

    elevator.set_to_maintenance()
    assert all(s.get_text() == "On maintenance." for s in screens)


def test_screens_belong_to_the_elevator_not_its_name():
    building = Building(8)
    first = building.add_elevator(0, name="Car")
    second = building.add_elevator(5, name="Car")

    first_screens = building.get_screens(first)
    second_screens = building.get_screens(second)
    assert first_screens is not second_screens
    assert all(s.get_text() == "Standing at floor 0. Doors are closed." for s in first_screens)
    assert all(s.get_text() == "Standing at floor 5. Doors are closed." for s in second_screens)

    second.set_to_maintenance()
    assert all(s.get_text() == "Standing at floor 0. Doors are closed." for s in first_screens)
    assert all(s.get_text() == "On maintenance." for s in second_screens)


def test_building_validation():
    with pytest.raises(ValueError):
        Building(0)
    building, _ = create_test_elevator()
    with pytest.raises(ValueError):
        building.get_call_panel(8)


def test_find_open_elevator_at():
    building, elevator = create_test_elevator(current_floor=1)
    assert building.find_open_elevator_at(1) is None
    building.get_call_panel(1).click_up()
    elevator.progress()
    assert building.find_open_elevator_at(1) is elevator
    assert building.find_open_elevator_at(2) is None

    elevator.set_to_maintenance()
    assert building.find_open_elevator_at(1) is None
