"""
Building - Wires elevators, call panels and screens to a controller

This module provides the Building class which manages:
- One call panel per floor, registered with the controller
- One screen per floor for each elevator, registered with the controller
- Elevator creation with the controller as listener
"""

from typing import Dict, List, Optional

from .call_panel import CallPanel
from .elevator import Elevator
from .screen import Screen
from controller.elevator_controller import ElevatorController


class Building:
    """
    Represents a building with floors numbered from 0 to num_floors - 1.

    The building is the assembler: it owns the call panels and screens and
    registers them with the controller, which only references them.
    """

    def __init__(self, num_floors: int, controller: ElevatorController = None):
        """
        Initialize building and register a call panel on every floor.

        Args:
            num_floors: Number of floors
            controller: Controller to wire everything to (a new one if None)
        """
        if num_floors < 1:
            raise ValueError("Building must have at least one floor")

        self.num_floors = num_floors
        self.controller = controller if controller is not None else ElevatorController()
        self.call_panels: List[CallPanel] = [CallPanel() for _ in range(num_floors)]
        self.screens: Dict[Elevator, List[Screen]] = {}

        for floor, panel in enumerate(self.call_panels):
            self.controller.add_call_panel(floor, panel)

    @classmethod
    def from_config(cls, sim_config, broker=None) -> 'Building':
        """
        Create a building and its elevators from a SimulationConfig.

        Args:
            sim_config: SimulationConfig instance
            broker: Optional MessageBroker for the controller
        """
        building = cls(sim_config.building.num_floors, ElevatorController(broker=broker))
        for i, initial_floor in enumerate(sim_config.get_initial_floors(), start=1):
            building.add_elevator(initial_floor, name=f"Elevator_{i}")
        return building

    def add_elevator(self, initial_floor: int = 0, name: str = None) -> Elevator:
        """
        Create an elevator, register it and give it one screen per floor.

        Args:
            initial_floor: Floor the elevator starts on
            name: Elevator name (auto-generated if None)

        Returns:
            The new Elevator
        """
        elevator = Elevator(self.controller, initial_floor, self.num_floors, name=name)
        screens = [Screen() for _ in range(self.num_floors)]
        for screen in screens:
            screen.set_text(elevator.get_message())

        self.controller.add_elevator(elevator)
        self.controller.add_elevator_screens(elevator, screens)
        self.screens[elevator] = screens
        return elevator

    @property
    def elevators(self) -> List[Elevator]:
        return self.controller.elevators

    def get_call_panel(self, floor: int) -> CallPanel:
        if not (0 <= floor < self.num_floors):
            raise ValueError(f"Floor {floor} out of range. Valid range: 0-{self.num_floors - 1}")
        return self.call_panels[floor]

    def get_screens(self, elevator: Elevator) -> List[Screen]:
        return self.screens.get(elevator, [])

    def find_open_elevator_at(self, floor: int) -> Optional[Elevator]:
        """First operational elevator standing at the floor with its doors open"""
        for elevator in self.elevators:
            if (elevator.current_floor == floor and elevator.doors_are_open
                    and not elevator.is_on_maintenance()):
                return elevator
        return None
