import itertools
from typing import List, Optional

from ..interfaces.elevator_listener import IElevatorListener


class Elevator:
    """
    Elevator car advanced by discrete, externally triggered ticks

    The elevator does not schedule itself. Each call to progress() performs
    at most one atomic transition (close doors, arrive and open doors, or move
    one floor). State changes are reported synchronously to the bound listener.

    Scheduling policy (single-direction sweep):
    - A free elevator accepts any floor in range
    - Once moving, it only accepts floors ahead of it in its direction,
      its current floor, or floors that are already pending
    - It accepts the opposite direction again only after the sweep is done
    """

    # Elevator name counter shared across all instances
    _elevator_id_counter = itertools.count(1)

    def __init__(self, listener: IElevatorListener, current_floor: int, floor_count: int, name: str = None):
        """
        Args:
            listener: Object notified of state changes (held by reference, not owned)
            current_floor: Initial floor (0-based)
            floor_count: Number of floors served, fixed for the elevator's lifetime
            name: Elevator name. Auto-generated if not specified.
        """
        if floor_count < 1:
            raise ValueError(f"floor_count must be at least 1, got {floor_count}")
        if not (0 <= current_floor < floor_count):
            raise ValueError(f"current_floor must be between 0 and {floor_count - 1}, got {current_floor}")

        self.listener = listener
        self.name: str = name if name is not None else f"Elevator_{next(self._elevator_id_counter)}"
        self.floor_count: int = floor_count
        self.current_floor: int = current_floor
        self.moving_to_floors = set()
        self.on_maintenance = False
        self.doors_are_open = False

    def __repr__(self):
        return f"Elevator(name={self.name!r}, floor={self.current_floor}, pending={self.get_pending_stops()})"

    # --- Public interface ---

    def set_to_maintenance(self):
        """Put the elevator on maintenance. There is no way back."""
        if self.on_maintenance:
            return
        self.on_maintenance = True
        self.listener.on_change_state(self, False)

    def is_on_maintenance(self) -> bool:
        return self.on_maintenance

    def is_free(self) -> bool:
        """Free means nothing scheduled and the doors closed"""
        return not self.moving_to_floors and not self.doors_are_open

    def move_to_floor(self, floor: int) -> bool:
        """
        Request a future stop at the given floor

        Args:
            floor: Target floor

        Returns:
            bool: True if the stop is (or already was) pending, False if refused
        """
        if self._can_move_to_floor(floor):
            self.moving_to_floors.add(floor)
            return True
        return False

    def click_floor(self, floor: int):
        """
        Press a floor button inside the cab

        Clicks the elevator can't serve in its current sweep are discarded,
        e.g. a floor above the car while it is going down.
        """
        self.move_to_floor(floor)

    def get_message(self) -> str:
        """Status text shown on the floor screens"""
        if self.is_on_maintenance():
            return "On maintenance."
        doors = f"Doors are {'open' if self.doors_are_open else 'closed'}."

        if self.is_going_down():
            return f"Going down, on floor {self.current_floor}. {doors}"
        elif self.is_going_up():
            return f"Going up, on floor {self.current_floor}. {doors}"
        return f"Standing at floor {self.current_floor}. {doors}"

    def is_going_up(self) -> bool:
        if not self.moving_to_floors:
            return False
        return max(self.moving_to_floors) > self.current_floor

    def is_going_down(self) -> bool:
        if not self.moving_to_floors:
            return False
        return min(self.moving_to_floors) < self.current_floor

    def get_direction(self) -> str:
        """
        Returns:
            'DOWN', 'UP' or 'NO_DIRECTION'
        """
        if self.is_going_down():
            return "DOWN"
        if self.is_going_up():
            return "UP"
        return "NO_DIRECTION"

    def get_pending_stops(self) -> List[int]:
        """Sorted copy of the pending stops"""
        return sorted(self.moving_to_floors)

    def get_status(self) -> dict:
        """Snapshot of the elevator for status reports"""
        return {
            "elevator_name": self.name,
            "current_floor": self.current_floor,
            "floor_count": self.floor_count,
            "direction": self.get_direction(),
            "doors_open": self.doors_are_open,
            "on_maintenance": self.on_maintenance,
            "pending_stops": self.get_pending_stops(),
            "message": self.get_message(),
        }

    def progress(self):
        """
        Advance one tick

        Precedence (first match wins, one action per tick):
        1. Open doors close. The elevator may become free.
        2. Current floor is a pending stop: arrive and open the doors.
        3. Going up: move one floor up.
        4. Going down: move one floor down.
        5. Nothing to do.
        """
        if self.doors_are_open:
            self._close_doors()
            if self.is_free():
                self.listener.on_becoming_free(self)
            return

        # Doors are always closed from here on
        goes_up = self.is_going_up()
        goes_down = self.is_going_down()

        if self.current_floor in self.moving_to_floors:
            self.moving_to_floors.discard(self.current_floor)
            self.listener.on_arriving_floor(self, self.current_floor)
            self._open_doors()
            return

        if goes_up and self._can_move_to_floor(self.current_floor + 1):
            self._increase_floor()
            self.listener.on_change_floor(self, self.current_floor)
        elif goes_down and self._can_move_to_floor(self.current_floor - 1):
            self._decrease_floor()
            self.listener.on_change_floor(self, self.current_floor)

    # --- Internal helpers ---

    def _can_move_to_floor(self, floor: int) -> bool:
        if self.is_on_maintenance():
            return False

        # Don't go below the ground floor or through the roof
        if floor < 0 or floor >= self.floor_count:
            return False

        # Nothing scheduled, any direction is fine
        if not self.moving_to_floors:
            return True

        # Already going there eventually
        if floor in self.moving_to_floors:
            return True

        if self.current_floor < floor and self.is_going_up():
            return True
        elif self.current_floor > floor and self.is_going_down():
            return True
        elif self.current_floor == floor:
            return True
        return False

    def _open_doors(self):
        self.doors_are_open = True
        self.listener.on_change_doors(self, self.current_floor, True)

    def _close_doors(self):
        self.doors_are_open = False
        self.listener.on_change_doors(self, self.current_floor, False)

    def _increase_floor(self):
        self.current_floor += 1

    def _decrease_floor(self):
        self.current_floor -= 1
