"""
Elevator Listener Interface

Defines the notifications an elevator sends to the single object that listens to it.
"""

from abc import ABC, abstractmethod


class IElevatorListener(ABC):
    """
    Interface for objects that listen to an elevator's state changes

    Every elevator holds exactly one listener reference (normally the
    ElevatorController). The elevator does not own its listener.

    Design Philosophy:
    - Synchronous, fire-and-forget notifications
    - Return values are ignored by the elevator
    - One listener per elevator, no subscriber fan-out
    """

    @abstractmethod
    def on_arriving_floor(self, elevator, floor: int) -> None:
        """
        Called when the elevator reaches one of its pending stops

        Args:
            elevator: Elevator that arrived
            floor: Floor that was removed from the pending stops
        """
        pass

    @abstractmethod
    def on_becoming_free(self, elevator) -> None:
        """
        Called when the elevator has no pending stops left and its doors have closed

        Args:
            elevator: Elevator that became free
        """
        pass

    @abstractmethod
    def on_change_doors(self, elevator, floor: int, doors_are_open: bool) -> None:
        """
        Called after the doors open or close

        Args:
            elevator: Elevator whose doors changed
            floor: Floor where the doors changed
            doors_are_open: New door state
        """
        pass

    @abstractmethod
    def on_change_state(self, elevator, is_operational: bool) -> None:
        """
        Called when the elevator's operational state changes (e.g. maintenance)

        Args:
            elevator: Elevator whose state changed
            is_operational: False once the elevator is on maintenance
        """
        pass

    @abstractmethod
    def on_change_floor(self, elevator, new_floor: int) -> None:
        """
        Called after the elevator moved one floor up or down

        Args:
            elevator: Elevator that moved
            new_floor: Floor the elevator is now on
        """
        pass
