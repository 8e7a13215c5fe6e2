"""
Elevator events raised by the hall call panels

An event is a floor request with a direction. It starts unhandled, sits in the
controller's event log and becomes handled at most once, when an elevator
accepts the floor.
"""

from dataclasses import dataclass, field
from typing import Optional, Any

DIRECTIONS = ("UP", "DOWN")


@dataclass(eq=False)
class ElevatorEvent:
    """
    Someone on a floor wants to go up or down

    Attributes:
        direction: 'UP' or 'DOWN'
        floor: Floor where the call panel was pressed
        created_at: Time the button was pressed
        handled_at: Time an elevator accepted the request (None while unhandled)
        elevator: Elevator bound to the request (None while unhandled)
    """
    direction: str
    floor: int
    created_at: float
    handled_at: Optional[float] = None
    elevator: Optional[Any] = field(default=None, repr=False)

    def __post_init__(self):
        if self.direction not in DIRECTIONS:
            raise ValueError(f"direction must be 'UP' or 'DOWN', got {self.direction!r}")

    @classmethod
    def wants_up(cls, floor: int, created_at: float) -> 'ElevatorEvent':
        """Someone on the floor pushed the up button"""
        return cls(direction="UP", floor=floor, created_at=created_at)

    @classmethod
    def wants_down(cls, floor: int, created_at: float) -> 'ElevatorEvent':
        """Someone on the floor pushed the down button"""
        return cls(direction="DOWN", floor=floor, created_at=created_at)

    def is_handled(self) -> bool:
        return self.handled_at is not None

    def handle(self, elevator, handled_at: float):
        """
        Bind the event to the elevator that accepted it

        Handling happens once. Later calls leave the event untouched.
        """
        if self.is_handled():
            return
        self.elevator = elevator
        self.handled_at = handled_at

    def get_wait_time(self) -> Optional[float]:
        """Time from button press to assignment, or None if still unhandled"""
        if self.handled_at is None:
            return None
        return self.handled_at - self.created_at

    def to_dict(self) -> dict:
        return {
            "direction": self.direction,
            "floor": self.floor,
            "created_at": self.created_at,
            "handled_at": self.handled_at,
            "elevator": getattr(self.elevator, "name", None),
        }
