"""Core simulation entities"""

from .entity import Entity
from .elevator import Elevator
from .events import ElevatorEvent
from .call_panel import CallPanel
from .screen import Screen
from .passenger import Passenger

__all__ = [
    'Entity',
    'Elevator',
    'ElevatorEvent',
    'CallPanel',
    'Screen',
    'Passenger',
]
