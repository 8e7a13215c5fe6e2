"""
Elevator Simulator - Core simulation engine

This package provides the tick-driven elevator state machine, the hall call
panels and screens around it, and the SimPy actors that drive it.

Building lives in simulator.core.building and is imported from there,
since it depends on the controller package.
"""

__version__ = "0.1.0"

from .core.elevator import Elevator
from .core.events import ElevatorEvent
from .core.call_panel import CallPanel
from .core.screen import Screen
from .core.passenger import Passenger
from .core.entity import Entity

from .interfaces.elevator_listener import IElevatorListener

from .infrastructure.message_broker import MessageBroker

__all__ = [
    'Elevator',
    'ElevatorEvent',
    'CallPanel',
    'Screen',
    'Passenger',
    'Entity',
    'IElevatorListener',
    'MessageBroker',
]
