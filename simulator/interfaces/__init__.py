"""Interface definitions for simulator components"""

from .elevator_listener import IElevatorListener

__all__ = [
    'IElevatorListener',
]
