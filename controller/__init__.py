"""
Elevator Controller

This package provides the dispatch controller that routes hall calls
to elevators and keeps the floor screens up to date.
"""

__version__ = "0.1.0"

from .elevator_controller import ElevatorController

__all__ = ['ElevatorController']
