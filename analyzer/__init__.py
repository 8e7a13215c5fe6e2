"""
Elevator System Analyzer

This package provides statistical analysis and reporting tools
for elevator simulation data.

Components:
- Statistics: Records broker messages (trajectories, doors, hall calls)
- SimulationStatistics: Adds per-passenger metrics with "God's view"
"""

__version__ = "0.1.0"

from .statistics import Statistics
from .simulation_statistics import SimulationStatistics

__all__ = ['Statistics', 'SimulationStatistics']
