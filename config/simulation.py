"""
Simulation Configuration

Building, elevator, traffic and maintenance settings for a simulation run.
Floors are numbered from 0.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class BuildingConfig:
    """Building specifications"""
    num_floors: int = 8
    lobby_floor: int = 0

    def __post_init__(self):
        if self.num_floors < 1:
            raise ValueError("num_floors must be at least 1")
        if not (0 <= self.lobby_floor < self.num_floors):
            raise ValueError(f"lobby_floor must be between 0 and {self.num_floors - 1}")


@dataclass
class ElevatorConfig:
    """Elevator specifications"""
    num_elevators: int = 1
    initial_floors: Optional[List[int]] = None  # None = every car starts at the lobby

    def __post_init__(self):
        if self.num_elevators < 1:
            raise ValueError("num_elevators must be at least 1")
        if self.initial_floors is not None:
            if len(self.initial_floors) != self.num_elevators:
                raise ValueError(f"initial_floors list length ({len(self.initial_floors)}) must match num_elevators ({self.num_elevators})")


@dataclass
class TrafficConfig:
    """Traffic pattern configuration"""
    simulation_duration: float = 300.0  # seconds
    passenger_generation_rate: float = 0.05  # passengers per second
    od_matrix: Optional[List[List[float]]] = None  # Origin-Destination matrix
    poll_interval: float = 1.0  # how often passengers check the doors (seconds)

    def __post_init__(self):
        if self.simulation_duration <= 0:
            raise ValueError("simulation_duration must be positive")
        if self.passenger_generation_rate < 0:
            raise ValueError("passenger_generation_rate cannot be negative")
        if self.poll_interval <= 0:
            raise ValueError("poll_interval must be positive")

        if self.od_matrix is not None:
            if not all(isinstance(row, list) for row in self.od_matrix):
                raise ValueError("od_matrix must be a list of lists")
            if any(len(row) != len(self.od_matrix) for row in self.od_matrix):
                raise ValueError("od_matrix must be square")


@dataclass
class MaintenanceConfig:
    """Puts one elevator on maintenance at a given time"""
    elevator: int  # 1-based elevator number
    at: float  # simulation time (seconds)

    def __post_init__(self):
        if self.elevator < 1:
            raise ValueError("maintenance.elevator must be at least 1")
        if self.at < 0:
            raise ValueError("maintenance.at cannot be negative")


@dataclass
class SimulationConfig:
    """
    Complete simulation configuration

    Combines building, elevator, traffic and maintenance settings.
    """
    building: BuildingConfig = field(default_factory=BuildingConfig)
    elevator: ElevatorConfig = field(default_factory=ElevatorConfig)
    traffic: TrafficConfig = field(default_factory=TrafficConfig)
    maintenance: List[MaintenanceConfig] = field(default_factory=list)

    # Simulation control
    tick_interval: float = 1.0  # simulation seconds between two elevator ticks
    random_seed: Optional[int] = None

    def __post_init__(self):
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive")

    @classmethod
    def from_dict(cls, data: dict) -> 'SimulationConfig':
        """Create SimulationConfig from dictionary"""
        sim_data = data.get('simulation', data)

        building_data = sim_data.get('building', {})
        building = BuildingConfig(
            num_floors=building_data.get('num_floors', 8),
            lobby_floor=building_data.get('lobby_floor', 0)
        )

        elevator_data = sim_data.get('elevator', {})
        elevator = ElevatorConfig(
            num_elevators=elevator_data.get('num_elevators', 1),
            initial_floors=elevator_data.get('initial_floors')
        )

        traffic_data = sim_data.get('traffic', {})
        traffic = TrafficConfig(
            simulation_duration=traffic_data.get('simulation_duration', 300.0),
            passenger_generation_rate=traffic_data.get('passenger_generation_rate', 0.05),
            od_matrix=traffic_data.get('od_matrix'),
            poll_interval=traffic_data.get('poll_interval', 1.0)
        )

        maintenance = [
            MaintenanceConfig(elevator=m['elevator'], at=m['at'])
            for m in sim_data.get('maintenance') or []
        ]

        return cls(
            building=building,
            elevator=elevator,
            traffic=traffic,
            maintenance=maintenance,
            tick_interval=sim_data.get('tick_interval', 1.0),
            random_seed=sim_data.get('random_seed')
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        result: Dict[str, Any] = {
            'simulation': {
                'building': {
                    'num_floors': self.building.num_floors,
                    'lobby_floor': self.building.lobby_floor
                },
                'elevator': {
                    'num_elevators': self.elevator.num_elevators,
                    'initial_floors': self.elevator.initial_floors
                },
                'traffic': {
                    'simulation_duration': self.traffic.simulation_duration,
                    'passenger_generation_rate': self.traffic.passenger_generation_rate,
                    'od_matrix': self.traffic.od_matrix,
                    'poll_interval': self.traffic.poll_interval
                },
                'maintenance': [
                    {'elevator': m.elevator, 'at': m.at} for m in self.maintenance
                ],
                'tick_interval': self.tick_interval
            }
        }

        if self.random_seed is not None:
            result['simulation']['random_seed'] = self.random_seed

        return result

    def get_initial_floors(self) -> List[int]:
        """Starting floor of each elevator, in registration order"""
        if self.elevator.initial_floors is not None:
            return list(self.elevator.initial_floors)
        return [self.building.lobby_floor] * self.elevator.num_elevators

    def validate(self):
        """Validate configuration consistency"""
        for floor in self.get_initial_floors():
            if not (0 <= floor < self.building.num_floors):
                raise ValueError(f"initial floor {floor} must be between 0 and {self.building.num_floors - 1}")

        for m in self.maintenance:
            if m.elevator > self.elevator.num_elevators:
                raise ValueError(f"maintenance.elevator ({m.elevator}) cannot exceed elevator.num_elevators ({self.elevator.num_elevators})")

        # Passengers must look at least once per tick or they can miss an open door
        if self.traffic.poll_interval > self.tick_interval:
            raise ValueError(f"traffic.poll_interval ({self.traffic.poll_interval}) cannot exceed tick_interval ({self.tick_interval})")

        if self.traffic.od_matrix is not None:
            if len(self.traffic.od_matrix) != self.building.num_floors:
                raise ValueError(f"od_matrix size ({len(self.traffic.od_matrix)}) must match num_floors ({self.building.num_floors})")
