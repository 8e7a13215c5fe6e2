import itertools
from abc import ABC, abstractmethod

import simpy


class Entity(ABC):
    """
    Abstract base class for actors that run as SimPy processes.

    The elevator core is tick driven and not an Entity. Entities are the
    actors around it (passengers) that wait on simulation time.
    """
    # Entity ID counter shared across all class instances
    _entity_id_counter = itertools.count()

    def __init__(self, env: simpy.Environment, name: str = None):
        """
        Args:
            env: The SimPy simulation environment this entity belongs to.
            name: Entity name. Auto-generated from class name and ID if not specified.
        """
        self.env = env
        self.entity_id: int = next(self._entity_id_counter)
        self.name: str = name if name is not None else f"{self.__class__.__name__}_{self.entity_id}"

        # Concrete classes define their own state values
        self.state: str = "initial_state"

        # Start run() as a SimPy process
        self._process = self.env.process(self.run())

        print(f'{self.env.now:.2f}: Entity "{self.name}" ({self.__class__.__name__}, ID:{self.entity_id}) created.')

    @abstractmethod
    def run(self):
        """
        Generator with the entity's behavior, executed as a SimPy process.
        Use yield to wait for events and advance simulation time.
        """
        pass

    def set_state(self, new_state: str):
        """Transition the entity's state"""
        if self.state != new_state:
            old_state = self.state
            self.state = new_state
            self._log_state_change(old_state, new_state)

    def get_state(self) -> str:
        return self.state

    def _log_state_change(self, old_state: str, new_state: str):
        print(f'{self.env.now:.2f}: Entity "{self.name}" ({self.__class__.__name__}, ID:{self.entity_id}) state transition: {old_state} -> {new_state}')

    @property
    def process(self) -> simpy.Process:
        """SimPy process object for this entity"""
        return self._process
