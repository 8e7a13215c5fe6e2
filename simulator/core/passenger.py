import simpy
from .entity import Entity


class Passenger(Entity):
    """
    Passenger who calls an elevator from the hall and rides it to a destination

    Workflow:
    1. Press the hall call button for the travel direction
    2. Wait until an elevator stands at the floor with its doors open
    3. Step in and press the destination button
       - If the click is discarded (the car is sweeping the other way),
         step out, wait until that car leaves, becomes free or goes on
         maintenance, call again
    4. Ride until the car opens its doors at the destination
    """
    def __init__(self, env: simpy.Environment, name: str, building,
                 arrival_floor: int, destination_floor: int, poll_interval: float = 1.0):
        """
        Args:
            env: SimPy environment
            name: Passenger name
            building: Building with call panels and elevators
            arrival_floor: Floor where the passenger appears
            destination_floor: Floor the passenger wants to reach
            poll_interval: How often the passenger looks at the doors (seconds)
        """
        if arrival_floor == destination_floor:
            raise ValueError(f"Passenger {name} already is on floor {destination_floor}")

        self.building = building
        self.arrival_floor = arrival_floor
        self.destination_floor = destination_floor
        self.direction = "UP" if destination_floor > arrival_floor else "DOWN"
        self.poll_interval = poll_interval

        # Passenger metrics (self-tracking)
        self.waiting_start_time = None
        self.boarding_time = None
        self.alighting_time = None
        self.boarded_elevator_name = None
        self.rejected_boardings = 0
        self.hall_calls_made = 0

        super().__init__(env, name)
        print(f"{self.env.now:.2f} [{self.name}] Arrived at floor {self.arrival_floor}. Wants to go to {self.destination_floor}.")

    def run(self):
        self.set_state("WAITING")
        self.waiting_start_time = self.env.now
        self._call_elevator()

        elevator = None
        while elevator is None:
            yield self.env.timeout(self.poll_interval)
            candidate = self.building.find_open_elevator_at(self.arrival_floor)
            if candidate is None:
                continue

            candidate.click_floor(self.destination_floor)
            if self.destination_floor in candidate.moving_to_floors:
                elevator = candidate
                continue

            # Car is going the other way, the click was discarded
            self.rejected_boardings += 1
            print(f"{self.env.now:.2f} [{self.name}] {candidate.name} won't go to floor {self.destination_floor}. Stepping out.")
            # A car on maintenance keeps its stops and never leaves, so don't wait for it
            while (candidate.current_floor == self.arrival_floor and not candidate.is_free()
                    and not candidate.is_on_maintenance()):
                yield self.env.timeout(self.poll_interval)
            self._call_elevator()

        self.boarding_time = self.env.now
        self.boarded_elevator_name = elevator.name
        self.set_state("RIDING")
        print(f"{self.env.now:.2f} [{self.name}] Boarded {elevator.name} at floor {self.arrival_floor}.")

        while not (elevator.current_floor == self.destination_floor and elevator.doors_are_open):
            yield self.env.timeout(self.poll_interval)

        self.alighting_time = self.env.now
        self.set_state("ARRIVED")
        print(f"{self.env.now:.2f} [{self.name}] Got off {elevator.name} at floor {self.destination_floor}.")

    def _call_elevator(self):
        self.hall_calls_made += 1
        self.building.get_call_panel(self.arrival_floor).click(self.direction)

    # --- Passenger metrics ---

    def is_arrived(self) -> bool:
        return self.alighting_time is not None

    def get_waiting_time(self):
        """Time from arrival in the hall to boarding, or None"""
        if self.waiting_start_time is not None and self.boarding_time is not None:
            return self.boarding_time - self.waiting_start_time
        return None

    def get_riding_time(self):
        """Time from boarding to alighting, or None"""
        if self.boarding_time is not None and self.alighting_time is not None:
            return self.alighting_time - self.boarding_time
        return None

    def get_total_journey_time(self):
        """Time from arrival in the hall to alighting, or None"""
        if self.waiting_start_time is not None and self.alighting_time is not None:
            return self.alighting_time - self.waiting_start_time
        return None
