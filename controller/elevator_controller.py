import time
from typing import Callable, Dict, List, Optional

from simulator.core.call_panel import CallPanel
from simulator.core.elevator import Elevator
from simulator.core.events import ElevatorEvent
from simulator.core.screen import Screen
from simulator.infrastructure.message_broker import MessageBroker
from simulator.interfaces.elevator_listener import IElevatorListener


class ElevatorController(IElevatorListener):
    """
    Controls one or more elevators and delegates hall calls to them

    Dispatch: a hall call goes to the first registered elevator that accepts
    the floor. Calls nobody accepts stay in the event log and are retried,
    oldest first, whenever an elevator becomes free.

    The controller is the listener of every elevator it manages. Each elevator
    change refreshes the screens registered for that elevator.

    If a MessageBroker is given, status reports and hall call assignments are
    published on it and its simulation time is used as the clock.
    """
    def __init__(self, name: str = "Controller", broker: MessageBroker = None,
                 clock: Callable[[], float] = None):
        """
        Args:
            name: Name used in log lines
            broker: Optional message broker for status reports
            clock: Time source for event timestamps. Defaults to the broker's
                   simulation time, or time.monotonic without a broker.
        """
        self.name = name
        self.broker = broker
        if clock is not None:
            self.clock = clock
        elif broker is not None:
            self.clock = broker.get_current_time
        else:
            self.clock = time.monotonic

        self.elevators: List[Elevator] = []
        self.screens_by_elevator: Dict[Elevator, List[Screen]] = {}
        self.floors_by_call_panel: Dict[CallPanel, int] = {}
        self.elevator_events: List[ElevatorEvent] = []

    def _now(self) -> float:
        return self.clock()

    # --- Registration ---

    def add_elevator(self, elevator: Elevator):
        """
        Register an elevator. Registration order is the dispatch priority.
        """
        self.elevators.append(elevator)
        print(f"{self._now():.2f} [{self.name}] Elevator '{elevator.name}' registered "
              f"(priority {len(self.elevators)}, floor {elevator.current_floor}).")

    def add_elevator_screens(self, elevator: Elevator, screens: List[Screen]):
        """
        Set the screens that show the elevator's status

        Replaces any screens registered earlier for the same elevator.
        """
        self.screens_by_elevator[elevator] = screens

    def add_call_panel(self, floor: int, panel: CallPanel):
        """
        Bind a call panel's buttons to hall calls for the given floor
        """
        panel.set_click_up_command(lambda: self.add_elevator_event(ElevatorEvent.wants_up(floor, self._now())))
        panel.set_click_down_command(lambda: self.add_elevator_event(ElevatorEvent.wants_down(floor, self._now())))
        self.floors_by_call_panel[panel] = floor

    def get_call_panel_floor(self, panel: CallPanel) -> Optional[int]:
        """Floor a call panel was registered for, or None"""
        return self.floors_by_call_panel.get(panel)

    # --- Events ---

    def add_elevator_event(self, event: ElevatorEvent):
        """
        Queue an event for the elevators and try to hand it out right away
        """
        self.elevator_events.append(event)
        print(f"{self._now():.2f} [{self.name}] Received hall call: floor {event.floor} {event.direction}")
        if self.broker:
            self.broker.put("controller/hall_call", {
                "timestamp": self._now(),
                "floor": event.floor,
                "direction": event.direction,
            })
        if not self.handle_event(event):
            print(f"{self._now():.2f} [{self.name}] No elevator accepted floor {event.floor} {event.direction}. Call queued.")

    def handle_event(self, event: ElevatorEvent) -> bool:
        """
        Give the event to the first elevator that accepts its floor

        Returns:
            bool: True if the event is handled (now or earlier)
        """
        if event.is_handled():
            return True

        for elevator in self.elevators:
            if elevator.move_to_floor(event.floor):
                event.handle(elevator, self._now())
                print(f"{self._now():.2f} [{self.name}] Assigned hall call floor {event.floor} {event.direction} to {elevator.name}")
                if self.broker:
                    message = event.to_dict()
                    message["timestamp"] = self._now()
                    message["wait_time"] = event.get_wait_time()
                    self.broker.put("controller/hall_call_assignment", message)
                break

        return event.is_handled()

    def get_events(self) -> List[ElevatorEvent]:
        return self.elevator_events

    def get_unhandled_events(self) -> List[ElevatorEvent]:
        return [e for e in self.elevator_events if not e.is_handled()]

    # --- Simulation ---

    def progress(self):
        """Advance every elevator by one tick, in registration order"""
        for elevator in self.elevators:
            elevator.progress()

    # --- IElevatorListener ---

    def on_arriving_floor(self, elevator: Elevator, floor: int) -> None:
        print(f"{self._now():.2f} [{self.name}] {elevator.name} arrived at floor {floor}.")
        self._update_screens_by_elevator(elevator)

    def on_change_state(self, elevator: Elevator, is_operational: bool) -> None:
        if not is_operational:
            print(f"{self._now():.2f} [{self.name}] {elevator.name} is on maintenance.")
        self._update_screens_by_elevator(elevator)

    def on_change_floor(self, elevator: Elevator, new_floor: int) -> None:
        self._update_screens_by_elevator(elevator)

    def on_change_doors(self, elevator: Elevator, floor: int, doors_are_open: bool) -> None:
        if self.broker:
            self.broker.put(f"elevator/{elevator.name}/door", {
                "timestamp": self._now(),
                "floor": floor,
                "event_type": "OPEN" if doors_are_open else "CLOSE",
            })
        self._update_screens_by_elevator(elevator)

    def on_becoming_free(self, elevator: Elevator) -> None:
        print(f"{self._now():.2f} [{self.name}] {elevator.name} is free at floor {elevator.current_floor}.")
        self._report_status(elevator)
        self._delegate_events()

    # --- Internal helpers ---

    def _update_screens_by_elevator(self, elevator: Elevator):
        message = elevator.get_message()
        for screen in self.screens_by_elevator.get(elevator, []):
            screen.set_text(message)
        self._report_status(elevator)

    def _report_status(self, elevator: Elevator):
        if not self.broker:
            return
        status_message = elevator.get_status()
        status_message["timestamp"] = self._now()
        self.broker.put(f"elevator/{elevator.name}/status", status_message)

    def _delegate_events(self):
        unhandled = self.get_unhandled_events()
        if not unhandled:
            return
        print(f"{self._now():.2f} [{self.name}] Retrying {len(unhandled)} unhandled hall call(s).")
        for event in unhandled:
            self.handle_event(event)
