from typing import Callable, Optional


class CallPanel:
    """
    Hall call panel outside the elevator, with an up and a down button

    The panel doesn't know about elevators. Each button runs the command bound
    to it (normally by ElevatorController.add_call_panel). Pressing a button
    with no bound command does nothing.
    """
    def __init__(self):
        self.up_command: Optional[Callable[[], None]] = None
        self.down_command: Optional[Callable[[], None]] = None

    def set_click_up_command(self, command: Callable[[], None]):
        self.up_command = command

    def set_click_down_command(self, command: Callable[[], None]):
        self.down_command = command

    def click_up(self):
        """Process when the up button is pressed"""
        if self.up_command:
            self.up_command()

    def click_down(self):
        """Process when the down button is pressed"""
        if self.down_command:
            self.down_command()

    def click(self, direction: str):
        """
        Press the button for a direction

        Args:
            direction: 'UP' or 'DOWN'
        """
        if direction == "UP":
            self.click_up()
        elif direction == "DOWN":
            self.click_down()
        else:
            raise ValueError(f"direction must be 'UP' or 'DOWN', got {direction!r}")
