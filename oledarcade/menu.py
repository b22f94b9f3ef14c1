"""The start menu: pick a game with the stick, confirm with the button."""

from __future__ import annotations

import time
from typing import Callable, Optional

from .display import Display
from .joystick import Direction, Joystick

# Rows of the menu entries; the cursor sits on one of them.
MENU_POSITIONS = (2, 20, 40)

MOVE_DELAY = 1.0
FRAME_DELAY = 0.01


class MainWindow:
    """The menu screen with a cursor over three entries."""

    def __init__(self, display: Display, joystick: Joystick,
                 sleep: Optional[Callable[[float], None]] = None) -> None:
        self._display = display
        self._joystick = joystick
        self._sleep = sleep if sleep is not None else time.sleep
        self.pointer = MENU_POSITIONS[0]
        self._old_pointer = MENU_POSITIONS[0]

    def process_input(self) -> None:
        """Move the cursor down or up, wrapping around the entries."""
        direction = self._joystick.position()
        if direction is Direction.DOWN:
            shift = 1
        elif direction is Direction.UP:
            shift = -1
        else:
            return
        if self.pointer not in MENU_POSITIONS:
            return
        index = MENU_POSITIONS.index(self.pointer)
        self.pointer = MENU_POSITIONS[(index + shift) % len(MENU_POSITIONS)]
        self._sleep(MOVE_DELAY)

    def check_button(self) -> int:
        """Return the button level (0 means pressed)."""
        return self._joystick.check_switch()

    def main_window(self) -> int:
        """Run one menu frame; return the chosen entry (1-3) or 0."""
        self.process_input()
        display = self._display
        if self.check_button() != 1 and self.pointer in MENU_POSITIONS:
            display.clear()
            display.update()
            return MENU_POSITIONS.index(self.pointer) + 1
        if self.pointer != self._old_pointer:
            display.clear()
            self._old_pointer = self.pointer
        display.print_text("Super Car", 2, 2)
        display.print_text("|", 100, self.pointer)
        display.print_text("Information:", 2, 40)
        display.print_text("Pong", 2, 20)
        display.update()
        self._sleep(FRAME_DELAY)
        return 0