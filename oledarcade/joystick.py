"""Analog joystick input: stick direction and push button.

The stick reports two axis readings in the range 0-1023.  A reading is turned
into a direction only when it falls inside one of a few narrow zones; anything
in between counts as no direction at all.
"""

from __future__ import annotations

import logging
from enum import Enum, IntEnum
from typing import Callable, Tuple

log = logging.getLogger(__name__)

AxisReader = Callable[[], Tuple[int, int]]
SwitchReader = Callable[[], int]


class Direction(IntEnum):
    """Direction read from the stick's axes."""

    NONE = 0
    LEFT = 1
    RIGHT = 2
    STOP = 3
    UP = 4
    DOWN = 5


# (direction, x range, y range), both ranges inclusive, checked in order.
_ZONES = (
    (Direction.LEFT, (500, 522), (1000, 1023)),
    (Direction.RIGHT, (500, 522), (0, 10)),
    (Direction.STOP, (500, 522), (500, 515)),
    (Direction.UP, (0, 10), (500, 518)),
    (Direction.DOWN, (1018, 1023), (500, 518)),
)


def classify_position(x: int, y: int) -> Direction:
    """Map raw axis readings to a direction, or NONE outside every zone."""
    for direction, (x_low, x_high), (y_low, y_high) in _ZONES:
        if x_low <= x <= x_high and y_low <= y <= y_high:
            return direction
    return Direction.NONE


class JoystickPosition(Enum):
    """Coarse stick position reported by a polling handler."""

    CENTER = "Center"
    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"


def position_name(pos: object) -> str:
    """Return the display name of a position, or "Unknown"."""
    if isinstance(pos, JoystickPosition):
        return pos.value
    return "Unknown"


class Joystick:
    """A stick with two axes and a push button, read through callbacks.

    ``read_axes`` returns the ``(x, y)`` readings; ``read_switch`` returns the
    button level, which is 0 while the button is held down.
    """

    def __init__(self, read_axes: AxisReader, read_switch: SwitchReader) -> None:
        self._read_axes = read_axes
        self._read_switch = read_switch
        self.result: Direction = Direction.NONE

    def position(self) -> Direction:
        """Read the axes and classify them."""
        x, y = self._read_axes()
        direction = classify_position(x, y)
        if direction is not Direction.NONE:
            log.debug("joystick: %s", direction.name)
        return direction

    def check_switch(self) -> int:
        """Read the button level (0 means pressed)."""
        return int(self._read_switch())

    def check_position(self) -> Direction:
        """Read the direction, remember it in ``result`` and return it."""
        self.result = self.position()
        log.debug("joystick result: %d", int(self.result))
        return self.result


class JoystickHandler:
    """A polling handler with a fixed reading; it always reports up."""

    def poll(self) -> JoystickPosition:
        """Return the current stick position."""
        return JoystickPosition.UP