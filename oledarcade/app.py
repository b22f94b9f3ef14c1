"""The console itself: a menu that starts the games, driven by a joystick.

``main`` runs the console without any hardware.  Joystick input comes from a
scripted list of key presses, one for each shown frame, and the last frame is
printed as text.
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Callable, List, Optional, Sequence, Tuple

from .cargame import CarGame
from .display import Display
from .fonts import SMALL_FONT
from .joystick import Direction, Joystick
from .menu import MainWindow

# Axis readings that fall inside each direction's zone.
_CENTER_AXES: Tuple[int, int] = (511, 507)
_DIRECTION_AXES = {
    Direction.LEFT: (511, 1011),
    Direction.RIGHT: (511, 5),
    Direction.UP: (5, 509),
    Direction.DOWN: (1020, 509),
}

_DIRECTION_KEYS = {
    "left": Direction.LEFT,
    "a": Direction.LEFT,
    "right": Direction.RIGHT,
    "d": Direction.RIGHT,
    "up": Direction.UP,
    "w": Direction.UP,
    "down": Direction.DOWN,
    "s": Direction.DOWN,
}
_BUTTON_KEYS = frozenset({"button", "space", " ", "enter"})

GAME_CAR = 1


def _normalise(key: str) -> str:
    return key if key == " " else key.strip().lower()


def is_known_key(key: str) -> bool:
    """Return whether ``key`` names a stick direction or the button."""
    name = _normalise(key)
    return name in _DIRECTION_KEYS or name in _BUTTON_KEYS


class KeyboardJoystick:
    """A joystick stand-in fed by key presses.

    Each press is seen once: the next axis reading reports the pressed
    direction and the next button reading reports the press, after which the
    stick is back in the centre and the button released.
    """

    def __init__(self) -> None:
        self._direction: Optional[Direction] = None
        self._button = False

    def press(self, key: str) -> None:
        """Queue a direction key or the button for the next reading."""
        name = _normalise(key)
        if name in _DIRECTION_KEYS:
            self._direction = _DIRECTION_KEYS[name]
        elif name in _BUTTON_KEYS:
            self._button = True
        else:
            raise ValueError(f"unknown key: {key!r}")

    def read_axes(self) -> Tuple[int, int]:
        """Return ``(x, y)`` axis readings for the pending direction."""
        direction, self._direction = self._direction, None
        if direction is None:
            return _CENTER_AXES
        return _DIRECTION_AXES[direction]

    def read_switch(self) -> int:
        """Return the button level: 0 once after a press, otherwise 1."""
        pressed, self._button = self._button, False
        return 0 if pressed else 1


class Console:
    """The display, the joystick, the menu and the car game together."""

    def __init__(self, display: Optional[Display] = None,
                 joystick: Optional[Joystick] = None,
                 rng: Optional[random.Random] = None,
                 sleep: Optional[Callable[[float], None]] = None) -> None:
        self.keyboard: Optional[KeyboardJoystick] = None
        if joystick is None:
            self.keyboard = KeyboardJoystick()
            joystick = Joystick(self.keyboard.read_axes, self.keyboard.read_switch)
        self.display = display if display is not None else Display()
        self.joystick = joystick
        sleep = sleep if sleep is not None else time.sleep
        self.display.begin()
        self.display.set_font(SMALL_FONT)
        self.menu = MainWindow(self.display, self.joystick, sleep)
        self.car_game = CarGame(self.display, self.joystick, rng, sleep)

    def loop(self) -> int:
        """Run one menu frame and start the chosen game; return the choice."""
        choice = self.menu.main_window()
        if choice == GAME_CAR:
            self.car_game.run()
        return choice


class _FramesDone(Exception):
    """Raised from the frame callback once enough frames were shown."""


class _Script:
    """Feeds one scripted key per shown frame and counts the frames."""

    def __init__(self, keys: Sequence[Optional[str]], frames: int) -> None:
        self._keys: List[Optional[str]] = list(keys)
        self._frames = frames
        self.shown = 0
        self.keyboard: Optional[KeyboardJoystick] = None

    def _next_key(self) -> None:
        if self._keys and self.keyboard is not None:
            key = self._keys.pop(0)
            if key is not None:
                self.keyboard.press(key)

    def start(self, keyboard: KeyboardJoystick) -> None:
        self.keyboard = keyboard
        self._next_key()

    def on_frame(self, frame: bytes) -> None:
        if self.keyboard is None:
            return
        self.shown += 1
        if self.shown >= self._frames:
            raise _FramesDone
        self._next_key()


def _parse_keys(text: str) -> List[Optional[str]]:
    if not text:
        return []
    return [item.strip() or None for item in text.split(",")]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the console on scripted input and print its last frame."""
    parser = argparse.ArgumentParser(
        prog="oledarcade",
        description="Run the joystick console with scripted key presses.",
    )
    parser.add_argument("--keys", default="",
                        help="comma separated keys, one per frame "
                             "(left, right, up, down, button; empty for none)")
    parser.add_argument("--frames", type=int, default=200,
                        help="number of frames to show before stopping")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the random placement of cars")
    parser.add_argument("--realtime", action="store_true",
                        help="wait between frames as the device does")
    args = parser.parse_args(argv)

    if args.frames < 1:
        parser.error("--frames must be at least 1")
    keys = _parse_keys(args.keys)
    unknown = [key for key in keys if key is not None and not is_known_key(key)]
    if unknown:
        parser.error(f"unknown key: {unknown[0]!r}")

    script = _Script(keys, args.frames)
    display = Display(on_update=script.on_frame)
    sleep = time.sleep if args.realtime else (lambda seconds: None)
    console = Console(display, None, random.Random(args.seed), sleep)
    script.start(console.keyboard)
    try:
        while True:
            console.loop()
    except _FramesDone:
        pass
    sys.stdout.write(display.to_text() + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())