"""The car dodging game.

The player's car sits in a road between two vertical lines and is steered
with the joystick; three other cars come down the road at a slowly growing
speed.  Each car that leaves the bottom scores a point; touching one ends
the run, keeps the best score and starts over.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from .display import Display
from .joystick import Direction, Joystick

START_SPEED = 0.3
ACCELERATION = 0.001
BOTTOM = 70

FRAME_DELAY = 0.005
GAME_OVER_DELAY = 2.5
ENTER_EXIT_DELAY = 0.5


@dataclass
class _Car:
    """A car coming down the road; ``x`` grows downwards, ``y`` is across."""

    x: float
    y: float


@dataclass
class _Player:
    """Corners of the player's car."""

    x1: float = 40
    x2: float = 50
    y1: float = 45
    y2: float = 60


@dataclass(frozen=True)
class _Lane:
    start_x: float
    start_y: float
    respawn_x: float
    low: int
    high: int
    fresh_y: bool


_LANES = (
    _Lane(-10, 40, -10, 30, 50, True),
    _Lane(-50, 70, -80, 50, 70, False),
    _Lane(-30, 60, -60, 70, 85, False),
)


class CarGame:
    """State and frame loop of the car game."""

    def __init__(self, display: Display, joystick: Joystick,
                 rng: Optional[random.Random] = None,
                 sleep: Optional[Callable[[float], None]] = None) -> None:
        self._display = display
        self._joystick = joystick
        self._rng = rng if rng is not None else random.Random()
        self._sleep = sleep if sleep is not None else time.sleep
        self.score = 0
        self.record = 0
        self.speed = START_SPEED
        self.cars: List[_Car] = []
        self.player = _Player()
        self.reset()

    def reset(self) -> None:
        """Put every car back at its start and keep the best score."""
        self.speed = START_SPEED
        self.cars = [_Car(lane.start_x, lane.start_y) for lane in _LANES]
        self.record = max(self.score, self.record)
        self.score = 0
        self.player = _Player()

    # -- drawing --------------------------------------------------------

    def _draw_car(self, car: _Car) -> None:
        x, y = car.x, car.y
        d = self._display
        d.draw_rect(y, x, y + 10, x + 10)
        d.draw_rect(y, x + 1, y - 3, x + 4)
        d.draw_rect(y, x + 7, y - 3, x + 10)
        d.draw_rect(y + 10, x + 7, y + 13, x + 10)
        d.draw_rect(y + 10, x + 1, y + 13, x + 4)

    def _respawn(self, car: _Car, lane: _Lane) -> None:
        if car.x <= BOTTOM:
            return
        new_y = self._rng.randrange(lane.low, lane.high)
        while lane.fresh_y and new_y == car.y:
            new_y = self._rng.randrange(lane.low, lane.high)
        car.y = new_y
        car.x = lane.respawn_x
        self.score += 1

    def _steer(self) -> None:
        p = self.player
        direction = self._joystick.position()
        if direction is Direction.RIGHT:
            if p.x1 + 5 < 103 and p.x2 + 5 < 103:
                p.x1 += 2
                p.x2 += 2
        elif direction is Direction.LEFT:
            if p.x1 - 5 > 25 and p.x2 - 5 > 25:
                p.x1 -= 2
                p.x2 -= 2
        elif direction is Direction.DOWN:
            if p.y1 + 1 < 64 and p.y2 < 64:
                p.y1 += 2
                p.y2 += 2
        elif direction is Direction.UP:
            if p.y1 - 1 > 0 and p.y2 > 0:
                p.y1 -= 2
                p.y2 -= 2

    def _draw_player(self) -> None:
        self._steer()
        p = self.player
        d = self._display
        d.draw_rect(p.x1, p.y1, p.x2, p.y2)
        d.draw_rect(p.x1, p.y1 + 1, p.x2 - 14, p.y2 - 9)
        d.draw_rect(p.x1, p.y1 + 10, p.x2 - 14, p.y2)
        d.draw_rect(p.x1 + 14, p.y1 + 10, p.x2, p.y2)
        d.draw_rect(p.x1 + 14, p.y1 + 1, p.x2, p.y2 - 9)

    # -- rules ----------------------------------------------------------

    def _hits(self, car: _Car) -> bool:
        p = self.player
        return (car.x - 15 < p.y1 <= car.x + 10
                and car.y - 14 < p.x1 < car.y + 14)

    def _check_collisions(self) -> bool:
        crashed = False
        for index in range(len(self.cars)):
            if self._hits(self.cars[index]):
                crashed = True
                d = self._display
                d.clear()
                d.print_text("GAME OVER!", 30, 30)
                d.update()
                self._sleep(GAME_OVER_DELAY)
                self.reset()
        return crashed

    # -- loop -----------------------------------------------------------

    def step(self) -> bool:
        """Run one frame; return True if the player crashed in it."""
        d = self._display
        d.clear()
        d.draw_line(25, 1, 25, 64)
        d.draw_line(103, 1, 103, 64)
        d.print_text("c=", 2, 2)
        d.print_text(str(self.score), 14, 2)
        d.print_text("r=", 2, 10)
        d.print_text(str(self.record), 14, 10)

        for car, lane in zip(self.cars, _LANES):
            self._draw_car(car)
            self._respawn(car, lane)
        self._draw_player()

        crashed = self._check_collisions()
        self.speed += ACCELERATION
        for car in self.cars:
            car.x += self.speed
        d.update()
        self._sleep(FRAME_DELAY)
        return crashed

    def run(self) -> None:
        """Play until the joystick button is pressed."""
        self._sleep(ENTER_EXIT_DELAY)
        while self._joystick.check_switch() != 0:
            self.step()
        self._display.clear()
        self._sleep(ENTER_EXIT_DELAY)