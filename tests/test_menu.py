from types import SimpleNamespace

import pytest

from oledarcade.display import Display
from oledarcade.fonts import SMALL_FONT
from oledarcade.joystick import Joystick
from oledarcade.menu import MainWindow

AXES = {
    "up": (5, 510),
    "down": (1020, 510),
    "stop": (510, 510),
}


def _parts():
    parts = SimpleNamespace(stick="stop", switch=1, sleeps=[], frames=[])
    parts.display = Display(on_update=parts.frames.append)
    parts.display.set_font(SMALL_FONT)
    parts.joystick = Joystick(
        read_axes=lambda: AXES[parts.stick],
        read_switch=lambda: parts.switch,
    )
    return parts


def test_down_cycles_through_entries():
    parts = _parts()
    menu = MainWindow(parts.display, parts.joystick, sleep=parts.sleeps.append)
    parts.stick = "down"
    seen = []
    for _ in range(3):
        menu.process_input()
        seen.append(menu.pointer)
    assert seen == [20, 40, 2]
    assert parts.sleeps == [1.0, 1.0, 1.0]


def test_up_cycles_backwards():
    parts = _parts()
    menu = MainWindow(parts.display, parts.joystick, sleep=parts.sleeps.append)
    parts.stick = "up"
    seen = []
    for _ in range(3):
        menu.process_input()
        seen.append(menu.pointer)
    assert seen == [40, 20, 2]


def test_neutral_stick_leaves_pointer():
    parts = _parts()
    menu = MainWindow(parts.display, parts.joystick, sleep=parts.sleeps.append)
    menu.process_input()
    assert menu.pointer == 2
    assert parts.sleeps == []


def test_idle_frame_draws_menu_and_returns_zero():
    parts = _parts()
    menu = MainWindow(parts.display, parts.joystick, sleep=parts.sleeps.append)
    assert menu.main_window() == 0
    assert len(parts.frames) == 1
    assert any(parts.frames[0])
    assert parts.sleeps == [0.01]


def test_check_button_reports_switch():
    parts = _parts()
    menu = MainWindow(parts.display, parts.joystick, sleep=parts.sleeps.append)
    assert menu.check_button() == 1
    parts.switch = 0
    assert menu.check_button() == 0


@pytest.mark.parametrize("pointer, choice", [(2, 1), (20, 2), (40, 3)])
def test_button_selects_entry(pointer, choice):
    parts = _parts()
    menu = MainWindow(parts.display, parts.joystick, sleep=parts.sleeps.append)
    menu.pointer = pointer
    parts.switch = 0
    assert menu.main_window() == choice
    assert parts.display.buffer == bytes(1024)


def test_moving_cursor_redraws_screen():
    parts = _parts()
    menu = MainWindow(parts.display, parts.joystick, sleep=parts.sleeps.append)
    menu.main_window()
    first = parts.frames[-1]
    parts.stick = "down"
    menu.main_window()
    second = parts.frames[-1]
    assert menu.pointer == 20
    assert first != second
    assert any(second)