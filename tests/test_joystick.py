import pytest

from oledarcade.joystick import (
    Direction,
    Joystick,
    JoystickHandler,
    JoystickPosition,
    classify_position,
    position_name,
)


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (510, 1010, Direction.LEFT),
        (500, 1000, Direction.LEFT),
        (522, 1023, Direction.LEFT),
        (510, 5, Direction.RIGHT),
        (510, 505, Direction.STOP),
        (5, 510, Direction.UP),
        (1020, 510, Direction.DOWN),
        (523, 1010, Direction.NONE),
        (300, 300, Direction.NONE),
        (510, 516, Direction.NONE),
    ],
)
def test_classify_position(x, y, expected):
    assert classify_position(x, y) is expected


def test_direction_codes_match_menu_codes():
    assert int(classify_position(510, 1010)) == 1
    assert int(classify_position(510, 5)) == 2
    assert int(classify_position(510, 505)) == 3
    assert int(classify_position(5, 510)) == 4
    assert int(classify_position(1020, 510)) == 5


@pytest.mark.parametrize(
    "pos, name",
    [
        (JoystickPosition.CENTER, "Center"),
        (JoystickPosition.UP, "Up"),
        (JoystickPosition.DOWN, "Down"),
        (JoystickPosition.LEFT, "Left"),
        (JoystickPosition.RIGHT, "Right"),
        ("sideways", "Unknown"),
    ],
)
def test_position_name(pos, name):
    assert position_name(pos) == name


def test_handler_always_reports_up():
    handler = JoystickHandler()
    assert handler.poll() is JoystickPosition.UP
    assert handler.poll() is JoystickPosition.UP


def test_joystick_position_reads_axes():
    joystick = Joystick(read_axes=lambda: (5, 510), read_switch=lambda: 1)
    assert joystick.position() is Direction.UP


def test_check_position_stores_result():
    joystick = Joystick(read_axes=lambda: (1020, 510), read_switch=lambda: 1)
    assert joystick.result is Direction.NONE
    assert joystick.check_position() is Direction.DOWN
    assert joystick.result is Direction.DOWN


def test_check_switch_returns_level():
    levels = iter([1, 0])
    joystick = Joystick(read_axes=lambda: (510, 510), read_switch=lambda: next(levels))
    assert joystick.check_switch() == 1
    assert joystick.check_switch() == 0