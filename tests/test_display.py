import pytest

from oledarcade.display import (
    BUFFER_SIZE,
    CENTER,
    DISPLAY_OFF,
    DISPLAY_ON,
    HEIGHT,
    INVERT_DISPLAY,
    NORMAL_DISPLAY,
    RIGHT,
    SET_COLUMN_ADDR,
    SET_CONTRAST_CONTROL,
    SET_PAGE_ADDR,
    WIDTH,
    Display,
)
from oledarcade.fonts import SMALL_FONT, TINY_FONT


def make(font=SMALL_FONT):
    display = Display()
    display.set_font(font)
    return display


def lit(display):
    return {
        (x, y)
        for y in range(HEIGHT)
        for x in range(WIDTH)
        if display.get_pixel(x, y)
    }


def test_pixel_round_trip():
    d = Display()
    d.set_pixel(5, 9)
    assert d.get_pixel(5, 9)
    d.invert_pixel(5, 9)
    assert not d.get_pixel(5, 9)
    d.invert_pixel(5, 9)
    d.clear_pixel(5, 9)
    assert d.buffer == bytes(BUFFER_SIZE)


def test_page_layout():
    d = Display()
    d.set_pixel(0, 9)
    assert d.buffer[WIDTH] == 0b10


def test_off_screen_pixels_ignored():
    d = Display()
    for x, y in [(-1, 0), (0, -1), (WIDTH, 0), (0, HEIGHT)]:
        d.set_pixel(x, y)
        assert not d.get_pixel(x, y)
    assert d.buffer == bytes(BUFFER_SIZE)


def test_fill_and_clear():
    d = Display()
    d.fill()
    assert len(lit(d)) == WIDTH * HEIGHT
    d.clear()
    assert lit(d) == set()


def test_update_sends_frame():
    frames = []
    d = Display(frames.append)
    d.set_pixel(1, 1)
    d.update()
    assert frames == [d.buffer]
    assert d.frame == d.buffer
    assert d.commands[-6:] == [SET_COLUMN_ADDR, 0, WIDTH - 1, SET_PAGE_ADDR, 0, 7]


def test_begin_sequence_and_font_reset():
    frames = []
    d = Display(frames.append)
    d.set_font(SMALL_FONT)
    d.fill()
    d.begin()
    assert d.commands[0] == DISPLAY_OFF
    assert DISPLAY_ON in d.commands
    assert frames == [bytes(BUFFER_SIZE)]
    with pytest.raises(RuntimeError):
        d.print_text("A", 0, 0)


def test_brightness_and_invert_commands():
    d = Display()
    d.set_brightness(0x40)
    d.invert(True)
    d.invert(False)
    assert d.commands == [SET_CONTRAST_CONTROL, 0x40, INVERT_DISPLAY, NORMAL_DISPLAY]


def test_horizontal_line_excludes_end():
    d = Display()
    d.draw_line(10, 5, 20, 5)
    assert all(d.get_pixel(x, 5) for x in range(10, 20))
    assert not d.get_pixel(20, 5)


def test_line_direction_independent():
    a, b = Display(), Display()
    a.draw_line(0, 0, 30, 10)
    b.draw_line(30, 10, 0, 0)
    assert a.buffer == b.buffer
    assert a.get_pixel(0, 0) and a.get_pixel(30, 10)


def test_diagonal_line_endpoints():
    d = Display()
    d.draw_line(0, 0, 10, 10)
    assert all(d.get_pixel(i, i) for i in range(11))


def test_clear_line_undoes_draw():
    d = Display()
    d.draw_line(3, 40, 60, 2)
    assert lit(d)
    d.clear_line(3, 40, 60, 2)
    assert lit(d) == set()


def test_rect_outline():
    d = Display()
    d.draw_rect(20, 10, 10, 30)
    for corner in [(10, 10), (20, 10), (10, 30), (20, 30)]:
        assert d.get_pixel(*corner)
    assert not d.get_pixel(15, 20)
    d.clear_rect(10, 10, 20, 30)
    assert lit(d) == set()


def test_rect_accepts_floats():
    a, b = Display(), Display()
    a.draw_rect(40.7, 45.2, 50.9, 60.1)
    b.draw_rect(40, 45, 50, 60)
    assert a.buffer == b.buffer


def test_round_rect_corners_open():
    d = Display()
    d.draw_round_rect(10, 10, 30, 30)
    assert not d.get_pixel(10, 10)
    assert d.get_pixel(11, 11)
    assert d.get_pixel(20, 10)
    d.clear_round_rect(10, 10, 30, 30)
    assert lit(d) == set()


def test_circle_symmetry():
    d = Display()
    d.draw_circle(60, 30, 10)
    points = lit(d)
    for p in [(60, 40), (60, 20), (70, 30), (50, 30)]:
        assert p in points
    assert (60, 30) not in points
    assert {(120 - x, y) for x, y in points} == points
    assert {(x, 60 - y) for x, y in points} == points
    d.clear_circle(60, 30, 10)
    assert lit(d) == set()


def test_bitmap_round_trip():
    pill = bytes([0x0E, 0x1F, 0x1F, 0x1F, 0x0E])
    d = Display()
    d.fill()
    d.draw_bitmap(4, 8, pill, 5, 8)
    for col, byte in enumerate(pill):
        for row in range(8):
            assert d.get_pixel(4 + col, 8 + row) == bool(byte >> row & 1)


def test_print_matches_glyph_bits():
    d = make()
    d.print_text("A", 0, 0)
    glyph = SMALL_FONT.glyph_bytes("A")
    for col, byte in enumerate(glyph):
        for row in range(8):
            assert d.get_pixel(col, row) == bool(byte >> row & 1)


def test_print_right_and_center():
    a, b = make(), make()
    a.print_text("AB", RIGHT, 0)
    b.print_text("AB", WIDTH - 2 * SMALL_FONT.x_size, 0)
    assert a.buffer == b.buffer
    c, e = make(), make()
    c.print_text("AB", CENTER, 0)
    e.print_text("AB", (WIDTH - 2 * SMALL_FONT.x_size) // 2, 0)
    assert c.buffer == e.buffer


def test_inverted_text_is_complement():
    normal, inverted = make(), make()
    normal.print_text("Hi", 0, 0)
    inverted.invert_text(True)
    inverted.print_text("Hi", 0, 0)
    for x in range(2 * SMALL_FONT.x_size):
        for y in range(8):
            assert normal.get_pixel(x, y) != inverted.get_pixel(x, y)


def test_tiny_font_print_idempotent():
    a = make(TINY_FONT)
    a.print_text("Ok", 3, 3)
    once = a.buffer
    a.print_text("Ok", 3, 3)
    assert a.buffer == once
    assert lit(a)
    assert all(3 <= x < 3 + 2 * TINY_FONT.x_size for x, _ in lit(a))


def test_unknown_character_rejected():
    d = make()
    with pytest.raises(ValueError):
        d.print_text("\u00e9", 0, 0)


def test_print_int_padding():
    a, b = make(), make()
    a.print_int(-42, 0, 0, 5, "0")
    b.print_text("-0042", 0, 0)
    assert a.buffer == b.buffer
    c, e = make(), make()
    c.print_int(0, 0, 0)
    e.print_text("0", 0, 0)
    assert c.buffer == e.buffer


def test_print_float_format():
    a, b = make(), make()
    a.print_float(3.14159, 2, 0, 0, ",")
    b.print_text("3,14", 0, 0)
    assert a.buffer == b.buffer


def test_print_float_negative_filler():
    a, b = make(), make()
    a.print_float(-1.5, 1, 0, 0, ".", 6, "0")
    b.print_text("-001.5", 0, 0)
    assert a.buffer == b.buffer


def test_to_text_shape():
    d = Display()
    d.set_pixel(3, 2)
    lines = d.to_text().split("\n")
    assert len(lines) == HEIGHT
    assert all(len(line) == WIDTH for line in lines)
    assert lines[2][3] == "#"
    assert d.to_text().count("#") == 1