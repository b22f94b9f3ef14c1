"""In-memory model of a 128x64 monochrome SSD1306 display.

Drawing happens in a 1024-byte frame buffer laid out the way the controller
expects it: eight horizontal pages of 128 columns, one byte per column and
page, bit 0 being the top row of the page.  ``update`` hands the finished
frame to a callback, and every controller command is kept in ``commands``.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Sequence, Union

from .fonts import Font

WIDTH = 128
HEIGHT = 64
BUFFER_SIZE = WIDTH * HEIGHT // 8

LEFT = 0
RIGHT = 9999
CENTER = 9998

SSD1306_ADDR = 0x3C

SET_CONTRAST_CONTROL = 0x81
DISPLAY_ALL_ON_RESUME = 0xA4
DISPLAY_ALL_ON = 0xA5
NORMAL_DISPLAY = 0xA6
INVERT_DISPLAY = 0xA7
DISPLAY_OFF = 0xAE
DISPLAY_ON = 0xAF
NOP = 0xE3
MEMORY_ADDR_MODE = 0x20
SET_COLUMN_ADDR = 0x21
SET_PAGE_ADDR = 0x22
SET_START_LINE = 0x40
SET_SEGMENT_REMAP = 0xA0
SET_MULTIPLEX_RATIO = 0xA8
COM_SCAN_DIR_INC = 0xC0
COM_SCAN_DIR_DEC = 0xC8
SET_DISPLAY_OFFSET = 0xD3
SET_COM_PINS = 0xDA
CHARGE_PUMP = 0x8D
SET_DISPLAY_CLOCK_DIV_RATIO = 0xD5
SET_PRECHARGE_PERIOD = 0xD9
SET_VCOM_DESELECT = 0xDB

INIT_SEQUENCE = (
    DISPLAY_OFF,
    SET_DISPLAY_CLOCK_DIV_RATIO, 0x80,
    SET_MULTIPLEX_RATIO, 0x3F,
    SET_DISPLAY_OFFSET, 0x00,
    SET_START_LINE | 0x00,
    CHARGE_PUMP, 0x14,
    MEMORY_ADDR_MODE, 0x00,
    SET_SEGMENT_REMAP | 0x01,
    COM_SCAN_DIR_DEC,
    SET_COM_PINS, 0x12,
    SET_CONTRAST_CONTROL, 0xCF,
    SET_PRECHARGE_PERIOD, 0xF1,
    SET_VCOM_DESELECT, 0x40,
    DISPLAY_ALL_ON_RESUME,
    NORMAL_DISPLAY,
    DISPLAY_ON,
)

FrameCallback = Callable[[bytes], None]
Number = Union[int, float]


def _trunc_half(value: int) -> int:
    """Halve an integer, rounding toward zero."""
    return int(value / 2)


class Display:
    """A 128x64 one-bit display with a frame buffer and drawing primitives."""

    def __init__(self, on_update: Optional[FrameCallback] = None) -> None:
        self._on_update = on_update
        self._buffer = bytearray(BUFFER_SIZE)
        self._font: Optional[Font] = None
        self._text_inverted = False
        self.commands: List[int] = []
        self.frame: Optional[bytes] = None

    # -- controller -----------------------------------------------------

    def _send(self, *values: int) -> None:
        self.commands.extend(value & 0xFF for value in values)

    def begin(self) -> None:
        """Send the controller start-up sequence and show a blank screen."""
        self._send(*INIT_SEQUENCE)
        self.clear()
        self.update()
        self._font = None

    def update(self) -> None:
        """Push the frame buffer to the screen."""
        self._send(SET_COLUMN_ADDR, 0, WIDTH - 1)
        self._send(SET_PAGE_ADDR, 0, HEIGHT // 8 - 1)
        self.frame = bytes(self._buffer)
        if self._on_update is not None:
            self._on_update(self.frame)

    def set_brightness(self, value: int) -> None:
        """Set the display contrast (0-255)."""
        self._send(SET_CONTRAST_CONTROL, int(value))

    def invert(self, mode: bool) -> None:
        """Switch the whole panel between normal and inverted output."""
        self._send(INVERT_DISPLAY if mode else NORMAL_DISPLAY)

    @property
    def buffer(self) -> bytes:
        """A copy of the current frame buffer."""
        return bytes(self._buffer)

    # -- whole screen ---------------------------------------------------

    def clear(self) -> None:
        """Turn every pixel off."""
        self._buffer[:] = bytes(BUFFER_SIZE)

    def fill(self) -> None:
        """Turn every pixel on."""
        self._buffer[:] = b"\xff" * BUFFER_SIZE

    # -- pixels ---------------------------------------------------------

    @staticmethod
    def _locate(x: Number, y: Number) -> Optional[tuple]:
        x, y = int(x), int(y)
        if 0 <= x < WIDTH and 0 <= y < HEIGHT:
            return (y // 8) * WIDTH + x, 1 << (y % 8)
        return None

    def get_pixel(self, x: Number, y: Number) -> bool:
        """Return whether a pixel is lit; off-screen pixels never are."""
        spot = self._locate(x, y)
        if spot is None:
            return False
        index, mask = spot
        return bool(self._buffer[index] & mask)

    def set_pixel(self, x: Number, y: Number) -> None:
        spot = self._locate(x, y)
        if spot is not None:
            index, mask = spot
            self._buffer[index] |= mask

    def clear_pixel(self, x: Number, y: Number) -> None:
        spot = self._locate(x, y)
        if spot is not None:
            index, mask = spot
            self._buffer[index] &= ~mask & 0xFF

    def invert_pixel(self, x: Number, y: Number) -> None:
        spot = self._locate(x, y)
        if spot is not None:
            index, mask = spot
            self._buffer[index] ^= mask

    def _pixel(self, x: Number, y: Number, on: bool) -> None:
        if on:
            self.set_pixel(x, y)
        else:
            self.clear_pixel(x, y)

    # -- text -----------------------------------------------------------

    def invert_text(self, mode: bool) -> None:
        """Draw following text light-on-dark (True) or dark-on-light."""
        self._text_inverted = bool(mode)

    def set_font(self, font: Font) -> None:
        """Select the font used by the print methods."""
        self._font = font
        self._text_inverted = False

    def _require_font(self) -> Font:
        if self._font is None:
            raise RuntimeError("no font selected; call set_font first")
        return self._font

    def _print_char(self, char: str, x: int, y: int) -> None:
        font = self._font
        glyph = font.glyph_bytes(char)
        lit = not self._text_inverted
        if font.byte_aligned:
            for band in range(font.y_size // 8):
                for col in range(font.x_size):
                    byte = glyph[col + band * font.x_size]
                    for bit in range(8):
                        on = bool(byte & (1 << bit))
                        self._pixel(x + col, y + band * 8 + bit, on == lit)
        else:
            bits = (
                bool(byte & (1 << shift))
                for byte in glyph
                for shift in range(7, -1, -1)
            )
            for col in range(font.x_size):
                for row in range(font.y_size):
                    self._pixel(x + col, y + row, next(bits) == lit)

    def print_text(self, text: str, x: Number, y: Number) -> None:
        """Draw a string; x may be LEFT, RIGHT or CENTER."""
        font = self._require_font()
        text = str(text)
        x, y = int(x), int(y)
        width = len(text) * font.x_size
        if x == RIGHT:
            x = WIDTH - width
        elif x == CENTER:
            x = _trunc_half(WIDTH - width)
        for position, char in enumerate(text):
            self._print_char(char, x + position * font.x_size, y)

    def print_int(self, num: int, x: Number, y: Number,
                  length: int = 0, filler: str = " ") -> None:
        """Draw an integer, padded on the left to ``length`` with ``filler``."""
        num = int(num)
        if num == 0:
            text = filler * max(0, length - 1) + "0"
        else:
            sign = "-" if num < 0 else ""
            digits = str(abs(num))
            text = sign + filler * max(0, length - len(digits) - len(sign)) + digits
        self.print_text(text, x, y)

    def print_float(self, num: float, dec: int, x: Number, y: Number,
                    divider: str = ".", length: int = 0,
                    filler: str = " ") -> None:
        """Draw a number with ``dec`` decimals in a field ``length`` wide."""
        num = float(num)
        text = "%*.*f" % (int(length), int(dec), num)
        if divider != ".":
            text = text.replace(".", divider)
        if filler != " ":
            if num < 0:
                rest = text[1:].replace(" ", filler).replace("-", filler)
                text = "-" + rest
            else:
                text = text.replace(" ", filler)
        self.print_text(text, x, y)

    # -- lines ----------------------------------------------------------

    def _hline(self, x: int, y: int, length: int, on: bool) -> None:
        if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
            return
        start = (y // 8) * WIDTH + x
        mask = 1 << (y % 8)
        for index in range(start, min(start + length, BUFFER_SIZE)):
            if on:
                self._buffer[index] |= mask
            else:
                self._buffer[index] &= ~mask & 0xFF

    def _vline(self, x: int, y: int, length: int, on: bool) -> None:
        if not (0 <= x < WIDTH and 0 <= y < HEIGHT):
            return
        for row in range(length):
            self._pixel(x, y + row, on)

    def _line(self, x1: Number, y1: Number, x2: Number, y2: Number,
              on: bool) -> None:
        x1, y1, x2, y2 = int(x1), int(y1), int(x2), int(y2)
        if x2 - x1 < 0:
            x1, y1, x2, y2 = x2, y2, x1, y1
        if y2 - y1 < 0:
            x1, y1, x2, y2 = x2, y2, x1, y1
        if y1 == y2:
            if x1 > x2:
                x1, x2 = x2, x1
            self._hline(x1, y1, x2 - x1, on)
        elif x1 == x2:
            self._vline(x1, y1, y2 - y1, on)
        elif abs(x2 - x1) > abs(y2 - y1):
            delta = (y2 - y1) / (x2 - x1)
            ty = float(y1)
            if x1 > x2:
                for column in range(x1, x2 - 1, -1):
                    self._pixel(column, int(ty + 0.5), on)
                    ty -= delta
            else:
                for column in range(x1, x2 + 1):
                    self._pixel(column, int(ty + 0.5), on)
                    ty += delta
        else:
            delta = (x2 - x1) / (y2 - y1)
            tx = float(x1)
            for row in range(y1, y2 + 1):
                self._pixel(int(tx + 0.5), row, on)
                tx += delta

    def draw_line(self, x1: Number, y1: Number, x2: Number, y2: Number) -> None:
        self._line(x1, y1, x2, y2, True)

    def clear_line(self, x1: Number, y1: Number, x2: Number, y2: Number) -> None:
        self._line(x1, y1, x2, y2, False)

    # -- rectangles -----------------------------------------------------

    @staticmethod
    def _ordered(x1: Number, y1: Number, x2: Number, y2: Number) -> tuple:
        x1, y1, x2, y2 = int(x1), int(y1), int(x2), int(y2)
        return min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2)

    def _rect(self, x1, y1, x2, y2, on: bool) -> None:
        x1, y1, x2, y2 = self._ordered(x1, y1, x2, y2)
        self._hline(x1, y1, x2 - x1, on)
        self._hline(x1, y2, x2 - x1, on)
        self._vline(x1, y1, y2 - y1, on)
        self._vline(x2, y1, y2 - y1 + 1, on)

    def draw_rect(self, x1: Number, y1: Number, x2: Number, y2: Number) -> None:
        self._rect(x1, y1, x2, y2, True)

    def clear_rect(self, x1: Number, y1: Number, x2: Number, y2: Number) -> None:
        self._rect(x1, y1, x2, y2, False)

    def _round_rect(self, x1, y1, x2, y2, on: bool) -> None:
        x1, y1, x2, y2 = self._ordered(x1, y1, x2, y2)
        if x2 - x1 > 4 and y2 - y1 > 4:
            self._pixel(x1 + 1, y1 + 1, on)
            self._pixel(x2 - 1, y1 + 1, on)
            self._pixel(x1 + 1, y2 - 1, on)
            self._pixel(x2 - 1, y2 - 1, on)
            self._hline(x1 + 2, y1, x2 - x1 - 3, on)
            self._hline(x1 + 2, y2, x2 - x1 - 3, on)
            self._vline(x1, y1 + 2, y2 - y1 - 3, on)
            self._vline(x2, y1 + 2, y2 - y1 - 3, on)

    def draw_round_rect(self, x1: Number, y1: Number,
                        x2: Number, y2: Number) -> None:
        self._round_rect(x1, y1, x2, y2, True)

    def clear_round_rect(self, x1: Number, y1: Number,
                         x2: Number, y2: Number) -> None:
        self._round_rect(x1, y1, x2, y2, False)

    # -- circles --------------------------------------------------------

    def _circle(self, x: Number, y: Number, radius: Number, on: bool) -> None:
        x, y, radius = int(x), int(y), int(radius)
        f = 1 - radius
        ddf_x = 1
        ddf_y = -2 * radius
        cx, cy = 0, radius
        self._pixel(x, y + radius, on)
        self._pixel(x, y - radius, on)
        self._pixel(x + radius, y, on)
        self._pixel(x - radius, y, on)
        while cx < cy:
            if f >= 0:
                cy -= 1
                ddf_y += 2
                f += ddf_y
            cx += 1
            ddf_x += 2
            f += ddf_x
            for px, py in (
                (x + cx, y + cy), (x - cx, y + cy),
                (x + cx, y - cy), (x - cx, y - cy),
                (x + cy, y + cx), (x - cy, y + cx),
                (x + cy, y - cx), (x - cy, y - cx),
            ):
                self._pixel(px, py, on)

    def draw_circle(self, x: Number, y: Number, radius: Number) -> None:
        self._circle(x, y, radius, True)

    def clear_circle(self, x: Number, y: Number, radius: Number) -> None:
        self._circle(x, y, radius, False)

    # -- bitmaps --------------------------------------------------------

    def draw_bitmap(self, x: Number, y: Number,
                    bitmap: Union[bytes, Sequence[int], Iterable[int]],
                    sx: int, sy: int) -> None:
        """Copy an ``sx`` by ``sy`` bitmap stored in page layout."""
        data = bytes(bitmap)
        x, y = int(x), int(y)
        for row in range(sy):
            mask = 1 << (row % 8)
            for col in range(sx):
                on = bool(data[col + (row // 8) * sx] & mask)
                self._pixel(x + col, y + row, on)

    # -- inspection -----------------------------------------------------

    def to_text(self) -> str:
        """Render the frame buffer as rows of '#' (lit) and '.' (dark)."""
        return "\n".join(
            "".join("#" if self.get_pixel(x, y) else "." for x in range(WIDTH))
            for y in range(HEIGHT)
        )