"""Bitmap fonts for the 128x64 monochrome display.

A font is stored as a four-byte header (glyph width, glyph height, code of the
first character, number of characters) followed by the glyph data.  Glyphs
whose height is a multiple of eight are stored as vertical byte columns, one
band of eight rows after another; other glyphs are a packed bit stream read
column by column, most significant bit first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

HEADER_SIZE = 4

CharLike = Union[str, int]


@dataclass(frozen=True)
class Font:
    """A fixed-width bitmap font."""

    x_size: int
    y_size: int
    offset: int
    numchars: int
    data: bytes

    def __post_init__(self) -> None:
        if self.x_size <= 0 or self.y_size <= 0:
            raise ValueError("font glyph width and height must be positive")
        if self.numchars < 0:
            raise ValueError("font character count must not be negative")
        needed = self.numchars * self.glyph_size
        if len(self.data) < needed:
            raise ValueError(
                f"font data holds {len(self.data)} bytes, {needed} are needed"
            )

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, Iterable[int]]) -> "Font":
        """Build a font from its header followed by its glyph data."""
        raw = bytes(data)
        if len(raw) < HEADER_SIZE:
            raise ValueError("font data is shorter than its header")
        x_size, y_size, offset, numchars = raw[:HEADER_SIZE]
        return cls(x_size, y_size, offset, numchars, raw[HEADER_SIZE:])

    @property
    def byte_aligned(self) -> bool:
        """True when glyphs are stored as whole bands of eight rows."""
        return self.y_size % 8 == 0

    @property
    def glyph_size(self) -> int:
        """Number of bytes between the starts of two consecutive glyphs."""
        if self.byte_aligned:
            return self.x_size * (self.y_size // 8)
        return self.x_size * self.y_size // 8

    def glyph_bytes(self, char: CharLike) -> bytes:
        """Return the stored bytes of one character's glyph."""
        if isinstance(char, str):
            if len(char) != 1:
                raise ValueError("a glyph is looked up by exactly one character")
            code = ord(char)
        elif isinstance(char, int) and not isinstance(char, bool):
            code = char
        else:
            raise TypeError("a glyph is looked up by a character or its code")
        index = code - self.offset
        if not 0 <= index < self.numchars:
            raise ValueError(f"character code {code} is not in this font")
        start = index * self.glyph_size
        return self.data[start:start + self.glyph_size]


SMALL_FONT = Font.from_bytes(bytes.fromhex("""
06 08 20 5f
00 00 00 00 00 00  00 00 00 2f 00 00  00 00 07 00 07 00  00 14 7f 14 7f 14
00 24 2a 7f 2a 12  00 23 13 08 64 62  00 36 49 55 22 50  00 00 05 03 00 00
00 00 1c 22 41 00  00 00 41 22 1c 00  00 14 08 3e 08 14  00 08 08 3e 08 08
00 00 00 a0 60 00  00 08 08 08 08 08  00 00 60 60 00 00  00 20 10 08 04 02
00 3e 51 49 45 3e  00 00 42 7f 40 00  00 42 61 51 49 46  00 21 41 45 4b 31
00 18 14 12 7f 10  00 27 45 45 45 39  00 3c 4a 49 49 30  00 01 71 09 05 03
00 36 49 49 49 36  00 06 49 49 29 1e  00 00 36 36 00 00  00 00 56 36 00 00
00 08 14 22 41 00  00 14 14 14 14 14  00 00 41 22 14 08  00 02 01 51 09 06
00 32 49 59 51 3e  00 7c 12 11 12 7c  00 7f 49 49 49 36  00 3e 41 41 41 22
00 7f 41 41 22 1c  00 7f 49 49 49 41  00 7f 09 09 09 01  00 3e 41 49 49 7a
00 7f 08 08 08 7f  00 00 41 7f 41 00  00 20 40 41 3f 01  00 7f 08 14 22 41
00 7f 40 40 40 40  00 7f 02 0c 02 7f  00 7f 04 08 10 7f  00 3e 41 41 41 3e
00 7f 09 09 09 06  00 3e 41 51 21 5e  00 7f 09 19 29 46  00 46 49 49 49 31
00 01 01 7f 01 01  00 3f 40 40 40 3f  00 1f 20 40 20 1f  00 3f 40 38 40 3f
00 63 14 08 14 63  00 07 08 70 08 07  00 61 51 49 45 43  00 00 7f 41 41 00
aa 55 aa 55 aa 55  00 00 41 41 7f 00  00 04 02 01 02 04  00 40 40 40 40 40
00 00 03 05 00 00  00 20 54 54 54 78  00 7f 48 44 44 38  00 38 44 44 44 20
00 38 44 44 48 7f  00 38 54 54 54 18  00 08 7e 09 01 02  00 18 a4 a4 a4 7c
00 7f 08 04 04 78  00 00 44 7d 40 00  00 40 80 84 7d 00  00 7f 10 28 44 00
00 00 41 7f 40 00  00 7c 04 18 04 78  00 7c 08 04 04 78  00 38 44 44 44 38
00 fc 24 24 24 18  00 18 24 24 18 fc  00 7c 08 04 04 08  00 48 54 54 54 20
00 04 3f 44 40 20  00 3c 40 40 20 7c  00 1c 20 40 20 1c  00 3c 40 30 40 3c
00 44 28 10 28 44  00 1c a0 a0 a0 7c  00 44 64 54 4c 44  00 00 10 7c 82 00
00 00 00 ff 00 00  00 00 82 7c 10 00  00 00 06 09 09 06
"""))

MEDIUM_NUMBERS = Font.from_bytes(bytes.fromhex("""
0c 10 2d 0d
00 00 00 80 80 80 80 80 80 00 00 00  00 00 01 03 03 03 03 03 03 01 00 00
00 00 00 00 00 00 00 00 00 00 00 00  00 00 00 00 00 c0 c0 00 00 00 00 00
00 00 02 86 86 86 86 86 86 02 00 00  00 00 81 c3 c3 c3 c3 c3 c3 81 00 00
00 fc 7a 06 06 06 06 06 06 7a fc 00  00 7e bc c0 c0 c0 c0 c0 c0 bc 7e 00
00 00 00 00 00 00 00 00 00 78 fc 00  00 00 00 00 00 00 00 00 00 3c 7e 00
00 00 02 86 86 86 86 86 86 7a fc 00  00 7e bd c3 c3 c3 c3 c3 c3 81 00 00
00 00 02 86 86 86 86 86 86 7a fc 00  00 00 81 c3 c3 c3 c3 c3 c3 bd 7e 00
00 fc 78 80 80 80 80 80 80 78 fc 00  00 00 01 03 03 03 03 03 03 3d 7e 00
00 fc 7a 86 86 86 86 86 86 02 00 00  00 00 81 c3 c3 c3 c3 c3 c3 bd 7e 00
00 fc 7a 86 86 86 86 86 86 02 00 00  00 7e bd c3 c3 c3 c3 c3 c3 bd 7e 00
00 00 02 06 06 06 06 06 06 7a fc 00  00 00 00 00 00 00 00 00 00 3c 7e 00
00 fc 7a 86 86 86 86 86 86 7a fc 00  00 7e bd c3 c3 c3 c3 c3 c3 bd 7e 00
00 fc 7a 86 86 86 86 86 86 7a fc 00  00 00 81 c3 c3 c3 c3 c3 c3 bd 7e 00
"""))

BIG_NUMBERS = Font.from_bytes(bytes.fromhex("""
0e 18 2d 0d
00 00 00 00 00 00 00 00 00 00 00 00 00 00
00 00 10 38 38 38 38 38 38 38 38 10 00 00
00 00 00 00 00 00 00 00 00 00 00 00 00 00

00 00 00 00 00 00 00 00 00 00 00 00 00 00
00 00 00 00 00 00 00 00 00 00 00 00 00 00
00 00 00 00 00 40 e0 e0 40 00 00 00 00 00

00 00 02 06 0e 0e 0e 0e 0e 0e 06 02 00 00
00 00 10 38 38 38 38 38 38 38 38 10 00 00
00 00 80 c0 e0 e0 e0 e0 e0 e0 c0 80 00 00

00 fc fa f6 0e 0e 0e 0e 0e 0e f6 fa fc 00
00 ef c7 83 00 00 00 00 00 00 83 c7 ef 00
00 7f bf df e0 e0 e0 e0 e0 e0 df bf 7f 00

00 00 00 00 00 00 00 00 00 00 f0 f8 fc 00
00 00 00 00 00 00 00 00 00 00 83 c7 ef 00
00 00 00 00 00 00 00 00 00 00 1f 3f 7f 00

00 00 02 06 0e 0e 0e 0e 0e 0e f6 fa fc 00
00 e0 d0 b8 38 38 38 38 38 38 3b 17 0f 00
00 7f bf df e0 e0 e0 e0 e0 e0 c0 80 00 00

00 00 02 06 0e 0e 0e 0e 0e 0e f6 fa fc 00
00 00 10 38 38 38 38 38 38 38 bb d7 ef 00
00 00 80 c0 e0 e0 e0 e0 e0 e0 df bf 7f 00

00 fc f8 f0 00 00 00 00 00 00 f0 f8 fc 00
00 0f 17 3b 38 38 38 38 38 38 bb d7 ef 00
00 00 00 00 00 00 00 00 00 00 1f 3f 7f 00

00 fc fa f6 0e 0e 0e 0e 0e 0e 06 02 00 00
00 0f 17 3b 38 38 38 38 38 38 b8 d0 e0 00
00 00 80 c0 e0 e0 e0 e0 e0 e0 df bf 7f 00

00 fc fa f6 0e 0e 0e 0e 0e 0e 06 02 00 00
00 ef d7 bb 38 38 38 38 38 38 b8 d0 e0 00
00 7f bf df e0 e0 e0 e0 e0 e0 df bf 7f 00

00 00 02 06 0e 0e 0e 0e 0e 0e f6 fa fc 00
00 00 00 00 00 00 00 00 00 00 83 c7 ef 00
00 00 00 00 00 00 00 00 00 00 1f 3f 7f 00

00 fc fa f6 0e 0e 0e 0e 0e 0e f6 fa fc 00
00 ef d7 bb 38 38 38 38 38 38 bb d7 ef 00
00 7f bf df e0 e0 e0 e0 e0 e0 df bf 7f 00

00 fc fa f6 0e 0e 0e 0e 0e 0e f6 fa fc 00
00 0f 17 3b 38 38 38 38 38 38 bb d7 ef 00
00 00 80 c0 e0 e0 e0 e0 e0 e0 df bf 7f 00
"""))

TINY_FONT = Font.from_bytes(bytes.fromhex("""
04 06 20 5f
00 00 00 03 a0 00 c0 0c 00 f9 4f 80 6b eb 00 98 8c 80 52 a5 80 03 00 00
01 c8 80 89 c0 00 50 85 00 21 c2 00 08 40 00 20 82 00 00 20 00 18 8c 00
fa 2f 80 4b e0 80 5a 66 80 8a a5 00 e0 8f 80 ea ab 00 72 a9 00 9a 8c 00
fa af 80 4a a7 00 01 40 00 09 40 00 21 48 80 51 45 00 89 42 00 42 66 00
72 a6 80 7a 87 80 fa a5 00 72 25 00 fa 27 00 fa a8 80 fa 88 00 72 2b 00
f8 8f 80 8b e8 80 8b e8 00 f8 8d 80 f8 20 80 f9 0f 80 f9 cf 80 72 27 00
fa 84 00 72 27 40 fa 85 80 4a a9 00 83 e8 00 f0 2f 00 e0 6e 00 f0 ef 00
d8 8d 80 c0 ec 00 9a ac 80 03 e8 80 c0 81 80 8b e0 00 42 04 00 08 20 80
02 04 00 31 23 80 f9 23 00 31 24 80 31 2f 80 31 62 80 23 ea 00 25 53 80
f9 03 80 02 e0 00 06 e0 00 f8 42 80 03 e0 00 79 87 80 39 03 80 31 23 00
7d 23 00 31 27 c0 78 84 00 29 40 00 43 e4 00 70 27 00 60 66 00 70 67 00
48 c4 80 74 57 80 59 e6 80 23 e8 80 03 60 00 8b e2 00 61 0c 00
"""))