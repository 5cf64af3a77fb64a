"""An in-memory frame buffer with the drawing primitives of the mini-map."""

from __future__ import annotations

import sys
from array import array

WIDTH = 600
"""Width of the game window in pixels."""

HEIGHT = 600
"""Height of the game window in pixels."""

WALL_COLOR = 0x0000FF
FLOOR_COLOR = 0x000000
BORDER_COLOR = 0x000000
PLAYER_COLOR = 0xFF0000

_TYPECODE = "I" if array("I").itemsize == 4 else "L"


class Canvas:
    """A width x height grid of 0xRRGGBB pixels, row-major."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT, color: int = 0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = array(_TYPECODE, [color & 0xFFFFFFFF]) * (width * height)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the canvas are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self._pixels[y * self.width + x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour at (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        return self._pixels[y * self.width + x]

    def clear(self, color: int = 0) -> None:
        """Fill the whole canvas with one colour."""
        self._pixels = array(_TYPECODE, [color & 0xFFFFFFFF]) * (self.width * self.height)

    def draw_square(self, col: int, row: int, tile_size: int, color: int) -> None:
        """Draw the map tile at (col, row): a filled square with a black border."""
        left = col * tile_size + 1
        top = row * tile_size + 1
        for dy in range(tile_size):
            for dx in range(tile_size):
                self.put_pixel(left + dx, top + dy, color)
        last = tile_size - 1
        for i in range(tile_size):
            self.put_pixel(left + i, top, BORDER_COLOR)
            self.put_pixel(left + i, top + last, BORDER_COLOR)
            self.put_pixel(left, top + i, BORDER_COLOR)
            self.put_pixel(left + last, top + i, BORDER_COLOR)

    def draw_circle(self, cx: int, cy: int, radius: int, color: int = PLAYER_COLOR) -> None:
        """Fill the disc of the given radius centred on (cx, cy)."""
        limit = radius * radius
        for dy in range(-radius, radius + 1):
            for dx in range(-radius, radius + 1):
                if dx * dx + dy * dy <= limit:
                    self.put_pixel(cx + dx, cy + dy, color)

    def to_rgb_bytes(self) -> bytes:
        """Return the pixels as packed 8-bit R, G, B triples, row by row."""
        data = array(_TYPECODE, self._pixels)
        if sys.byteorder == "big":
            data.byteswap()
        raw = data.tobytes()
        rgb = bytearray(len(self._pixels) * 3)
        rgb[0::3] = raw[2::4]
        rgb[1::3] = raw[1::4]
        rgb[2::3] = raw[0::4]
        return bytes(rgb)