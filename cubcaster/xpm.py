"""Reader for XPM images, the texture format used for the walls."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from cubcaster.colornames import lookup_color

TRANSPARENT = 0xFF000000
"""Pixel value stored for the colour "None"."""

_NAME_BUFFER = 63
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")
_STRTOL16 = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: pixels are 0xRRGGBB integers in row-major order."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y * self.width + x]


def split_words(text: str) -> list[str]:
    """Split text on spaces and tabs, dropping empty words."""
    return [word for word in re.split(r"[ \t]+", text) if word]


def _find_unquoted(text: str, find: str) -> int:
    in_quote = False
    for pos in range(len(text) - len(find) + 1):
        if text[pos] == '"':
            in_quote = not in_quote
        if not in_quote and text.startswith(find, pos):
            return pos
    return -1


def _blank(text: str, start: int, stop: int) -> str:
    stop = min(stop, len(text))
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside double quotes with spaces.

    Block comments are blanked first, then line comments together with
    the newline that ends them. The text keeps its length.
    """
    while (begin := _find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        text = _blank(text, begin, end + 2 if end != -1 else begin + 3)
    while (begin := _find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        text = _blank(text, begin, end + 1 if end != -1 else begin + 2)
    return text


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _strtol16(text: str) -> int:
    match = _STRTOL16.match(text)
    digits = match.group(2) if match else ""
    if not digits:
        return 0
    value = int(digits, 16)
    return -value if match.group(1) == "-" else value


def text_to_rgb(name: str, end: Optional[str] = None) -> int:
    """Turn a colour specification into 0xRRGGBB.

    "#rrggbb" is read as hexadecimal. Otherwise the name, joined with the
    following word when one is given, is looked up among the named colours;
    unknown names give 0 and "None" gives -1.
    """
    if name.startswith("#"):
        return _strtol16(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its strings: header, colour lines, pixel rows.

    Raises ValueError when the data is incomplete or malformed.
    """
    source = iter(lines)
    header = next(source, None)
    if header is None:
        raise ValueError("XPM data has no header")
    words = split_words(header)
    if len(words) < 4:
        raise ValueError(f"XPM header needs four values: {header!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise ValueError(f"invalid XPM header: {header!r}")

    # With one or two characters per pixel a later definition replaces an
    # earlier one; with wider keys the first definition is the one used.
    later_wins = cpp <= 2
    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = next(source, None)
        if line is None:
            raise ValueError("XPM data ends inside the colour table")
        tab = split_words(line[cpp:])
        try:
            value_at = tab.index("c") + 1
        except ValueError:
            raise ValueError(f"colour line without 'c' key: {line!r}") from None
        if value_at >= len(tab):
            raise ValueError(f"colour line without a value: {line!r}")
        following = tab[value_at + 1] if value_at + 1 < len(tab) else None
        rgb = text_to_rgb(tab[value_at], following)
        key = line[:cpp]
        if later_wins:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)

    pixels: list[int] = []
    for _ in range(height):
        line = next(source, None)
        if line is None:
            raise ValueError("XPM data ends inside the pixel rows")
        for x in range(width):
            col = colors.get(line[cpp * x:cpp * (x + 1)], 0)
            pixels.append(TRANSPARENT if col == -1 else col)
    return XpmImage(width, height, tuple(pixels))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the contents of an XPM file."""
    return parse_xpm_lines(_quoted_strings(strip_comments(text)))


def load_xpm(path: Union[str, Path]) -> XpmImage:
    """Read and decode an XPM file."""
    return parse_xpm_text(Path(path).read_text(encoding="latin-1"))