"""Parsing of the scene header: wall textures and floor/ceiling colours."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Iterable, Optional

from cubcaster.errors import CubError, ErrorKind

_SPACES = " \t\n\v\f\r"
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")

_TEXTURE_KEYS = {"NO": "north", "SO": "south", "WE": "west", "EA": "east"}

# Components are filled from the end of a colour entry backwards.
_COMPONENT_ORDER = ("b", "g", "r")


@dataclass(frozen=True)
class Textures:
    """The four wall texture entries, each kept as written from its key on."""

    north: str
    south: str
    west: str
    east: str


@dataclass(frozen=True)
class Colors:
    """Floor and ceiling colours as 0xRRGGBB integers."""

    floor: int
    ceiling: int


def is_space(c: str) -> bool:
    """Return True for a single whitespace character."""
    return len(c) == 1 and c in _SPACES


def is_blank(s: Optional[str]) -> bool:
    """Return True when s is None or holds only whitespace."""
    if s is None:
        return True
    return all(is_space(c) for c in s)


def combine_rgb(r: int, g: int, b: int) -> int:
    """Pack red, green and blue into a 0xRRGGBB integer."""
    return (r << 16) | (g << 8) | b


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def check_xpm_path(path: str) -> str:
    """Check that path names a readable .xpm file and return it.

    A directory raises DIRECTORY; anything else that is not a readable
    file ending in ".xpm" raises INVALID_TEXTURE.
    """
    if os.path.isdir(path):
        raise CubError(ErrorKind.DIRECTORY)
    if len(path) < 4 or not path.endswith(".xpm"):
        raise CubError(ErrorKind.INVALID_TEXTURE)
    try:
        with open(path, "rb"):
            pass
    except OSError:
        raise CubError(ErrorKind.INVALID_TEXTURE) from None
    return path


def _save_texture(entry: str, key: str, found: dict[str, str]) -> None:
    if key in found:
        raise CubError(ErrorKind.INVALID_TEXTURE)
    found[key] = entry
    dot = entry.find(".")
    if dot == -1:
        raise CubError(ErrorKind.INVALID_TEXTURE)
    check_xpm_path(entry[dot:])


def parse_textures(lines: Iterable[str]) -> Textures:
    """Find the NO, SO, WE and EA entries among the scene lines.

    Every occurrence of a key in a line starts an entry running to the end
    of that line; its path begins at the first '.' after the key. A key seen
    twice raises INVALID_TEXTURE and a key never seen raises MISSING_TEXTURE.
    """
    found: dict[str, str] = {}
    for line in lines:
        for i in range(len(line) - 1):
            key = line[i:i + 2]
            if key in _TEXTURE_KEYS:
                _save_texture(line[i:], key, found)
    if any(key not in found for key in _TEXTURE_KEYS):
        raise CubError(ErrorKind.MISSING_TEXTURE)
    return Textures(**{attr: found[key] for key, attr in _TEXTURE_KEYS.items()})


def _store_colors(entry: str, slots: dict[str, list[int]]) -> None:
    component = 0
    for pos in range(len(entry) - 1, -1, -1):
        if entry[pos] not in "FC,":
            continue
        value = _atoi(entry[pos + 1:])
        if 0 <= value < 256:
            if component >= len(_COMPONENT_ORDER):
                raise CubError(ErrorKind.INVALID_COLOR)
            channel = slots.setdefault(_COMPONENT_ORDER[component], [])
            if len(channel) < 2:
                channel.append(value)
        component += 1


def parse_colors(lines: Iterable[str]) -> Colors:
    """Read the floor (F) and ceiling (C) colours from the scene lines.

    The first colour entry read fills the first slot of each component and
    the second fills the second. When any 'F' was seen the first slot is
    the floor, otherwise the ceiling. More than three components raise
    INVALID_COLOR; a missing or out-of-range component raises MISSING_COLOR.
    """
    slots: dict[str, list[int]] = {}
    floor_seen = False
    for line in lines:
        for i in range(len(line) - 1):
            ch = line[i]
            if ch in "FC":
                if ch == "F":
                    floor_seen = True
                _store_colors(line[i:], slots)
    if any(len(slots.get(name, [])) < 2 for name in _COMPONENT_ORDER):
        raise CubError(ErrorKind.MISSING_COLOR)
    first = combine_rgb(slots["r"][0], slots["g"][0], slots["b"][0])
    second = combine_rgb(slots["r"][1], slots["g"][1], slots["b"][1])
    if floor_seen:
        return Colors(floor=first, ceiling=second)
    return Colors(floor=second, ceiling=first)