"""Turning the map lines of a scene into a closed, validated grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from cubcaster.errors import CubError, ErrorKind
from cubcaster.header import is_space

_HEADER_PREFIXES = ("NO", "SO", "WE", "EA", "F", "C")
_MAP_LETTERS = frozenset("01NSWE")
_PLAYER_LETTERS = frozenset("NSWE")


@dataclass(frozen=True)
class MapLayout:
    """A validated map.

    ``rows`` are the processed map rows, with the player's letter still in
    place. ``width`` is the index of the last column of the longest source
    line; every column at or beyond it is treated as the map's edge.
    """

    rows: tuple[str, ...]
    width: int
    player_x: int
    player_y: int

    @property
    def height(self) -> int:
        """Number of map rows."""
        return len(self.rows)

    @property
    def player_facing(self) -> str:
        """The letter (N, S, W or E) the player starts on."""
        return self.rows[self.player_y][self.player_x]


def has_content(line: Optional[str]) -> bool:
    """Return True when a character at an even position is not a space or tab."""
    if not line:
        return False
    return any(c not in " \t" for c in line[::2])


def is_map_line(line: str) -> bool:
    """Return True for a line that belongs to the map rather than the header."""
    return has_content(line) and not line.startswith(_HEADER_PREFIXES)


def map_width(lines: Iterable[str]) -> int:
    """Return the index of the last character of the longest map line, or -1."""
    return max((len(line) - 1 for line in lines if is_map_line(line)), default=-1)


def count_rows(lines: Iterable[str]) -> int:
    """Return the number of map lines."""
    return sum(1 for line in lines if is_map_line(line))


def process_row(line: str, row: int, rows: int, width: int) -> str:
    """Normalise one map line.

    In the first and last rows every whitespace character becomes a wall and
    the row is padded with walls. In other rows the first character and every
    space become walls, other whitespace becomes floor, and the row is padded
    with floor. A closing wall is always appended.
    """
    if row == 0 or row == rows - 1:
        cells = "".join("1" if is_space(c) else c for c in line)
        pad = "1"
    else:
        cells = "".join(
            "1" if i == 0 or c == " " else "0" if is_space(c) else c
            for i, c in enumerate(line)
        )
        pad = "0"
    return cells + pad * max(0, width - len(cells)) + "1"


def find_player(rows: Sequence[str]) -> Optional[tuple[int, int]]:
    """Return the (x, y) of the only player letter, or None when there is none.

    A second player letter raises PLAYER_POSITION.
    """
    found: Optional[tuple[int, int]] = None
    for y, row in enumerate(rows):
        for x, c in enumerate(row):
            if c in _PLAYER_LETTERS:
                if found is not None:
                    raise CubError(ErrorKind.PLAYER_POSITION)
                found = (x, y)
    return found


def check_walls(rows: Sequence[str], height: int) -> None:
    """Raise NOT_ENCLOSED when floor lies in the first column or outer rows."""
    for y, row in enumerate(rows):
        for x, c in enumerate(row):
            if c == "0" and (y == 0 or y == height - 1 or x == 0):
                raise CubError(ErrorKind.NOT_ENCLOSED)


def check_enclosed(rows: Sequence[str], px: int, py: int, width: int, height: int) -> None:
    """Flood the area reachable from the player and make sure it is walled in.

    Raises NOT_ENCLOSED when the player stands on the edge or when floor on
    the edge of the map can be reached.
    """
    last_x = width
    last_y = height - 1
    if px <= 0 or py >= last_y or px >= last_x or py <= 0:
        raise CubError(ErrorKind.NOT_ENCLOSED)
    grid = [list(row) for row in rows]
    stack = [(px, py)]
    while stack:
        x, y = stack.pop()
        if y <= 0 or y >= last_y or x <= 0 or x >= last_x:
            if x >= 0 and y >= 0 and grid[y][x] == "0":
                raise CubError(ErrorKind.NOT_ENCLOSED)
            continue
        if grid[y][x] in ("1", "F"):
            continue
        grid[y][x] = "F"
        stack.extend(((x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)))


def build_layout(lines: Iterable[str]) -> MapLayout:
    """Build and validate the map from all lines of a scene.

    Header lines before the map are skipped; any non-map line after it raises
    MAP_NOT_LAST. Unknown letters raise INVALID_LETTER.
    """
    lines = list(lines)
    width = map_width(lines)
    total = count_rows(lines)
    rows: list[str] = []
    for line in lines:
        if not is_map_line(line):
            if rows:
                raise CubError(ErrorKind.MAP_NOT_LAST)
            continue
        row = process_row(line, len(rows), total, width)
        if any(c not in _MAP_LETTERS for c in row):
            raise CubError(ErrorKind.INVALID_LETTER)
        rows.append(row)
    player = find_player(rows)
    check_walls(rows, len(rows))
    px, py = player if player is not None else (-1, -1)
    check_enclosed(rows, px, py, width, len(rows))
    return MapLayout(tuple(rows), width, px, py)