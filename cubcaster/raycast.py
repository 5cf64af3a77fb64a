"""Ray casting of the first-person view over a tile map."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from cubcaster.canvas import HEIGHT, WIDTH, Canvas
from cubcaster.errors import CubError, ErrorKind
from cubcaster.header import Textures
from cubcaster.xpm import XpmImage, load_xpm

PLANE_LENGTH = math.tan(math.pi / 6)
"""Half-width of the camera plane, giving a 60 degree field of view."""

EPSILON = 1e-6
_NO_DELTA = 1e30
_TEXTURE_KEYS = ("NO", "SO", "WE", "EA")


@dataclass
class Player:
    """Position in pixels, facing direction and camera plane."""

    pos_x: float
    pos_y: float
    angle: float = 0.0
    dir_x: float = 1.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0

    def reset_plane(self) -> None:
        """Set the camera plane perpendicular to the facing direction."""
        self.plane_x = self.dir_y * PLANE_LENGTH
        self.plane_y = -self.dir_x * PLANE_LENGTH

    def rotate(self, angle: float) -> None:
        """Turn direction and camera plane by angle radians."""
        c, s = math.cos(angle), math.sin(angle)
        self.dir_x, self.dir_y = self.dir_x * c - self.dir_y * s, self.dir_x * s + self.dir_y * c
        self.plane_x, self.plane_y = (
            self.plane_x * c - self.plane_y * s,
            self.plane_x * s + self.plane_y * c,
        )


@dataclass(frozen=True)
class RayHit:
    """Where a ray met a wall.

    ``map_x``/``map_y`` are the pixel coordinates reached; ``side`` is 0 for
    a crossing along x and 1 along y. ``distance`` is the raw stepping
    distance and ``perp_dist`` that distance divided by the tile size.
    """

    pos_x: float
    pos_y: float
    ray_x: float
    ray_y: float
    map_x: int
    map_y: int
    side: int
    distance: float
    perp_dist: float


@dataclass(frozen=True)
class WallSlice:
    """The vertical extent of one wall column on screen."""

    perp_dist: float
    line_height: int
    draw_start: int
    draw_end: int


@dataclass(frozen=True)
class WallTextures:
    """The four wall images, in the order north, south, west, east."""

    north: XpmImage
    south: XpmImage
    west: XpmImage
    east: XpmImage

    @classmethod
    def load(cls, textures: Textures) -> "WallTextures":
        """Load the images named by the scene's texture entries."""
        images = []
        for entry in (textures.north, textures.south, textures.west, textures.east):
            try:
                images.append(load_xpm(clean_texture_path(entry)))
            except (OSError, ValueError) as exc:
                raise CubError(ErrorKind.INVALID_TEXTURE) from exc
        return cls(*images)

    def select(self, hit: RayHit) -> XpmImage:
        """Return the image for the wall face a ray hit."""
        if hit.side == 0:
            return self.north if hit.ray_x > 0 else self.south
        return self.west if hit.ray_y > 0 else self.east


def direction_for_angle(angle: float) -> tuple[float, float]:
    """Return the unit direction for one of the four starting angles."""
    if angle == 0:
        return (1.0, 0.0)
    if angle == math.pi / 2:
        return (0.0, 1.0)
    if angle == math.pi:
        return (-1.0, 0.0)
    if angle == 3 * math.pi / 2:
        return (0.0, -1.0)
    raise ValueError(f"no starting direction for angle {angle!r}")


def compute_tile_size(max_width: int, rows: int) -> int:
    """Return the largest tile size that fits the map in the window."""
    return min(WIDTH // max_width - 1, HEIGHT // rows - 1)


def clean_texture_path(path: str) -> str:
    """Strip leading blanks and a NO/SO/WE/EA key from a texture entry."""
    i = 0
    while i < len(path) and path[i] in " \tNOSEW/":
        if path[i] in " \t":
            i += 1
            continue
        if path.startswith(_TEXTURE_KEYS, i):
            i += 2
            while i < len(path) and path[i] in " \t":
                i += 1
        break
    return path[i:]


def cast_ray(player: Player, layout: Sequence[str], tile_size: int, camera_x: float) -> RayHit:
    """Step a ray pixel by pixel from the player until it enters a wall tile."""
    ray_x = player.dir_x + player.plane_x * camera_x
    ray_y = player.dir_y + player.plane_y * camera_x
    map_x = int(player.pos_x)
    map_y = int(player.pos_y)
    if ray_x < 0:
        step_x, side_x = -1, player.pos_x - map_x
    else:
        step_x, side_x = 1, map_x + 1.0 - player.pos_x
    if ray_y < 0:
        step_y, side_y = -1, player.pos_y - map_y
    else:
        step_y, side_y = 1, map_y + 1.0 - player.pos_y
    delta_x = _NO_DELTA if ray_x == 0 else abs(1 / ray_x)
    delta_y = _NO_DELTA if ray_y == 0 else abs(1 / ray_y)
    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        cell_x, cell_y = map_x // tile_size, map_y // tile_size
        if not (0 <= cell_y < len(layout) and 0 <= cell_x < len(layout[cell_y])):
            raise ValueError("ray left the map without hitting a wall")
        if layout[cell_y][cell_x] == "1":
            break
    distance = side_x - delta_x if side == 0 else side_y - delta_y
    return RayHit(
        player.pos_x, player.pos_y, ray_x, ray_y, map_x, map_y, side,
        distance, distance / tile_size,
    )


def wall_slice(hit: RayHit, tile_size: int) -> WallSlice:
    """Work out the height and clipped screen rows of the wall column."""
    perp = hit.distance / tile_size
    line_height = int(HEIGHT / (perp if perp > 0 else EPSILON))
    draw_start = max(-(line_height // 2) + HEIGHT // 2, 0)
    draw_end = min(line_height // 2 + HEIGHT // 2, HEIGHT - 1)
    return WallSlice(perp, line_height, draw_start, draw_end)


def texture_column(hit: RayHit, texture: XpmImage) -> int:
    """Return the texture column that the hit point maps to."""
    if hit.side == 0:
        wall_x = hit.pos_y + hit.perp_dist * hit.ray_y
    else:
        wall_x = hit.pos_x + hit.perp_dist * hit.ray_x
    wall_x -= math.floor(wall_x)
    column = int(wall_x * texture.width)
    if (hit.side == 0 and hit.ray_x > 0) or (hit.side == 1 and hit.ray_y < 0):
        column = texture.width - column - 1
    return column


def render_view(
    canvas: Canvas,
    player: Player,
    layout: Sequence[str],
    tile_size: int,
    textures: WallTextures,
    floor: int,
    ceiling: int,
) -> None:
    """Draw ceiling, textured walls and floor for every screen column."""
    for x in range(WIDTH):
        camera_x = 2 * x / WIDTH - 1
        hit = cast_ray(player, layout, tile_size, camera_x)
        piece = wall_slice(hit, tile_size)
        for y in range(piece.draw_start):
            canvas.put_pixel(x, y, ceiling)
        texture = textures.select(hit)
        tex_x = texture_column(hit, texture) % texture.width
        step = texture.height / piece.line_height
        tex_pos = (piece.draw_start - HEIGHT // 2 + piece.line_height // 2) * step
        y = piece.draw_start
        while y < piece.draw_end:
            tex_y = int(tex_pos) % texture.height
            tex_pos += step
            color = texture.pixels[tex_y * texture.width + tex_x]
            if hit.side == 1:
                color = (color >> 1) & 0x7F7F7F
            canvas.put_pixel(x, y, color)
            y += 1
        for y in range(y, HEIGHT):
            canvas.put_pixel(x, y, floor)


def try_move(player: Player, layout: Sequence[str], tile_size: int, new_x: float, new_y: float) -> bool:
    """Move the player unless the target lies in a wall; return whether it moved."""
    cell_x = int(new_x / tile_size)
    cell_y = int(new_y / tile_size)
    if layout[cell_y][cell_x] == "1":
        return False
    player.pos_x = new_x
    player.pos_y = new_y
    return True