"""Game state: the player on the map, key handling and frame rendering."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Optional

from cubcaster.canvas import FLOOR_COLOR, WALL_COLOR, Canvas
from cubcaster.raycast import (
    Player,
    WallTextures,
    compute_tile_size,
    direction_for_angle,
    render_view,
    try_move,
)
from cubcaster.scene import Scene

MOVE_SPEED = 8
"""Distance in pixels covered by one movement key press."""

TURN_STEP = math.pi / 12
"""Angle in radians turned by one arrow key press."""

_FACING_ANGLES = {
    "E": 0.0,
    "N": math.pi / 2,
    "W": math.pi,
    "S": 3 * math.pi / 2,
}


class Key(IntEnum):
    """Key codes understood by the game."""

    A = 0
    S = 1
    D = 2
    W = 13
    ESCAPE = 53
    LEFT = 123
    RIGHT = 124


_MOVE_KEYS = frozenset({Key.W, Key.A, Key.S, Key.D})


def new_position(keycode: int, player: Player) -> tuple[float, float]:
    """Return where a movement key would take the player.

    W steps forward, S backward, A and D sideways; other keys stay put.
    """
    x, y = player.pos_x, player.pos_y
    if keycode == Key.W:
        x += player.dir_x * MOVE_SPEED
        y += player.dir_y * MOVE_SPEED
    elif keycode == Key.A:
        x -= player.dir_y * MOVE_SPEED
        y += player.dir_x * MOVE_SPEED
    elif keycode == Key.S:
        x -= player.dir_x * MOVE_SPEED
        y -= player.dir_y * MOVE_SPEED
    elif keycode == Key.D:
        x += player.dir_y * MOVE_SPEED
        y -= player.dir_x * MOVE_SPEED
    return x, y


class Game:
    """A running scene: the map, the player and the frame being drawn."""

    def __init__(
        self,
        scene: Scene,
        textures: Optional[WallTextures] = None,
        canvas: Optional[Canvas] = None,
    ) -> None:
        self.scene = scene
        self.textures = textures if textures is not None else WallTextures.load(scene.textures)
        self.canvas = canvas if canvas is not None else Canvas()
        layout = scene.layout
        self.tile_size = compute_tile_size(layout.width, layout.height)
        if self.tile_size <= 0:
            raise ValueError("map is too large for the window")

        facing = layout.player_facing
        rows = list(layout.rows)
        row = rows[layout.player_y]
        rows[layout.player_y] = row[: layout.player_x] + "0" + row[layout.player_x + 1:]
        self.layout = rows

        half = self.tile_size / 2.0
        angle = _FACING_ANGLES[facing]
        dir_x, dir_y = direction_for_angle(angle)
        self.player = Player(
            pos_x=layout.player_x * self.tile_size + half,
            pos_y=layout.player_y * self.tile_size + half,
            angle=angle,
            dir_x=dir_x,
            dir_y=dir_y,
        )
        self.player.reset_plane()

    def handle_key(self, keycode: int) -> bool:
        """React to a key press; return False when the game should end."""
        if keycode == Key.ESCAPE:
            return False
        if keycode in _MOVE_KEYS:
            self.move(keycode)
        elif keycode == Key.LEFT:
            self.rotate(TURN_STEP)
        elif keycode == Key.RIGHT:
            self.rotate(-TURN_STEP)
        return True

    def move(self, keycode: int) -> bool:
        """Move the player for a movement key; return whether it moved."""
        new_x, new_y = new_position(keycode, self.player)
        return try_move(self.player, self.layout, self.tile_size, new_x, new_y)

    def rotate(self, angle: float) -> None:
        """Turn the player by angle radians."""
        self.player.rotate(angle)

    def render(self) -> Canvas:
        """Draw the mini-map and the first-person view; return the canvas."""
        canvas = self.canvas
        size = self.tile_size
        last = self.scene.layout.width
        for y, row in enumerate(self.layout):
            for x, cell in enumerate(row[: last + 1]):
                if cell == "1":
                    canvas.draw_square(x, y, size, WALL_COLOR)
                elif cell == "0":
                    canvas.draw_square(x, y, size, FLOOR_COLOR)
        canvas.draw_circle(int(self.player.pos_x), int(self.player.pos_y), size // 4)
        colors = self.scene.colors
        render_view(
            canvas,
            self.player,
            self.layout,
            size,
            self.textures,
            colors.floor,
            colors.ceiling,
        )
        return canvas