"""Errors reported while loading and validating a scene."""

from __future__ import annotations

from enum import IntEnum


class ErrorKind(IntEnum):
    """The kinds of failure, each with the message shown to the user."""

    ALLOCATION = 0
    DIRECTORY = 1
    INVALID_FILE = 2
    INVALID_TEXTURE = 3
    MISSING_TEXTURE = 4
    INVALID_COLOR = 5
    MISSING_COLOR = 6
    INVALID_LETTER = 7
    PLAYER_POSITION = 8
    MAP_NOT_LAST = 9
    NOT_ENCLOSED = 10

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ErrorKind.ALLOCATION: "Failed to allocate for memory",
    ErrorKind.DIRECTORY: "Is a directory",
    ErrorKind.INVALID_FILE: "Invalid file entered",
    ErrorKind.INVALID_TEXTURE: "Invalid texture",
    ErrorKind.MISSING_TEXTURE: "Texture missing",
    ErrorKind.INVALID_COLOR: "Invalid color",
    ErrorKind.MISSING_COLOR: "Color is missing or Invalid color",
    ErrorKind.INVALID_LETTER: "Invalid letter",
    ErrorKind.PLAYER_POSITION: "Error player position",
    ErrorKind.MAP_NOT_LAST: "Map element has to be last and empty line",
    ErrorKind.NOT_ENCLOSED: "Player is not surrounded by walls",
}


class CubError(Exception):
    """A scene could not be loaded; the program exits with status 1."""

    exit_status = 1

    def __init__(self, kind: ErrorKind) -> None:
        self.kind = kind
        super().__init__(kind.message)