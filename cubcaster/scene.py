"""Loading a complete scene description from a .cub file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

from cubcaster.errors import CubError, ErrorKind
from cubcaster.header import Colors, Textures, parse_colors, parse_textures
from cubcaster.layout import MapLayout, build_layout

_BUFFER_SIZE = 1000

PathArg = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class Scene:
    """Wall textures, floor and ceiling colours, and the map of a scene."""

    textures: Textures
    colors: Colors
    layout: MapLayout


def check_cub_path(path: PathArg) -> str:
    """Check that path names a readable .cub file and return it as a string.

    A directory raises DIRECTORY; anything else that is not a readable file
    ending in ".cub" raises INVALID_FILE.
    """
    path = os.fspath(path)
    if os.path.isdir(path):
        raise CubError(ErrorKind.DIRECTORY)
    if len(path) < 4 or not path.endswith(".cub"):
        raise CubError(ErrorKind.INVALID_FILE)
    try:
        with open(path, "rb"):
            pass
    except OSError:
        raise CubError(ErrorKind.INVALID_FILE) from None
    return path


def _read_scene(path: str) -> str:
    # The file is read through one fixed buffer: each chunk overwrites the
    # start of the previous one, and the text ends at the first NUL byte.
    buffer = bytearray(_BUFFER_SIZE)
    try:
        with open(path, "rb") as handle:
            while chunk := handle.read(_BUFFER_SIZE):
                buffer[: len(chunk)] = chunk
    except OSError:
        raise CubError(ErrorKind.INVALID_FILE) from None
    return bytes(buffer).split(b"\0", 1)[0].decode("latin-1")


def parse_scene(text: str) -> Scene:
    """Parse the text of a scene: textures, then colours, then the map."""
    lines = [line for line in text.split("\n") if line]
    textures = parse_textures(lines)
    colors = parse_colors(lines)
    layout = build_layout(lines)
    return Scene(textures, colors, layout)


def load_scene(path: PathArg) -> Scene:
    """Validate the path, read the file and parse the scene it holds."""
    checked = check_cub_path(path)
    return parse_scene(_read_scene(checked))