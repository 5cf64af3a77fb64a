"""Textured raycasting engine that loads, validates and plays .cub scene files."""

__version__ = "0.1.0"

__all__ = [
    "app",
    "canvas",
    "colornames",
    "errors",
    "game",
    "header",
    "layout",
    "raycast",
    "scene",
    "xpm",
]