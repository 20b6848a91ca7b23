"""Maze support: grid coordinates and graph construction from a maze model."""

from .graph import MazeGraph, build_from_grid
from .models import Juncture, MazeModel

__all__ = [
    "Juncture",
    "MazeGraph",
    "MazeModel",
    "build_from_grid",
]
