"""Fixtures for maze graph tests."""

from typing import Dict, FrozenSet, Iterable, Optional

import pytest

from mazegraph.maze.models import Juncture


def _passage(a: Juncture, b: Juncture) -> FrozenSet[Juncture]:
    """Unordered key for the passage between two adjacent junctures."""
    return frozenset((a, b))


class GridMaze:
    """
    In-memory maze model for tests.

    Every passage is open unless listed in ``walls``. The outer boundary is
    walled unless ``open_boundary`` is set, in which case the maze claims
    there is no wall above the top row or left of the leftmost column.
    """

    def __init__(
        self,
        width: int,
        height: int,
        walls: Iterable[FrozenSet[Juncture]] = (),
        weights: Optional[Dict[FrozenSet[Juncture], int]] = None,
        default_weight: int = 1,
        open_boundary: bool = False,
    ):
        self._width = width
        self._height = height
        self.walls = set(walls)
        self.weights = weights or {}
        self.default_weight = default_weight
        self.open_boundary = open_boundary
        self.queries = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def is_wall_above(self, juncture: Juncture) -> bool:
        self.queries.append(("wall_above", juncture))
        if juncture.y == 0:
            return not self.open_boundary
        return _passage(juncture, juncture.above()) in self.walls

    def is_wall_to_left(self, juncture: Juncture) -> bool:
        self.queries.append(("wall_left", juncture))
        if juncture.x == 0:
            return not self.open_boundary
        return _passage(juncture, juncture.left()) in self.walls

    def weight_above(self, juncture: Juncture) -> int:
        return self.weights.get(_passage(juncture, juncture.above()), self.default_weight)

    def weight_to_left(self, juncture: Juncture) -> int:
        return self.weights.get(_passage(juncture, juncture.left()), self.default_weight)


@pytest.fixture
def grid_maze():
    """Fixture providing the in-memory maze model class."""
    return GridMaze


@pytest.fixture
def passage():
    """Fixture providing the passage key helper."""
    return _passage


@pytest.fixture
def open_2x2() -> GridMaze:
    """Fixture providing a 2x2 maze without internal walls and distinct weights."""
    j00, j10, j01, j11 = Juncture(0, 0), Juncture(1, 0), Juncture(0, 1), Juncture(1, 1)
    return GridMaze(
        2,
        2,
        weights={
            _passage(j00, j10): 1,
            _passage(j00, j01): 2,
            _passage(j10, j11): 3,
            _passage(j01, j11): 4,
        },
    )
