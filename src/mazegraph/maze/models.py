"""
Grid models consumed by the maze graph builder.

A maze is a rectangular grid of junctures addressed by (x, y), with (0, 0) in
the upper left corner. Adjacent junctures are either separated by a wall or
joined by a passage with a traversal cost. The builder only ever asks about
the passages above and to the left of a juncture.
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, order=True)
class Juncture:
    """
    A grid coordinate used as a graph vertex.

    Attributes:
        x (int): Column, growing to the right
        y (int): Row, growing downward
    """

    x: int
    y: int

    def above(self) -> "Juncture":
        """Juncture one row up."""
        return Juncture(self.x, self.y - 1)

    def left(self) -> "Juncture":
        """Juncture one column to the left."""
        return Juncture(self.x - 1, self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class MazeModel(Protocol):
    """Protocol defining what the graph builder reads from a maze."""

    @property
    def width(self) -> int:
        """Number of columns."""
        ...

    @property
    def height(self) -> int:
        """Number of rows."""
        ...

    def is_wall_above(self, juncture: Juncture) -> bool:
        """Check whether a wall separates the juncture from the one above."""
        ...

    def is_wall_to_left(self, juncture: Juncture) -> bool:
        """Check whether a wall separates the juncture from the one to its left."""
        ...

    def weight_above(self, juncture: Juncture) -> int:
        """Cost of the passage between the juncture and the one above."""
        ...

    def weight_to_left(self, juncture: Juncture) -> int:
        """Cost of the passage between the juncture and the one to its left."""
        ...
