"""
Maze graph construction from a grid model.

Every juncture of the maze becomes a vertex and every open passage between
two adjacent junctures becomes a pair of directed edges, one each way, both
carrying the weight the maze reports for that passage.

Junctures are scanned in row-major order from the top-left, so when a
juncture is reached its upper and left neighbors already exist. Looking only
upward and leftward therefore discovers every passage exactly once: the
passage below a juncture is found from the juncture underneath it, and the
passage to its right from its right-hand neighbor.
"""

import logging
from typing import Optional

from ..core.config import GraphConfig
from ..core.graph import WeightedGraph
from .models import Juncture, MazeModel

logger = logging.getLogger(__name__)


class MazeGraph(WeightedGraph[Juncture]):
    """
    WeightedGraph whose vertices are the junctures of a maze.

    The outer boundary of the grid is always treated as walled: a juncture on
    the top row is never linked upward, one in the leftmost column never
    leftward.
    """

    def __init__(self, maze: MazeModel, config: Optional[GraphConfig] = None):
        """
        Build the graph from a maze.

        Args:
            maze (MazeModel): Source of grid size, walls and passage weights
            config (Optional[GraphConfig]): Graph behavior options
        """
        super().__init__(config)
        width, height = maze.width, maze.height
        if width < 0 or height < 0:
            raise ValueError(f"Maze dimensions must be non-negative, got {width}x{height}")

        for row in range(height):
            for col in range(width):
                juncture = Juncture(col, row)
                self.add_vertex(juncture)

                if row > 0 and not maze.is_wall_above(juncture):
                    self._connect(juncture, juncture.above(), maze.weight_above(juncture))
                if col > 0 and not maze.is_wall_to_left(juncture):
                    self._connect(juncture, juncture.left(), maze.weight_to_left(juncture))

        logger.info(
            f"Built maze graph {width}x{height} with {len(self)} vertices "
            f"and {self.edge_count} edges"
        )

    def _connect(self, juncture: Juncture, neighbor: Juncture, weight: int) -> None:
        self.add_edge(neighbor, juncture, weight)
        self.add_edge(juncture, neighbor, weight)


def build_from_grid(maze: MazeModel, config: Optional[GraphConfig] = None) -> MazeGraph:
    """Create a MazeGraph from a maze model."""
    return MazeGraph(maze, config)
