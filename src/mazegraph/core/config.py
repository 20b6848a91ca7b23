"""
Configuration for graph behavior.

Defines the options a WeightedGraph can be constructed with and their
defaults. The options only affect the order in which algorithms see
neighbors; they never change which vertices are reachable or what a
shortest path costs.
"""

from dataclasses import dataclass
from enum import Enum, auto


class NeighborOrder(Enum):
    """Order in which outgoing neighbors of a vertex are iterated."""

    INSERTION = auto()  # order edges were first added
    SORTED = auto()  # ascending by vertex, vertices must be orderable


# Defaults
DEFAULT_NEIGHBOR_ORDER = NeighborOrder.INSERTION


@dataclass(frozen=True)
class GraphConfig:
    """
    Configuration for a WeightedGraph.

    Attributes:
        neighbor_order: How neighbors are ordered during traversal. Both
            choices are deterministic for an unmodified graph.
    """

    neighbor_order: NeighborOrder = DEFAULT_NEIGHBOR_ORDER

    def __post_init__(self):
        """Validate configuration values."""
        if not isinstance(self.neighbor_order, NeighborOrder):
            raise TypeError("neighbor_order must be a NeighborOrder")
