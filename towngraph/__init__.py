"""Top-level package for towngraph.

An undirected, weighted graph of named towns joined by named roads,
with Dijkstra shortest paths rendered as printable legs.
"""

from .domain import (
    DuplicateRoadError,
    InvalidArgumentError,
    NullInputError,
    Road,
    RouteStep,
    ShortestPathTree,
    Town,
    TownGraphError,
    TownNotFoundError,
)
from .graph import TownGraph
from .services import TownGraphManager

__all__ = [
    "Town",
    "Road",
    "RouteStep",
    "ShortestPathTree",
    "TownGraph",
    "TownGraphManager",
    "TownGraphError",
    "InvalidArgumentError",
    "NullInputError",
    "TownNotFoundError",
    "DuplicateRoadError",
]
