"""Domain layer - Core models and errors.

This module contains the immutable town/road models, the shortest-path
result types and the typed errors used throughout the package.
"""

from .errors import (
    DuplicateRoadError,
    InvalidArgumentError,
    NullInputError,
    TownGraphError,
    TownNotFoundError,
)
from .models import DEFAULT_ROAD_WEIGHT, Road, RouteStep, ShortestPathTree, Town

__all__ = [
    # Models
    "DEFAULT_ROAD_WEIGHT",
    "Town",
    "Road",
    "RouteStep",
    "ShortestPathTree",
    # Errors
    "TownGraphError",
    "InvalidArgumentError",
    "NullInputError",
    "TownNotFoundError",
    "DuplicateRoadError",
]
