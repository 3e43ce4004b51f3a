"""Immutable domain models for the town graph.

Towns and roads are frozen dataclasses with slots. A town is identified
by its name alone. A road is identified by the unordered pair of towns it
joins, so two roads over the same pair compare equal whatever their
weight or name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from .errors import InvalidArgumentError, NullInputError

DEFAULT_ROAD_WEIGHT = 1


@dataclass(frozen=True, slots=True, order=True)
class Town:
    """A named location in the graph.

    Equality, ordering and hashing all use the name, so a freshly built
    ``Town("Rockville")`` finds the instance already stored in a graph.
    """

    name: str

    def __post_init__(self) -> None:
        if self.name is None:
            raise NullInputError("Town name cannot be None", argument="name")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True, eq=False)
class Road:
    """A named, weighted, undirected link between two towns.

    Attributes:
        source: One end of the road
        destination: The other end of the road
        weight: Distance along the road (non-negative)
        name: Road label, not required to be unique
    """

    source: Town
    destination: Town
    weight: int
    name: str

    def __post_init__(self) -> None:
        if self.source is None or self.destination is None:
            raise NullInputError(
                "Road endpoints cannot be None",
                argument="source" if self.source is None else "destination",
            )
        if self.name is None:
            raise NullInputError("Road name cannot be None", argument="name")
        if self.weight < 0:
            raise InvalidArgumentError(
                f"Road weight must be non-negative, got {self.weight}"
            )

    @classmethod
    def of(
        cls,
        source: Town,
        destination: Town,
        name: str,
        weight: int = DEFAULT_ROAD_WEIGHT,
    ) -> Road:
        """Build a road, defaulting the weight to ``DEFAULT_ROAD_WEIGHT``."""
        return cls(source, destination, weight, name)

    @property
    def endpoints(self) -> frozenset[Town]:
        """The unordered pair of towns joined by this road."""
        return frozenset((self.source, self.destination))

    def contains(self, town: Optional[Town]) -> bool:
        """Check whether ``town`` is one of the two ends of this road."""
        return town == self.source or town == self.destination

    def other_end(self, town: Town) -> Town:
        """Return the end of the road opposite to ``town``.

        Raises:
            InvalidArgumentError: If ``town`` is not on this road.
        """
        if town == self.source:
            return self.destination
        if town == self.destination:
            return self.source
        raise InvalidArgumentError(f"Town {town} is not on road {self.name}")

    def __eq__(self, other: object) -> bool:
        """Equality by unordered endpoint pair only."""
        if not isinstance(other, Road):
            return NotImplemented
        return self.endpoints == other.endpoints

    def __hash__(self) -> int:
        """Hash by unordered endpoint pair only."""
        return hash(self.endpoints)

    def __lt__(self, other: Road) -> bool:
        """Roads sort by name for listings."""
        if not isinstance(other, Road):
            return NotImplemented
        return self.name < other.name

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class RouteStep:
    """One leg of a shortest path: ``origin`` to ``destination`` over ``road``."""

    origin: Town
    road: Road
    destination: Town

    def __str__(self) -> str:
        return (
            f"{self.origin} via {self.road.name} to "
            f"{self.destination} {self.road.weight}"
        )


@dataclass(frozen=True)
class ShortestPathTree:
    """Result of one single-source Dijkstra run.

    Attributes:
        source: Town the distances are measured from
        distances: Best known distance to every town (``inf`` if unreachable)
        predecessors: Previous town on the best path (None for the source
            and for unreachable towns)
    """

    source: Town
    distances: Mapping[Town, float] = field(default_factory=dict)
    predecessors: Mapping[Town, Optional[Town]] = field(default_factory=dict)

    def distance_to(self, town: Town) -> float:
        """Return the shortest distance to ``town`` (``inf`` if unknown)."""
        return self.distances.get(town, float("inf"))

    def is_reachable(self, town: Town) -> bool:
        """Check if ``town`` can be reached from the source."""
        return self.distance_to(town) != float("inf")

    def predecessor_of(self, town: Town) -> Optional[Town]:
        return self.predecessors.get(town)
