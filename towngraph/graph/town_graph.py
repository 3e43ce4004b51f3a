"""Adjacency-based storage for the town graph.

Every town maps to the set of roads touching it. A road is stored in the
sets of both of its ends, so ``edge_set`` de-duplicates across them.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Set

from ..domain.errors import DuplicateRoadError, NullInputError, TownNotFoundError
from ..domain.models import Road, ShortestPathTree, Town
from . import dijkstra

logger = logging.getLogger(__name__)


class TownGraph:
    """Undirected weighted graph of towns joined by roads.

    At most one road joins any pair of towns. Shortest-path queries are
    recomputed on every call; no solver state is kept on the graph.
    """

    def __init__(self) -> None:
        self._adjacency: Dict[Town, Set[Road]] = {}

    def __contains__(self, town: object) -> bool:
        return town in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[Town]:
        return iter(self._adjacency)

    # ---------- towns ----------

    def add_vertex(self, town: Town) -> bool:
        """Add ``town`` if it is not already present.

        Returns:
            True if the town was newly inserted.

        Raises:
            NullInputError: If ``town`` is None.
        """
        if town is None:
            raise NullInputError("Town cannot be None", argument="town")
        if town in self._adjacency:
            return False
        self._adjacency[town] = set()
        logger.debug("Town added", extra={"town": town.name})
        return True

    def remove_vertex(self, town: Optional[Town]) -> bool:
        """Remove ``town`` and every road touching it.

        Returns:
            True if the town was present.
        """
        if town is None or town not in self._adjacency:
            return False
        touching = self._adjacency.pop(town)
        for road in touching:
            other = road.other_end(town)
            if other in self._adjacency:
                self._adjacency[other].discard(road)
        logger.debug(
            "Town removed",
            extra={"town": town.name, "roads_removed": len(touching)},
        )
        return True

    def contains_vertex(self, town: Optional[Town]) -> bool:
        return town is not None and town in self._adjacency

    def vertex_set(self) -> Set[Town]:
        """Return a snapshot of all towns in the graph."""
        return set(self._adjacency)

    # ---------- roads ----------

    def add_edge(
        self, source: Town, destination: Town, weight: int, name: str
    ) -> Road:
        """Create a road between two towns already in the graph.

        Args:
            source: One end of the road.
            destination: The other end of the road.
            weight: Distance along the road.
            name: Road label.

        Returns:
            The newly created road.

        Raises:
            NullInputError: If either end is None.
            TownNotFoundError: If either end is not in the graph.
            DuplicateRoadError: If a road already joins the two towns.
        """
        if source is None or destination is None:
            raise NullInputError(
                "Source or destination cannot be None",
                argument="source" if source is None else "destination",
            )
        for town in (source, destination):
            if town not in self._adjacency:
                raise TownNotFoundError(
                    f"Town not in graph: {town}", town_name=town.name
                )
        if self.contains_edge(source, destination):
            raise DuplicateRoadError(
                f"A road already connects {source} and {destination}",
                source=source.name,
                destination=destination.name,
            )

        road = Road(source, destination, weight, name)
        self._adjacency[source].add(road)
        self._adjacency[destination].add(road)
        logger.debug(
            "Road added",
            extra={
                "road": name,
                "source": source.name,
                "destination": destination.name,
                "weight": weight,
            },
        )
        return road

    def remove_edge(
        self,
        source: Optional[Town],
        destination: Optional[Town],
        weight: int,
        name: str,
    ) -> Optional[Road]:
        """Remove the road between two towns if its weight and name match.

        Returns:
            The removed road, or None if no matching road exists.
        """
        road = self.get_edge(source, destination)
        if road is None or road.weight != weight or road.name != name:
            return None
        self._adjacency[road.source].discard(road)
        self._adjacency[road.destination].discard(road)
        logger.debug(
            "Road removed",
            extra={
                "road": name,
                "source": road.source.name,
                "destination": road.destination.name,
            },
        )
        return road

    def get_edge(
        self, source: Optional[Town], destination: Optional[Town]
    ) -> Optional[Road]:
        """Return the road joining two towns, or None if there is none."""
        if source is None or destination is None:
            return None
        for road in self._adjacency.get(source, ()):
            if road.other_end(source) == destination:
                return road
        return None

    def contains_edge(
        self, source: Optional[Town], destination: Optional[Town]
    ) -> bool:
        return self.get_edge(source, destination) is not None

    def edges_of(self, town: Town) -> Set[Road]:
        """Return a snapshot of the roads touching ``town``.

        Raises:
            NullInputError: If ``town`` is None.
            TownNotFoundError: If ``town`` is not in the graph.
        """
        if town is None:
            raise NullInputError("Town cannot be None", argument="town")
        roads = self._adjacency.get(town)
        if roads is None:
            raise TownNotFoundError(f"Town not in graph: {town}", town_name=town.name)
        return set(roads)

    def edge_set(self) -> Set[Road]:
        """Return every road in the graph exactly once."""
        roads: Set[Road] = set()
        for touching in self._adjacency.values():
            roads.update(touching)
        return roads

    # ---------- shortest paths ----------

    def shortest_path_tree(self, source: Town) -> ShortestPathTree:
        """Run Dijkstra from ``source``; see ``dijkstra.shortest_path_tree``."""
        return dijkstra.shortest_path_tree(self, source)

    def shortest_path(self, source: Town, destination: Town) -> List[str]:
        """Describe the shortest path from ``source`` to ``destination``.

        Each entry reads ``"<town> via <road> to <town> <weight>"``; the
        list is empty when the destination cannot be reached.
        """
        return dijkstra.shortest_path(self, source, destination)
