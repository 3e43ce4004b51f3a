"""Town graph manager - Name-based façade over the town graph.

Callers work with plain town and road names; the manager turns them into
``Town`` values, delegates to ``TownGraph`` and formats the answers.
Names are case-sensitive and used as given.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import GraphConfig, get_config
from ..domain.models import Town
from ..graph.town_graph import TownGraph


@dataclass
class TownGraphManager:
    """Manage towns and roads by name.

    Attributes:
        config: Graph configuration (default road weight)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _graph: TownGraph = field(default_factory=TownGraph, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def graph(self) -> TownGraph:
        return self._graph

    # ---------- towns ----------

    def add_town(self, name: str) -> bool:
        """Add a town by name.

        Returns:
            True if the town was added, False if it already existed.
        """
        return self._graph.add_vertex(Town(name))

    def get_town(self, name: str) -> Optional[Town]:
        """Return the town with the given name, or None if it does not exist."""
        town = Town(name)
        return town if self._graph.contains_vertex(town) else None

    def contains_town(self, name: str) -> bool:
        return self.get_town(name) is not None

    def delete_town(self, name: str) -> bool:
        """Delete a town and every road touching it.

        Returns:
            True if the town existed and was removed.
        """
        removed = self._graph.remove_vertex(Town(name))
        if removed:
            self._logger.info("Town deleted", extra={"town": name})
        return removed

    def all_towns(self) -> List[str]:
        """Return all town names in ascending order."""
        return sorted(town.name for town in self._graph.vertex_set())

    # ---------- roads ----------

    def add_road(
        self,
        town1: str,
        town2: str,
        weight: Optional[int] = None,
        road_name: str = "",
    ) -> bool:
        """Connect two towns with a road, creating the towns if needed.

        Args:
            town1: Name of one town.
            town2: Name of the other town.
            weight: Road distance; defaults to ``config.default_road_weight``.
            road_name: Name of the road.

        Returns:
            True if the road was added, False if the towns were already
            connected.
        """
        t1, t2 = Town(town1), Town(town2)
        self._graph.add_vertex(t1)
        self._graph.add_vertex(t2)
        if self._graph.contains_edge(t1, t2):
            self._logger.info(
                "Road not added, towns already connected",
                extra={"town1": town1, "town2": town2, "road": road_name},
            )
            return False

        if weight is None:
            weight = self.config.default_road_weight
        self._graph.add_edge(t1, t2, weight, road_name)
        return True

    def get_road(self, town1: str, town2: str) -> Optional[str]:
        """Return the name of the road joining two towns, or None."""
        road = self._graph.get_edge(Town(town1), Town(town2))
        return road.name if road is not None else None

    def contains_road_connection(self, town1: str, town2: str) -> bool:
        return self._graph.contains_edge(Town(town1), Town(town2))

    def delete_road_connection(self, town1: str, town2: str, road_name: str) -> bool:
        """Delete the road joining two towns if it carries ``road_name``.

        Returns:
            True if a road was deleted.
        """
        t1, t2 = Town(town1), Town(town2)
        road = self._graph.get_edge(t1, t2)
        if road is None or road.name != road_name:
            return False
        self._graph.remove_edge(t1, t2, road.weight, road_name)
        self._logger.info(
            "Road deleted",
            extra={"town1": town1, "town2": town2, "road": road_name},
        )
        return True

    def all_roads(self) -> List[str]:
        """Return all road names in ascending order."""
        return [road.name for road in sorted(self._graph.edge_set())]

    # ---------- paths ----------

    def get_path(self, town1: str, town2: str) -> Optional[List[str]]:
        """Return the shortest path between two towns as printable legs.

        Returns:
            The legs from ``town1`` to ``town2`` (empty if unreachable),
            or None if either town does not exist.
        """
        source, destination = self.get_town(town1), self.get_town(town2)
        if source is None or destination is None:
            self._logger.warning(
                "Path requested for unknown town",
                extra={"town1": town1, "town2": town2},
            )
            return None

        path = self._graph.shortest_path(source, destination)
        self._logger.info(
            "Path computed",
            extra={"town1": town1, "town2": town2, "legs": len(path)},
        )
        return path

    def get_distance(self, town1: str, town2: str) -> Optional[float]:
        """Return the total shortest distance between two towns.

        Returns:
            The distance (``inf`` if unreachable), or None if either town
            does not exist.
        """
        source, destination = self.get_town(town1), self.get_town(town2)
        if source is None or destination is None:
            return None
        return self._graph.shortest_path_tree(source).distance_to(destination)
