"""Shortest-path computation using Dijkstra's algorithm.

The solver is a set of pure functions over a ``TownGraph``: each call
builds a fresh ``ShortestPathTree`` from the source town and nothing is
stored on the graph between calls. Road weights are assumed
non-negative.
"""

from __future__ import annotations

import heapq
import logging
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from ..domain.errors import NullInputError, TownNotFoundError
from ..domain.models import RouteStep, ShortestPathTree, Town

if TYPE_CHECKING:
    from .town_graph import TownGraph

logger = logging.getLogger(__name__)


def shortest_path_tree(graph: TownGraph, source: Town) -> ShortestPathTree:
    """Compute shortest distances from ``source`` to every town.

    The whole tree is computed; there is no early exit for a particular
    destination. Ties between equal distances are broken by heap order.

    Parameters
    ----------
    graph:
        The town graph to search.
    source:
        Town the distances are measured from.

    Returns
    -------
    ShortestPathTree
        Distances (``inf`` for unreachable towns) and predecessors.

    Raises
    ------
    NullInputError
        If ``source`` is None.
    TownNotFoundError
        If ``source`` is not in the graph.
    """
    if source is None:
        raise NullInputError("Source town cannot be None", argument="source")
    if source not in graph:
        raise TownNotFoundError(
            f"Source town not in graph: {source}", town_name=source.name
        )

    distances: Dict[Town, float] = {town: float("inf") for town in graph}
    previous: Dict[Town, Optional[Town]] = {town: None for town in graph}
    distances[source] = 0.0

    heap: List[Tuple[float, Town]] = [(0.0, source)]
    visited = set()

    while heap:
        current_distance, u = heapq.heappop(heap)

        if u in visited:
            continue

        visited.add(u)

        for road in graph.edges_of(u):
            v = road.other_end(u)
            new_distance = current_distance + road.weight
            if new_distance < distances[v]:
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    logger.debug(
        "Shortest path tree computed",
        extra={"source": source.name, "settled": len(visited), "towns": len(graph)},
    )
    return ShortestPathTree(source=source, distances=distances, predecessors=previous)


def reconstruct_route(
    graph: TownGraph, tree: ShortestPathTree, destination: Town
) -> List[RouteStep]:
    """Walk predecessors back from ``destination`` to the tree's source.

    Returns the legs in travel order. The list is empty when the
    destination is the source, is missing from the graph, or cannot be
    reached.
    """
    steps: List[RouteStep] = []
    current = destination

    while current != tree.source:
        prior = tree.predecessor_of(current)
        if prior is None:
            return []
        road = graph.get_edge(prior, current)
        if road is None:
            # The graph changed since the tree was computed.
            return []
        steps.append(RouteStep(origin=prior, road=road, destination=current))
        current = prior

    steps.reverse()
    return steps


def shortest_path(graph: TownGraph, source: Town, destination: Town) -> List[str]:
    """Describe the shortest path between two towns, one leg per entry.

    Each entry reads ``"<town> via <road> to <town> <weight>"``.
    """
    tree = shortest_path_tree(graph, source)
    route = reconstruct_route(graph, tree, destination)
    logger.debug(
        "Shortest path reconstructed",
        extra={
            "source": source.name,
            "destination": getattr(destination, "name", None),
            "legs": len(route),
            "distance": tree.distance_to(destination),
        },
    )
    return [str(step) for step in route]
