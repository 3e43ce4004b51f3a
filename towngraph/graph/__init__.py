"""Graph engine and shortest-path solver.

This subpackage contains the adjacency-based town graph and the
Dijkstra functions that run on top of it.
"""

from .dijkstra import reconstruct_route, shortest_path, shortest_path_tree
from .town_graph import TownGraph

__all__ = ["TownGraph", "shortest_path_tree", "reconstruct_route", "shortest_path"]
