"""Services layer - Name-based access to the town graph.

Available services:
- TownGraphManager: Add, delete, list and route between towns by name
"""

from .town_graph_manager import TownGraphManager

__all__ = ["TownGraphManager"]
