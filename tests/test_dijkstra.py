"""Tests for the Dijkstra shortest-path solver."""

import math

import pytest

from towngraph.domain.errors import NullInputError, TownNotFoundError
from towngraph.domain.models import Town
from towngraph.graph import TownGraph, reconstruct_route, shortest_path_tree


def build_graph(roads):
    """Build a graph from ``(town, town, weight, name)`` tuples."""
    graph = TownGraph()
    for a, b, weight, name in roads:
        graph.add_vertex(Town(a))
        graph.add_vertex(Town(b))
        graph.add_edge(Town(a), Town(b), weight, name)
    return graph


def test_two_leg_path():
    graph = build_graph([("A", "B", 5, "Road1"), ("B", "C", 10, "Road2")])

    path = graph.shortest_path(Town("A"), Town("C"))

    assert path == ["A via Road1 to B 5", "B via Road2 to C 10"]


def test_path_can_be_walked_backwards():
    graph = build_graph([("A", "B", 5, "Road1"), ("B", "C", 10, "Road2")])

    path = graph.shortest_path(Town("C"), Town("A"))

    assert path == ["C via Road2 to B 10", "B via Road1 to A 5"]


def test_chooses_shorter_indirect_route():
    graph = build_graph(
        [
            ("A", "B", 3, "North"),
            ("B", "C", 4, "East"),
            ("A", "C", 10, "Direct"),
        ]
    )

    path = graph.shortest_path(Town("A"), Town("C"))

    assert path == ["A via North to B 3", "B via East to C 4"]


def test_chooses_direct_road_when_shorter():
    graph = build_graph(
        [
            ("A", "B", 3, "North"),
            ("B", "C", 4, "East"),
            ("A", "C", 6, "Direct"),
        ]
    )

    assert graph.shortest_path(Town("A"), Town("C")) == ["A via Direct to C 6"]


def test_isolated_destination_gives_empty_path():
    graph = build_graph([("A", "B", 5, "Road1")])
    graph.add_vertex(Town("D"))

    assert graph.shortest_path(Town("A"), Town("D")) == []


def test_disconnected_component_gives_empty_path():
    graph = build_graph([("A", "B", 1, "Road1"), ("C", "D", 1, "Road2")])

    assert graph.shortest_path(Town("A"), Town("D")) == []


def test_source_equal_to_destination_gives_empty_path():
    graph = build_graph([("A", "B", 5, "Road1")])

    assert graph.shortest_path(Town("A"), Town("A")) == []


def test_destination_missing_from_graph_gives_empty_path():
    graph = build_graph([("A", "B", 5, "Road1")])

    assert graph.shortest_path(Town("A"), Town("Z")) == []


def test_missing_source_raises():
    graph = build_graph([("A", "B", 5, "Road1")])

    with pytest.raises(TownNotFoundError) as exc_info:
        graph.shortest_path(Town("Z"), Town("A"))
    assert exc_info.value.town_name == "Z"


def test_none_source_raises():
    graph = build_graph([("A", "B", 5, "Road1")])

    with pytest.raises(NullInputError):
        shortest_path_tree(graph, None)


def test_tree_distances_and_predecessors():
    graph = build_graph(
        [
            ("A", "B", 2, "r1"),
            ("B", "C", 2, "r2"),
            ("A", "C", 7, "r3"),
            ("C", "D", 1, "r4"),
        ]
    )
    graph.add_vertex(Town("E"))

    tree = shortest_path_tree(graph, Town("A"))

    assert tree.source == Town("A")
    assert tree.distance_to(Town("A")) == 0
    assert tree.distance_to(Town("B")) == 2
    assert tree.distance_to(Town("C")) == 4
    assert tree.distance_to(Town("D")) == 5
    assert math.isinf(tree.distance_to(Town("E")))
    assert tree.predecessor_of(Town("A")) is None
    assert tree.predecessor_of(Town("D")) == Town("C")
    assert tree.predecessor_of(Town("C")) == Town("B")
    assert tree.predecessor_of(Town("E")) is None


def test_tree_covers_every_town():
    graph = build_graph([("A", "B", 1, "r1"), ("B", "C", 1, "r2")])

    tree = shortest_path_tree(graph, Town("C"))

    assert set(tree.distances) == graph.vertex_set()
    assert set(tree.predecessors) == graph.vertex_set()


def test_zero_weight_roads():
    graph = build_graph([("A", "B", 0, "Free"), ("B", "C", 0, "Toll")])

    assert graph.shortest_path(Town("A"), Town("C")) == [
        "A via Free to B 0",
        "B via Toll to C 0",
    ]


def test_repeated_queries_do_not_share_state():
    graph = build_graph([("A", "B", 5, "Road1"), ("B", "C", 10, "Road2")])

    first = graph.shortest_path(Town("A"), Town("C"))
    graph.remove_edge(Town("B"), Town("C"), 10, "Road2")
    second = graph.shortest_path(Town("A"), Town("C"))

    assert first == ["A via Road1 to B 5", "B via Road2 to C 10"]
    assert second == []


def test_reconstruct_route_returns_steps():
    graph = build_graph([("A", "B", 5, "Road1"), ("B", "C", 10, "Road2")])
    tree = graph.shortest_path_tree(Town("A"))

    steps = reconstruct_route(graph, tree, Town("C"))

    assert [step.origin for step in steps] == [Town("A"), Town("B")]
    assert [step.destination for step in steps] == [Town("B"), Town("C")]
    assert sum(step.road.weight for step in steps) == tree.distance_to(Town("C"))


def test_larger_grid_matches_known_distance():
    # 4x4 grid, horizontal roads cost 1, vertical roads cost 2.
    roads = []
    for row in range(4):
        for col in range(4):
            here = f"{row}-{col}"
            if col < 3:
                roads.append((here, f"{row}-{col + 1}", 1, f"h{row}{col}"))
            if row < 3:
                roads.append((here, f"{row + 1}-{col}", 2, f"v{row}{col}"))
    graph = build_graph(roads)

    tree = shortest_path_tree(graph, Town("0-0"))

    assert tree.distance_to(Town("3-3")) == 3 * 1 + 3 * 2
    assert len(graph.shortest_path(Town("0-0"), Town("3-3"))) == 6
