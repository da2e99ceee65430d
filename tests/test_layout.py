import math
import random

import pytest

from graphml_viewer.layout import apply_force_directed_layout
from graphml_viewer.model import EdgeData, Graph, NodeData


def _graph(positions, edges=()):
    graph = Graph()
    for number, position in enumerate(positions):
        graph.add_node(NodeData(id=str(number), label=str(number), position=position))
    for source, target in edges:
        graph.add_edge(source, target, EdgeData())
    return graph


def _distance(graph, a, b):
    (xa, ya), (xb, yb) = graph[a].position, graph[b].position
    return math.hypot(xb - xa, yb - ya)


def test_zero_iterations_leave_positions_unchanged():
    positions = [(1.0, 2.0), (3.0, -4.0)]
    graph = _graph(positions, [(0, 1)])
    apply_force_directed_layout(graph, 0, 80.0, 10.0)
    assert [node.position for node in graph.nodes] == positions


def test_single_node_does_not_move():
    graph = _graph([(5.0, 7.0)])
    apply_force_directed_layout(graph, 50, 80.0, 10.0)
    assert graph[0].position == (5.0, 7.0)


def test_self_loop_does_not_move_node():
    graph = _graph([(5.0, 7.0)], [(0, 0)])
    apply_force_directed_layout(graph, 10, 80.0, 10.0)
    assert graph[0].position == (5.0, 7.0)


def test_coincident_nodes_stay_put():
    graph = _graph([(1.0, 1.0), (1.0, 1.0)], [(0, 1)])
    apply_force_directed_layout(graph, 10, 80.0, 10.0)
    assert graph[0].position == (1.0, 1.0)
    assert graph[1].position == (1.0, 1.0)


def test_unconnected_nodes_repel():
    graph = _graph([(0.0, 0.0), (5.0, 0.0)])
    before = _distance(graph, 0, 1)
    apply_force_directed_layout(graph, 5, 80.0, 10.0)
    assert _distance(graph, 0, 1) > before


def test_strong_repulsion_moves_each_node_by_the_cap():
    graph = _graph([(0.0, 0.0), (1.0, 0.0)])
    apply_force_directed_layout(graph, 1, 80.0, 10.0)
    assert graph[0].position == pytest.approx((-10.0, 0.0))
    assert graph[1].position == pytest.approx((11.0, 0.0))


def test_distant_connected_nodes_attract():
    graph = _graph([(0.0, 0.0), (1000.0, 0.0)], [(0, 1)])
    apply_force_directed_layout(graph, 1, 80.0, 10.0)
    assert _distance(graph, 0, 1) == pytest.approx(980.0)


def test_step_never_exceeds_cap():
    rng = random.Random(7)
    positions = [(rng.uniform(-50, 50), rng.uniform(-50, 50)) for _ in range(12)]
    edges = [(rng.randrange(12), rng.randrange(12)) for _ in range(15)]
    graph = _graph(positions, edges)
    cap = 3.0
    apply_force_directed_layout(graph, 1, 80.0, cap)
    for (x0, y0), node in zip(positions, graph.nodes):
        x1, y1 = node.position
        assert math.hypot(x1 - x0, y1 - y0) <= cap + 1e-9


def test_midpoint_of_two_connected_nodes_is_preserved():
    graph = _graph([(-30.0, 4.0), (50.0, 4.0)], [(0, 1)])
    apply_force_directed_layout(graph, 100, 80.0, 10.0)
    (xa, ya), (xb, yb) = graph[0].position, graph[1].position
    assert (xa + xb) / 2 == pytest.approx(10.0)
    assert (ya + yb) / 2 == pytest.approx(4.0)


def test_connected_pair_stays_closer_than_unconnected_pair():
    linked = _graph([(0.0, 0.0), (20.0, 0.0)], [(0, 1)])
    free = _graph([(0.0, 0.0), (20.0, 0.0)])
    apply_force_directed_layout(linked, 100, 80.0, 10.0)
    apply_force_directed_layout(free, 100, 80.0, 10.0)
    assert _distance(linked, 0, 1) < _distance(free, 0, 1)