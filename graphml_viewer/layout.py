"""Force-directed placement of graph nodes."""

from __future__ import annotations

import math
from itertools import permutations

from graphml_viewer.model import Graph


def apply_force_directed_layout(graph: Graph, iterations: int, k: float, c: float) -> None:
    """Move the graph's nodes in place using repulsive and attractive forces.

    ``k`` is the optimal distance between nodes and ``c`` caps how far a node
    may move in one iteration.
    """
    nodes = graph.nodes
    for _ in range(iterations):
        positions = [node.position for node in nodes]
        displacements = [[0.0, 0.0] for _ in nodes]

        # Every ordered pair is visited, so each pair is repelled twice.
        for i, j in permutations(range(len(positions)), 2):
            (xi, yi), (xj, yj) = positions[i], positions[j]
            dx, dy = xj - xi, yj - yi
            distance = math.hypot(dx, dy)
            if distance > 0.0:
                force = k * k / distance
                mx, my = dx / distance * force, dy / distance * force
                displacements[i][0] -= mx
                displacements[i][1] -= my
                displacements[j][0] += mx
                displacements[j][1] += my

        for edge in graph.edges:
            (xs, ys), (xt, yt) = positions[edge.source], positions[edge.target]
            dx, dy = xt - xs, yt - ys
            distance = math.hypot(dx, dy)
            if distance > 0.0:
                force = distance * distance / k
                mx, my = dx / distance * force, dy / distance * force
                displacements[edge.source][0] += mx
                displacements[edge.source][1] += my
                displacements[edge.target][0] -= mx
                displacements[edge.target][1] -= my

        for node, (x, y), (dx, dy) in zip(nodes, positions, displacements):
            length = math.hypot(dx, dy)
            if length > 0.0:
                step = min(length, c)
                node.position = (x + dx / length * step, y + dy / length * step)