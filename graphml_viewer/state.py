"""Viewer state: the laid-out graph plus the current zoom and pan."""

from __future__ import annotations

import random
from dataclasses import dataclass

from graphml_viewer.layout import apply_force_directed_layout
from graphml_viewer.model import Graph, Position

TARGET_SCREEN_WIDTH = 800.0
TARGET_SCREEN_HEIGHT = 600.0
FIT_MARGIN = 0.8
INITIAL_SPREAD = 50.0
LAYOUT_ITERATIONS = 200
LAYOUT_OPTIMAL_DISTANCE = 80.0
LAYOUT_MAX_STEP = 10.0
ZOOM_PER_SCROLL_POINT = 0.01


@dataclass
class ViewerState:
    """What the viewer shows and how: graph, zoom factor and pan offset."""

    graph: Graph
    zoom: float = 1.0
    pan: Position = (0.0, 0.0)
    initialized_view: bool = False

    @classmethod
    def from_graph(cls, graph: Graph, rng: random.Random | None = None) -> ViewerState:
        """Scatter the nodes, lay them out and fit them into an 800x600 view.

        A view with no extent in either direction (no nodes, or all nodes at
        one point) keeps a zoom of 1.0 and is centred on the nodes.
        """
        rng = rng if rng is not None else random.Random()
        for node in graph:
            node.position = (
                rng.uniform(-INITIAL_SPREAD, INITIAL_SPREAD),
                rng.uniform(-INITIAL_SPREAD, INITIAL_SPREAD),
            )

        apply_force_directed_layout(
            graph, LAYOUT_ITERATIONS, LAYOUT_OPTIMAL_DISTANCE, LAYOUT_MAX_STEP
        )

        positions = [node.position for node in graph]
        if positions:
            xs, ys = zip(*positions)
            min_x, max_x, min_y, max_y = min(xs), max(xs), min(ys), max(ys)
            fits = [
                target / extent
                for target, extent in (
                    (TARGET_SCREEN_WIDTH, max_x - min_x),
                    (TARGET_SCREEN_HEIGHT, max_y - min_y),
                )
                if extent > 0.0
            ]
            zoom = min(fits) * FIT_MARGIN if fits else 1.0
            center_x, center_y = (min_x + max_x) / 2.0, (min_y + max_y) / 2.0
        else:
            zoom = 1.0
            center_x = center_y = 0.0

        pan = (
            TARGET_SCREEN_WIDTH / 2.0 - center_x * zoom,
            TARGET_SCREEN_HEIGHT / 2.0 - center_y * zoom,
        )
        return cls(graph=graph, zoom=zoom, pan=pan, initialized_view=True)

    def to_screen(self, position: Position) -> Position:
        """Map a layout position to screen coordinates."""
        x, y = position
        pan_x, pan_y = self.pan
        return (x * self.zoom + pan_x, y * self.zoom + pan_y)

    def pan_by(self, dx: float, dy: float) -> None:
        """Shift the view by a screen-space offset."""
        pan_x, pan_y = self.pan
        self.pan = (pan_x + dx, pan_y + dy)

    def zoom_by(self, scroll: float) -> None:
        """Scale the zoom by a scroll amount given in screen points."""
        self.zoom *= 1.0 + scroll * ZOOM_PER_SCROLL_POINT