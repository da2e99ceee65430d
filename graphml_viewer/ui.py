"""Interactive window that draws a graph and lets the user pan and zoom."""

from __future__ import annotations

import argparse
import os
import sys
import tkinter as tk

from graphml_viewer.loader import LoadError, load_graphml
from graphml_viewer.state import ViewerState

WINDOW_TITLE = "Graph Viewer"
HEADING = "GraphML Viewer"
NODE_RADIUS = 25.0
EDGE_WIDTH = 2
TEXT_COLOR = "black"
NODE_FILL = "light gray"
BACKGROUND = "white"

_WHEEL_NOTCH = 120
_POINTS_PER_NOTCH = 50.0


class ViewerError(Exception):
    """Raised when the viewer cannot load its graph or open its window."""


class GraphViewerApp:
    """Draws a :class:`ViewerState` on a canvas and handles drag and wheel input."""

    def __init__(self, root, state: ViewerState) -> None:
        self.root = root
        self.state = state
        self._drag_origin: tuple[float, float] | None = None

        self.heading = tk.Label(root, text=HEADING, font=("TkDefaultFont", 16, "bold"), anchor="w")
        self.heading.pack(fill="x", padx=8, pady=(8, 4))
        self.canvas = tk.Canvas(root, background=BACKGROUND, highlightthickness=0)
        self.canvas.pack(fill="both", expand=True)

        self.canvas.bind("<ButtonPress-1>", self._on_press)
        self.canvas.bind("<B1-Motion>", self._on_drag)
        self.canvas.bind("<ButtonRelease-1>", self._on_release)
        self.canvas.bind("<MouseWheel>", self._on_wheel)
        self.canvas.bind("<Button-4>", self._on_scroll_up)
        self.canvas.bind("<Button-5>", self._on_scroll_down)
        self.canvas.bind("<Configure>", self._on_configure)

    def redraw(self) -> None:
        """Clear the canvas and draw every edge, then every node with its label."""
        state = self.state
        if not state.initialized_view:
            state.pan = (self.canvas.winfo_width() / 2.0, self.canvas.winfo_height() / 2.0)
            state.initialized_view = True

        self.canvas.delete("all")
        graph = state.graph
        for edge in graph.edges:
            x1, y1 = state.to_screen(graph[edge.source].position)
            x2, y2 = state.to_screen(graph[edge.target].position)
            self.canvas.create_line(x1, y1, x2, y2, width=EDGE_WIDTH, fill=TEXT_COLOR)

        r = NODE_RADIUS
        for node in graph:
            x, y = state.to_screen(node.position)
            self.canvas.create_oval(x - r, y - r, x + r, y + r, fill=NODE_FILL, outline="")
            self.canvas.create_text(x, y, text=node.label, fill=TEXT_COLOR, anchor="center")

    def _on_press(self, event) -> None:
        self._drag_origin = (event.x, event.y)

    def _on_drag(self, event) -> None:
        if self._drag_origin is None:
            self._drag_origin = (event.x, event.y)
            return
        ox, oy = self._drag_origin
        self.state.pan_by(event.x - ox, event.y - oy)
        self._drag_origin = (event.x, event.y)
        self.redraw()

    def _on_release(self, _event) -> None:
        self._drag_origin = None

    def _on_wheel(self, event) -> None:
        self._scroll(event.delta / _WHEEL_NOTCH * _POINTS_PER_NOTCH)

    def _on_scroll_up(self, _event) -> None:
        self._scroll(_POINTS_PER_NOTCH)

    def _on_scroll_down(self, _event) -> None:
        self._scroll(-_POINTS_PER_NOTCH)

    def _on_configure(self, _event) -> None:
        self.redraw()

    def _scroll(self, points: float) -> None:
        self.state.zoom_by(points)
        self.redraw()


def run_viewer(path: str | os.PathLike[str]) -> None:
    """Load the GraphML file at ``path`` and show it until the window closes."""
    try:
        graph = load_graphml(path)
    except LoadError as exc:
        raise ViewerError(str(exc)) from exc

    state = ViewerState.from_graph(graph)
    try:
        root = tk.Tk()
    except tk.TclError as exc:
        raise ViewerError(f"cannot open window: {exc}") from exc
    root.title(WINDOW_TITLE)
    app = GraphViewerApp(root, state)
    app.redraw()
    root.mainloop()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="visualize-graph", description="Show a GraphML graph.")
    parser.add_argument("path", help="path to a GraphML file")
    args = parser.parse_args(argv)
    try:
        run_viewer(args.path)
    except ViewerError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())