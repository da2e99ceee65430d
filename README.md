# graphml-viewer

A small viewer for GraphML files. It reads the nodes and directed edges of a
GraphML document. It places the nodes with a force-directed layout and draws
the graph in a window. You can pan and zoom the window.

## Installation

```
pip install .
```

The window uses Tkinter from the standard library. No third-party packages
are needed. The `graphml_viewer.ui` module and the `visualize-graph` command
need a Python build that includes Tkinter. The other modules work without it.

## Usage

```
visualize-graph path/to/graph.graphml
```

* Drag with the left mouse button to pan.
* Use the scroll wheel to zoom. Each wheel notch up scales the zoom by 1.5.

If the file cannot be read or parsed, or the window cannot be opened, the
command prints `error: ...` to standard error and exits with status 1.

### What is read from the file

Only elements inside `<graph>` are used:

* `<node id="...">` creates a node. If the node holds a
  `<data key="label">text</data>` element, the stripped text is its label.
  Otherwise the label is the id. A self-closing `<node id="..."/>` always
  uses its id as the label.
* `<edge source="..." target="...">` creates a directed edge between two
  nodes that appeared earlier in the file. An edge is skipped if it lacks
  either attribute or names an unknown node.

Namespace prefixes on element names are ignored. Everything else in the file
is ignored too. An empty file gives an empty graph.

## Library use

```python
from graphml_viewer.loader import load_graphml
from graphml_viewer.layout import apply_force_directed_layout

graph = load_graphml("graph.graphml")
print(graph.node_count(), graph.edge_count())

apply_force_directed_layout(graph, 200, 80.0, 10.0)
for node in graph:
    print(node.id, node.label, node.position)
```

`graphml_viewer.model` provides `Graph`, `NodeData`, `EdgeData` and `Edge`.
A `Graph` is a directed multigraph, and its nodes are addressed by insertion
index. Use `graph[i]` to get a node. `graph.nodes` and `graph.edges` return
tuples.

`apply_force_directed_layout(graph, iterations, k, c)` moves the nodes in
place. `k` is the optimal distance between nodes. `c` caps how far a node
may move in one iteration.

`graphml_viewer.state.ViewerState.from_graph(graph, rng=None)` works in three
steps:

1. It gives each node a random starting position between -50 and 50 on each
   axis. Pass a `random.Random` as `rng` for repeatable results.
2. It runs the layout for 200 iterations with `k = 80` and `c = 10`.
3. It picks a zoom and pan that centre the graph on an 800×600 view with a
   20 % margin.

If the graph has no extent in either direction, the zoom stays at 1.0. The
state also has these methods:

* `to_screen(position)` maps a layout position to screen coordinates.
* `pan_by(dx, dy)` shifts the view.
* `zoom_by(scroll)` multiplies the zoom by `1 + scroll * 0.01`.

Errors:

* A file that cannot be read or parsed raises
  `graphml_viewer.loader.LoadError`.
* `graphml_viewer.ui.run_viewer(path)` raises `graphml_viewer.ui.ViewerError`
  when it cannot load the graph or open its window.

## Limitations

* The layout is recomputed from random starting positions each time a graph
  is opened.
* Nodes cannot be selected or moved by hand.
* The viewer does not edit or save graphs.
* GraphML attributes other than node labels are not read.