"""Reading of simple GraphML files into a :class:`Graph`.

Only ``<node id>`` elements, their ``<data key="label">`` text and
``<edge source target>`` elements inside a ``<graph>`` are taken into account.
"""

from __future__ import annotations

import os
from xml.parsers import expat

from graphml_viewer.model import EdgeData, Graph, NodeData

_NO_ELEMENTS = expat.errors.codes[expat.errors.XML_ERROR_NO_ELEMENTS]


class LoadError(Exception):
    """Raised when a GraphML file cannot be read or parsed."""


def _local_name(name: str) -> str:
    return name.rpartition(":")[2]


class _GraphMLBuilder:
    def __init__(self) -> None:
        self.graph = Graph()
        self._ids: dict[str, int] = {}
        self._in_graph = False
        self._node_id: str | None = None
        self._node_label: str | None = None
        self._expecting_label = False
        self._text: list[str] = []

    def start(self, name: str, attrs: dict[str, str]) -> None:
        self.flush_text()
        tag = _local_name(name)
        if tag == "graph":
            self._in_graph = True
        elif not self._in_graph:
            return
        elif tag == "node":
            self._node_id = attrs.get("id")
            self._node_label = None
            self._expecting_label = False
        elif tag == "data" and self._node_id is not None:
            if attrs.get("key") == "label":
                self._expecting_label = True
        elif tag == "edge":
            self._add_edge(attrs.get("source"), attrs.get("target"))

    def end(self, name: str) -> None:
        self.flush_text()
        tag = _local_name(name)
        if tag == "graph":
            self._in_graph = False
        elif tag == "node" and self._in_graph and self._node_id is not None:
            node_id = self._node_id
            label = self._node_label if self._node_label is not None else node_id
            self._node_id = None
            self._node_label = None
            self._ids[node_id] = self.graph.add_node(NodeData(id=node_id, label=label))

    def characters(self, data: str) -> None:
        self._text.append(data)

    def flush_text(self) -> None:
        text = "".join(self._text).strip()
        self._text.clear()
        if text and self._expecting_label:
            self._node_label = text
            self._expecting_label = False

    def _add_edge(self, source: str | None, target: str | None) -> None:
        if source is None or target is None:
            return
        source_index = self._ids.get(source)
        target_index = self._ids.get(target)
        if source_index is not None and target_index is not None:
            self.graph.add_edge(source_index, target_index, EdgeData())


def load_graphml(path: str | os.PathLike[str]) -> Graph:
    """Load the nodes and directed edges of the GraphML file at ``path``.

    Edges that name a node not yet defined are skipped.
    """
    builder = _GraphMLBuilder()
    parser = expat.ParserCreate()
    parser.buffer_text = True
    parser.StartElementHandler = builder.start
    parser.EndElementHandler = builder.end
    parser.CharacterDataHandler = builder.characters
    try:
        with open(path, "rb") as stream:
            parser.ParseFile(stream)
    except OSError as exc:
        raise LoadError(f"cannot read {os.fspath(path)}: {exc}") from exc
    except expat.ExpatError as exc:
        # A document that simply ends early yields what was read so far.
        if exc.code != _NO_ELEMENTS:
            raise LoadError(f"invalid GraphML in {os.fspath(path)}: {exc}") from exc
    builder.flush_text()
    return builder.graph