"""
Document codec.

A document is a JSON object with exactly the fields ``nodes`` (list of
``{id, x, y}``) and ``edges`` (list of ``{from, to}``), both in insertion
order. The layout is fixed for compatibility with existing ``graph.json``
files.
"""

import json
from typing import Union

from .exceptions import DanglingEdgeReference, MalformedDocument
from .state import Edge, Graph, Node

ENCODING = "utf-8"


def serialize(graph: Graph) -> bytes:
    """Encode a graph as indented JSON. Same graph, same bytes."""
    return json.dumps(graph.to_dict(), indent=2).encode(ENCODING)


def deserialize(data: Union[bytes, str]) -> Graph:
    """
    Decode a document into a new Graph.

    Raises:
        MalformedDocument: If the payload is not a valid document
        DanglingEdgeReference: If an edge names a node that is not listed
    """
    if isinstance(data, bytes):
        try:
            data = data.decode(ENCODING)
        except UnicodeDecodeError as e:
            raise MalformedDocument(f"Document is not {ENCODING} text: {e}") from e

    # ValueError covers JSONDecodeError and oversized integers
    try:
        raw = json.loads(data)
    except (ValueError, RecursionError) as e:
        raise MalformedDocument(f"Document is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise MalformedDocument("Document must be a JSON object")
    for key in ("nodes", "edges"):
        if not isinstance(raw.get(key), list):
            raise MalformedDocument(f"Document needs a '{key}' list")

    nodes = [_decode_node(i, item) for i, item in enumerate(raw["nodes"])]
    known = set()
    for node in nodes:
        if node.id in known:
            raise MalformedDocument(f"Duplicate node id {node.id!r}")
        known.add(node.id)

    edges = []
    for i, item in enumerate(raw["edges"]):
        edge = _decode_edge(i, item)
        for node_id in (edge.from_id, edge.to_id):
            if node_id not in known:
                raise DanglingEdgeReference(i, node_id)
        edges.append(edge)

    return Graph(nodes=nodes, edges=edges)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _decode_node(index: int, item) -> Node:
    if not isinstance(item, dict):
        raise MalformedDocument(f"Node #{index} must be an object")
    if not isinstance(item.get("id"), str):
        raise MalformedDocument(f"Node #{index} needs a string 'id'")
    for key in ("x", "y"):
        if not _is_int(item.get(key)):
            raise MalformedDocument(f"Node #{index} needs an integer '{key}'")
    return Node.from_dict(item)


def _decode_edge(index: int, item) -> Edge:
    if not isinstance(item, dict):
        raise MalformedDocument(f"Edge #{index} must be an object")
    for key in ("from", "to"):
        if not isinstance(item.get(key), str):
            raise MalformedDocument(f"Edge #{index} needs a string '{key}'")
    return Edge.from_dict(item)
