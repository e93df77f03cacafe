"""
Graph store.

Owns the authoritative nodes and edges of an annotation session and applies
the identity rules: node ids come from a counter that never goes backwards,
and removing a node removes every edge attached to it.
"""

import logging
import re
from typing import List, Optional

from mapgraph.utils.misc import incrf

from .exceptions import UnknownNode
from .state import Edge, Graph, Node

logger = logging.getLogger(__name__)

NODE_ID_PREFIX = "n"
_NODE_ID_RE = re.compile(r"^n(\d+)$")


class GraphStore:
    """Mutable container for a Graph."""

    def __init__(self, graph: Optional[Graph] = None):
        self.graph = Graph()
        self._ids = incrf()
        if graph is not None:
            self.replace(graph)

    @property
    def nodes(self) -> List[Node]:
        return self.graph.nodes

    @property
    def edges(self) -> List[Edge]:
        return self.graph.edges

    def add_node(self, x: int, y: int) -> Node:
        node = Node(id=f"{NODE_ID_PREFIX}{next(self._ids)}", x=int(x), y=int(y))
        self.graph.nodes.append(node)
        logger.debug("Added node %s at (%d, %d)", node.id, node.x, node.y)
        return node

    def add_edge(self, from_id: str, to_id: str) -> Edge:
        """
        Append an edge between two existing nodes.

        Parallel edges (in either direction) are kept as separate entries.

        Raises:
            ValueError: If both ends are the same node
            UnknownNode: If either end is not in the graph
        """
        if from_id == to_id:
            raise ValueError(f"Cannot link node {from_id!r} to itself")
        for node_id in (from_id, to_id):
            if not self.graph.has_node(node_id):
                raise UnknownNode(node_id)

        edge = Edge(from_id=from_id, to_id=to_id)
        self.graph.edges.append(edge)
        logger.debug("Added edge %s -> %s", from_id, to_id)
        return edge

    def remove_node(self, node_id: str) -> List[Edge]:
        """
        Remove a node and every edge touching it.

        Returns:
            The edges dropped by the cascade
        """
        node = self.graph.get_node(node_id)
        if node is None:
            raise UnknownNode(node_id)

        self.graph.nodes.remove(node)
        dropped = [e for e in self.graph.edges if e.touches(node_id)]
        self.graph.edges[:] = [e for e in self.graph.edges if not e.touches(node_id)]
        logger.debug(
            "Removed node %s (cascade dropped %d edges)", node_id, len(dropped)
        )
        return dropped

    def remove_edge(self, from_id: str, to_id: str) -> Optional[Edge]:
        """
        Remove the most recently added edge stored exactly as (from_id, to_id).

        Earlier parallel copies keep their positions.

        Returns:
            The removed edge, or None if no edge matched
        """
        target = Edge(from_id=from_id, to_id=to_id)
        for i in reversed(range(len(self.graph.edges))):
            if self.graph.edges[i] == target:
                edge = self.graph.edges.pop(i)
                logger.debug("Removed edge %s -> %s", from_id, to_id)
                return edge
        return None

    def clear(self):
        self.graph = Graph()
        self._ids = incrf()

    def replace(self, graph: Graph):
        """Adopt ``graph`` and continue numbering after its largest node id."""
        self.graph = Graph(nodes=list(graph.nodes), edges=list(graph.edges))
        self._ids = incrf(next_node_number(self.graph.nodes))


def next_node_number(nodes: List[Node]) -> int:
    highest = 0
    for node in nodes:
        match = _NODE_ID_RE.match(node.id)
        if match:
            highest = max(highest, int(match.group(1)))
    return highest + 1
