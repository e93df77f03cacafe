"""
State for graph annotation sessions.

Contains the data classes representing nodes, edges, the graph they form,
and the snapshots kept in the undo history.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


@dataclass(frozen=True)
class Node:
    """A labeled point in the natural pixel space of the background image."""

    id: str
    x: int
    y: int

    def to_dict(self):
        """Convert to dictionary for serialization."""
        return {"id": self.id, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict):
        """Create from dictionary."""
        return cls(id=data["id"], x=data["x"], y=data["y"])


@dataclass(frozen=True)
class Edge:
    """
    Undirected link between two nodes.

    Stored in creation order: ``from_id`` is the node that was armed first.
    """

    from_id: str
    to_id: str

    def touches(self, node_id: str) -> bool:
        return self.from_id == node_id or self.to_id == node_id

    def to_dict(self):
        """Convert to dictionary for serialization."""
        return {"from": self.from_id, "to": self.to_id}

    @classmethod
    def from_dict(cls, data: dict):
        """Create from dictionary."""
        return cls(from_id=data["from"], to_id=data["to"])


@dataclass
class Graph:
    """Nodes and edges in insertion order. This is the persisted unit."""

    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)

    def get_node(self, node_id: str) -> Optional[Node]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def has_node(self, node_id: str) -> bool:
        return self.get_node(node_id) is not None

    def is_empty(self) -> bool:
        return not self.nodes and not self.edges

    def to_dict(self):
        """Convert to dictionary for serialization."""
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }


class EntryKind(Enum):
    """What a history entry captured."""

    NODE = "node"
    EDGE = "edge"


@dataclass(frozen=True)
class HistoryEntry:
    """
    Immutable record of one committed mutation.

    Exactly one of ``node`` / ``edge`` is set, matching ``kind``.
    """

    kind: EntryKind
    node: Optional[Node] = None
    edge: Optional[Edge] = None

    @classmethod
    def for_node(cls, node: Node):
        return cls(kind=EntryKind.NODE, node=node)

    @classmethod
    def for_edge(cls, edge: Edge):
        return cls(kind=EntryKind.EDGE, edge=edge)


class PlacementMode(Enum):
    """Whether background clicks create new nodes."""

    IDLE = "idle"
    PLACING = "placing"

    def toggled(self) -> "PlacementMode":
        if self is PlacementMode.PLACING:
            return PlacementMode.IDLE
        return PlacementMode.PLACING


@dataclass(frozen=True)
class RenderedRect:
    """Bounding rectangle of the background surface, in screen units."""

    left: float
    top: float
    width: float
    height: float


@dataclass(frozen=True)
class NaturalSize:
    """Natural pixel dimensions of the background surface."""

    width: int
    height: int

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x <= self.width and 0 <= y <= self.height
