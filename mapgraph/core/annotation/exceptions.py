"""Errors raised by the annotation engine."""


class AnnotationError(Exception):
    """Base class for annotation engine errors."""


class MissingSurfaceSize(AnnotationError):
    """The natural size of the background surface is not known yet."""


class EmptyUndo(AnnotationError):
    """Undo was requested with nothing in the history."""


class UnknownNode(AnnotationError, KeyError):
    """A store operation named a node id that is not in the graph."""


class MalformedDocument(AnnotationError, ValueError):
    """A document could not be decoded into a graph."""


class DanglingEdgeReference(MalformedDocument):
    """A document edge names a node id absent from its node list."""

    def __init__(self, edge_index: int, node_id: str):
        self.edge_index = edge_index
        self.node_id = node_id
        super().__init__(
            f"Edge #{edge_index} references unknown node {node_id!r}"
        )
