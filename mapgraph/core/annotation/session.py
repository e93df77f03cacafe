"""
Editor session management.

Core logic for an interactive graph annotation session.
UI-agnostic - can be used with any interface (GUI, Web, CLI).
"""

import logging
from typing import Any, Dict, Optional, Union

from .codec import deserialize, serialize
from .events import AnnotationEvent, EventEmitter, EventType
from .exceptions import EmptyUndo, MalformedDocument, MissingSurfaceSize, UnknownNode
from .graph import GraphStore
from .history import UndoLog
from .selection import SelectionStateMachine
from .state import EntryKind, Graph, HistoryEntry, Node, Edge, PlacementMode
from .utils import map_pointer_to_image

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENT_NAME = "graph.json"


class EditorSession:
    """
    Owns the graph, undo log, selection and placement mode of one editor.

    This class handles:
    - Node placement from pointer clicks on the background surface
    - Two-click edge creation
    - Linear undo of the last committed action
    - Loading and saving documents
    - Event emission for UI updates

    Every handler runs to completion before the next input is processed;
    the session is not meant to be shared across threads.
    """

    def __init__(self, graph: Optional[Graph] = None):
        """
        Initialize editor session.

        Args:
            graph: Optional graph to start from. It is not undoable.
        """
        self.store = GraphStore(graph)
        self.history = UndoLog()
        self.selection = SelectionStateMachine()
        self.mode = PlacementMode.IDLE

        # Event emitter for UI notifications
        self.events = EventEmitter()

    @property
    def graph(self) -> Graph:
        return self.store.graph

    @property
    def selected_node(self) -> Optional[Node]:
        return self.selection.armed

    # Placement mode

    def set_mode(self, mode: PlacementMode):
        if mode is self.mode:
            return
        self.mode = mode
        logger.debug("Placement mode is now %s", mode.value)
        self.events.emit(AnnotationEvent(EventType.MODE_CHANGED, {"mode": mode}))

    def toggle_placement(self) -> PlacementMode:
        self.set_mode(self.mode.toggled())
        return self.mode

    # Pointer input

    def click_surface(self, pointer_x: float, pointer_y: float, viewport) -> Optional[Node]:
        """
        Handle a click on the background surface that missed every node.

        Args:
            pointer_x: Pointer X in screen units
            pointer_y: Pointer Y in screen units
            viewport: Object with ``get_rendered_rect()`` and
                ``get_natural_size()``

        Returns:
            The placed node, or None if the click was refused
        """
        if self.mode is not PlacementMode.PLACING:
            return None

        natural_size = viewport.get_natural_size()
        try:
            x, y = map_pointer_to_image(
                pointer_x, pointer_y, viewport.get_rendered_rect(), natural_size
            )
        except MissingSurfaceSize as e:
            logger.debug("Ignoring click: %s", e)
            self._reject_click(pointer_x, pointer_y, "surface_not_ready")
            return None

        if not natural_size.contains(x, y):
            logger.debug("Ignoring click outside the image at (%d, %d)", x, y)
            self._reject_click(pointer_x, pointer_y, "outside_image")
            return None

        return self.add_node(x, y)

    def click_node(self, node_id: str) -> Optional[Edge]:
        """
        Handle a click on an existing node.

        Works in either placement mode and never places a node.

        Returns:
            The edge created by this click, if it completed one
        """
        node = self.graph.get_node(node_id)
        if node is None:
            raise UnknownNode(node_id)

        pair = self.selection.click(node)
        self._emit_selection()
        if pair is None:
            return None
        return self.add_edge(*pair)

    # Mutations

    def add_node(self, x: int, y: int) -> Node:
        node = self.store.add_node(x, y)
        self.history.push(HistoryEntry.for_node(node))
        self.events.emit(AnnotationEvent(EventType.NODE_ADDED, {"node": node.to_dict()}))
        return node

    def add_edge(self, from_id: str, to_id: str) -> Edge:
        edge = self.store.add_edge(from_id, to_id)
        self.history.push(HistoryEntry.for_edge(edge))
        self.events.emit(AnnotationEvent(EventType.EDGE_ADDED, {"edge": edge.to_dict()}))
        return edge

    def undo(self) -> bool:
        """
        Undo the last node or edge addition.

        Returns:
            True if undo was successful, False if no history
        """
        try:
            entry = self.history.pop(self.store)
        except EmptyUndo:
            return False

        if entry.kind is EntryKind.NODE:
            if self.selection.forget(entry.node.id):
                self._emit_selection()
            self.events.emit(
                AnnotationEvent(EventType.NODE_REMOVED, {"node": entry.node.to_dict()})
            )
        else:
            self.events.emit(
                AnnotationEvent(EventType.EDGE_REMOVED, {"edge": entry.edge.to_dict()})
            )

        self.events.emit(
            AnnotationEvent(EventType.ACTION_UNDONE, {"kind": entry.kind.value})
        )
        return True

    def clear(self):
        """Drop every node, edge, history entry and the selection."""
        self.store.clear()
        self.history.clear()
        self.selection.clear()
        self.events.emit(AnnotationEvent(EventType.GRAPH_CLEARED))

    # Documents

    def load_document(self, data: Union[bytes, str]):
        """
        Replace the graph with a decoded document and reset the history.

        On failure the current graph, history and selection are untouched.

        Raises:
            MalformedDocument: If the document cannot be decoded
        """
        try:
            graph = deserialize(data)
        except MalformedDocument as e:
            logger.warning("Could not load document: %s", e)
            self.events.emit(AnnotationEvent(EventType.LOAD_FAILED, {"error": str(e)}))
            raise

        self.store.replace(graph)
        self.history.clear()
        self.selection.clear()
        self.events.emit(
            AnnotationEvent(
                EventType.DOCUMENT_LOADED,
                {"num_nodes": len(graph.nodes), "num_edges": len(graph.edges)},
            )
        )

    def save_document(self) -> bytes:
        data = serialize(self.graph)
        self.events.emit(AnnotationEvent(EventType.DOCUMENT_SAVED, {"size": len(data)}))
        return data

    def load_from(self, persistence):
        """Load through a persistence collaborator (``request_load() -> bytes``)."""
        self.load_document(persistence.request_load())

    def save_to(self, persistence, suggested_name: str = DEFAULT_DOCUMENT_NAME):
        """Save through a persistence collaborator (``request_save(bytes, name)``)."""
        persistence.request_save(self.save_document(), suggested_name)

    def get_visualization_data(self) -> Dict[str, Any]:
        """
        Get data needed for visualization.

        Returns:
            Dictionary with visualization data
        """
        selected = self.selection.armed
        return {
            "graph": self.graph,
            "selected_id": selected.id if selected is not None else None,
            "mode": self.mode,
            "can_undo": len(self.history) > 0,
        }

    def _emit_selection(self):
        selected = self.selection.armed
        self.events.emit(
            AnnotationEvent(
                EventType.SELECTION_CHANGED,
                {"node_id": selected.id if selected is not None else None},
            )
        )

    def _reject_click(self, pointer_x: float, pointer_y: float, reason: str):
        self.events.emit(
            AnnotationEvent(
                EventType.CLICK_REJECTED,
                {"pointer": (pointer_x, pointer_y), "reason": reason},
            )
        )
