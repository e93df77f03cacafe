"""
Core annotation module - UI-agnostic graph annotation logic.

This module provides the editor session, graph model, undo log and document
codec that any UI (OpenCV window, Web, CLI) drives through pointer and
button events.
"""

from .codec import deserialize, serialize
from .events import AnnotationEvent, EventEmitter, EventType
from .exceptions import (
    AnnotationError,
    DanglingEdgeReference,
    EmptyUndo,
    MalformedDocument,
    MissingSurfaceSize,
    UnknownNode,
)
from .graph import GraphStore
from .history import UndoLog
from .selection import SelectionStateMachine
from .session import EditorSession
from .state import (
    Edge,
    EntryKind,
    Graph,
    HistoryEntry,
    NaturalSize,
    Node,
    PlacementMode,
    RenderedRect,
)
from .utils import map_pointer_to_image

__all__ = [
    "EditorSession",
    "GraphStore",
    "UndoLog",
    "SelectionStateMachine",
    "serialize",
    "deserialize",
    "map_pointer_to_image",
    "AnnotationEvent",
    "EventType",
    "EventEmitter",
    "Node",
    "Edge",
    "Graph",
    "HistoryEntry",
    "EntryKind",
    "PlacementMode",
    "RenderedRect",
    "NaturalSize",
    "AnnotationError",
    "MissingSurfaceSize",
    "EmptyUndo",
    "UnknownNode",
    "MalformedDocument",
    "DanglingEdgeReference",
]
