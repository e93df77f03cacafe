"""
Event system for graph annotation.

Lets the editor session notify UI components about changes without
depending on a specific UI framework.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Types of events that can occur during annotation."""

    # Surface events
    SURFACE_READY = "surface_ready"

    # Graph events
    NODE_ADDED = "node_added"
    NODE_REMOVED = "node_removed"
    EDGE_ADDED = "edge_added"
    EDGE_REMOVED = "edge_removed"
    GRAPH_CLEARED = "graph_cleared"
    ACTION_UNDONE = "action_undone"

    # Interaction events
    CLICK_REJECTED = "click_rejected"
    SELECTION_CHANGED = "selection_changed"
    MODE_CHANGED = "mode_changed"

    # Document events
    DOCUMENT_LOADED = "document_loaded"
    DOCUMENT_SAVED = "document_saved"
    LOAD_FAILED = "load_failed"


@dataclass
class AnnotationEvent:
    """Event that occurs during annotation."""

    event_type: EventType
    data: Optional[Dict[str, Any]] = None

    def __post_init__(self):
        if self.data is None:
            self.data = {}


class EventEmitter:
    """
    Simple event emitter for pub/sub pattern.

    Allows components to subscribe to events without tight coupling.
    """

    def __init__(self):
        self._listeners: Dict[EventType, List[Callable]] = {}

    def on(self, event_type: EventType, callback: Callable[[AnnotationEvent], None]):
        """Subscribe to an event type."""
        if event_type not in self._listeners:
            self._listeners[event_type] = []
        self._listeners[event_type].append(callback)

    def on_any(self, callback: Callable[[AnnotationEvent], None]):
        """Subscribe to every event type."""
        for event_type in EventType:
            self.on(event_type, callback)

    def off(self, event_type: EventType, callback: Callable[[AnnotationEvent], None]):
        """Unsubscribe from an event type."""
        if event_type in self._listeners:
            self._listeners[event_type].remove(callback)

    def emit(self, event: AnnotationEvent):
        """Emit an event to all subscribers."""
        for callback in self._listeners.get(event.event_type, []):
            try:
                callback(event)
            except Exception:
                # Listener bugs must not break the mutation that emitted
                logger.exception("Error in %s listener", event.event_type.value)

    def clear(self):
        """Clear all event listeners."""
        self._listeners.clear()
