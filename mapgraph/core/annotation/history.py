"""
Linear undo log.

Every committed mutation is appended as an immutable HistoryEntry; popping
the most recent entry applies its inverse to a GraphStore. There is no redo.
"""

import logging
from typing import List

from .exceptions import EmptyUndo
from .graph import GraphStore
from .state import EntryKind, HistoryEntry

logger = logging.getLogger(__name__)


class UndoLog:
    def __init__(self):
        self._entries: List[HistoryEntry] = []

    def __len__(self):
        return len(self._entries)

    @property
    def entries(self) -> List[HistoryEntry]:
        """Copy of the log, oldest first."""
        return list(self._entries)

    def push(self, entry: HistoryEntry):
        self._entries.append(entry)

    def pop(self, store: GraphStore) -> HistoryEntry:
        """
        Remove the last entry and revert it on ``store``.

        Undoing a node also drops the edges attached to it since, which are
        not logged separately.

        Raises:
            EmptyUndo: If the log is empty
        """
        if not self._entries:
            raise EmptyUndo()

        entry = self._entries.pop()
        if entry.kind is EntryKind.NODE:
            store.remove_node(entry.node.id)
        else:
            store.remove_edge(entry.edge.from_id, entry.edge.to_id)
        logger.debug("Reverted %s entry, %d left", entry.kind.value, len(self))
        return entry

    def clear(self):
        self._entries.clear()
