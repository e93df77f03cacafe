"""
Two-click node selection used to create edges.

The machine is either idle or armed with one node. Clicking a second,
different node yields the pair to link and returns to idle.
"""

from typing import Optional, Tuple

from .state import Node


class SelectionStateMachine:
    """Tracks at most one armed node."""

    def __init__(self):
        self.armed: Optional[Node] = None

    @property
    def is_armed(self) -> bool:
        return self.armed is not None

    def click(self, node: Node) -> Optional[Tuple[str, str]]:
        """
        Feed a node click into the machine.

        Returns:
            (from_id, to_id) when the click completes an edge, otherwise None
        """
        if self.armed is None:
            self.armed = node
            return None

        first = self.armed
        self.armed = None
        if first.id == node.id:
            return None
        return (first.id, node.id)

    def forget(self, node_id: str) -> bool:
        """Disarm if the armed node is ``node_id``. Returns True if it was."""
        if self.armed is not None and self.armed.id == node_id:
            self.armed = None
            return True
        return False

    def clear(self):
        self.armed = None
