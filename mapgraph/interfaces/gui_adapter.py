"""
GUI adapter for the editor session.

Bridges the EditorSession with an OpenCV HighGUI window.
"""

import logging
from typing import Callable, Optional

import cv2
import numpy as np
from easydict import EasyDict as edict

from ..core.annotation import AnnotationEvent, EditorSession, EventType, PlacementMode
from ..core.annotation.utils import draw_graph_on_image, find_node_at, validate_image
from ..utils.config import get_config
from .viewport import Viewport

logger = logging.getLogger(__name__)

# Pointer travel (window pixels) below which a press/release is a click
CLICK_TOLERANCE = 4

KEY_ESCAPE = 27


class GUIAnnotationAdapter:
    """
    Adapter connecting EditorSession to an OpenCV window.

    Provides a layer that:
    - Routes mouse events to node clicks, surface clicks, pan and zoom
    - Maps keys to the toolbar actions (placement, undo, save, clear)
    - Renders the graph over the background image
    """

    def __init__(
        self,
        session: EditorSession,
        viewport: Optional[Viewport] = None,
        persistence=None,
        cfg: Optional[edict] = None,
        update_image_callback: Optional[Callable] = None,
    ):
        """
        Initialize adapter.

        Args:
            session: Core editor session
            viewport: Pan/zoom viewport, built from ``cfg`` if omitted
            persistence: Object with ``request_save(bytes, name)``
            cfg: Configuration tree, defaults from ``get_config()``
            update_image_callback: Callback to redraw the window
        """
        self.session = session
        self.cfg = cfg if cfg is not None else get_config()
        if viewport is None:
            viewport = Viewport(
                self.cfg.viewport.window_width,
                self.cfg.viewport.window_height,
                min_scale=self.cfg.viewport.min_scale,
                max_scale=self.cfg.viewport.max_scale,
            )
        self.viewport = viewport
        self.persistence = persistence
        self.update_image_callback = update_image_callback

        self._image: Optional[np.ndarray] = None
        self._press: Optional[tuple] = None
        self._pan_from: Optional[tuple] = None

        self.session.events.on_any(self._on_session_changed)

    def _on_session_changed(self, event: AnnotationEvent):
        """Redraw after any session change."""
        if self.update_image_callback:
            self.update_image_callback()

    def set_image(self, image: np.ndarray):
        """Use ``image`` (BGR) as the background surface."""
        validate_image(image)
        height, width = image.shape[:2]
        self._image = image
        self.viewport.set_natural_size(width, height)
        self.session.events.emit(
            AnnotationEvent(EventType.SURFACE_READY, {"width": width, "height": height})
        )

    @property
    def hit_radius(self) -> int:
        # Selected nodes are drawn bigger, outline included
        return self.cfg.draw.selected_radius + 3

    # Mouse

    def on_mouse(self, event, x, y, flags, param=None):
        """Callback for ``cv2.setMouseCallback``."""
        if event == cv2.EVENT_LBUTTONDOWN:
            self._press = (x, y)
        elif event == cv2.EVENT_LBUTTONUP:
            press, self._press = self._press, None
            if press is None:
                return
            if abs(x - press[0]) <= CLICK_TOLERANCE and abs(y - press[1]) <= CLICK_TOLERANCE:
                self.click(x, y)
        elif event == cv2.EVENT_RBUTTONDOWN:
            self._pan_from = (x, y)
        elif event == cv2.EVENT_MOUSEMOVE and self._pan_from is not None:
            self.viewport.pan(x - self._pan_from[0], y - self._pan_from[1])
            self._pan_from = (x, y)
            self._refresh()
        elif event == cv2.EVENT_RBUTTONUP:
            self._pan_from = None
        elif event == cv2.EVENT_MOUSEWHEEL:
            step = self.cfg.viewport.zoom_step
            factor = step if cv2.getMouseWheelDelta(flags) > 0 else 1 / step
            self.viewport.zoom_at(x, y, factor)
            self._refresh()

    def click(self, x: float, y: float):
        """
        Route a click: a node under the pointer takes it, otherwise the
        background surface does.
        """
        node = self.node_at(x, y)
        if node is not None:
            return self.session.click_node(node.id)
        return self.session.click_surface(x, y, self.viewport)

    def node_at(self, x: float, y: float):
        size = self.viewport.get_natural_size()
        rect = self.viewport.get_rendered_rect()
        if size is None or rect.width <= 0 or rect.height <= 0:
            return None
        nx = (x - rect.left) * size.width / rect.width
        ny = (y - rect.top) * size.height / rect.height
        return find_node_at(self.session.graph, nx, ny, self.hit_radius)

    # Keyboard

    def on_key(self, key: int) -> bool:
        """
        Handle a key from ``cv2.waitKey``.

        Returns:
            False when the user asked to quit
        """
        if key < 0:
            return True
        char = chr(key & 0xFF).lower()
        if key == KEY_ESCAPE or char == "q":
            return False
        if char == "p":
            self.session.toggle_placement()
        elif char == "u":
            self.session.undo()
        elif char == "s":
            self.save()
        elif char == "c":
            self.session.clear()
        elif char == "r":
            self.viewport.reset()
            self._refresh()
        return True

    def save(self):
        if self.persistence is None:
            logger.warning("No document location configured, not saving")
            return None
        return self.session.save_to(self.persistence, self.cfg.document_name)

    # Rendering

    def get_visualization(self) -> Optional[np.ndarray]:
        """
        Get the window frame for display.

        Returns:
            BGR frame of the viewport size, or None before an image is set
        """
        if self._image is None:
            return None

        viz_data = self.session.get_visualization_data()
        draw = self.cfg.draw
        canvas = draw_graph_on_image(
            self._image,
            viz_data["graph"],
            selected_id=viz_data["selected_id"],
            node_radius=draw.node_radius,
            selected_radius=draw.selected_radius,
            edge_thickness=draw.edge_thickness,
            node_color=tuple(draw.node_color),
            selected_color=tuple(draw.selected_color),
            edge_color=tuple(draw.edge_color),
        )
        frame = self.viewport.to_frame(canvas, self.cfg.window.background)

        placing = viz_data["mode"] is PlacementMode.PLACING
        status = "PLACING" if placing else "SELECT"
        cv2.putText(
            frame,
            f"{status}  nodes={len(viz_data['graph'].nodes)} "
            f"edges={len(viz_data['graph'].edges)}",
            (10, 24),
            cv2.FONT_HERSHEY_SIMPLEX,
            0.6,
            (0, 0, 255) if placing else (0, 200, 0),
            2,
            cv2.LINE_AA,
        )
        return frame

    def _refresh(self):
        if self.update_image_callback:
            self.update_image_callback()
