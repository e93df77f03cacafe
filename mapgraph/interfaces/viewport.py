"""
Pan/zoom viewport over a fixed-size background surface.

Implements the viewport side the editor session consumes:
``get_rendered_rect()`` and ``get_natural_size()``.
"""

import logging
from typing import Optional, Sequence

import cv2
import numpy as np

from ..core.annotation.state import NaturalSize, RenderedRect

logger = logging.getLogger(__name__)


class Viewport:
    """
    Scale and translate transform from natural pixels to window pixels.

    A natural point p is shown at ``p * scale + offset``.
    """

    def __init__(
        self,
        window_width: int,
        window_height: int,
        min_scale: float = 0.2,
        max_scale: float = 6.0,
    ):
        self.window_width = int(window_width)
        self.window_height = int(window_height)
        self.min_scale = min_scale
        self.max_scale = max_scale

        self.scale = 1.0
        self.offset_x = 0.0
        self.offset_y = 0.0

        self._natural_size: Optional[NaturalSize] = None

    def set_natural_size(self, width: int, height: int):
        """
        Record the surface's natural size once it is known.

        This is a one-shot signal: repeating it with the same size is a no-op,
        a different size is an error.
        """
        size = NaturalSize(int(width), int(height))
        if self._natural_size is not None and self._natural_size != size:
            raise ValueError(
                f"Surface size already set to {self._natural_size}, got {size}"
            )
        if self._natural_size is None:
            logger.debug("Surface ready: %dx%d", size.width, size.height)
        self._natural_size = size

    def get_natural_size(self) -> Optional[NaturalSize]:
        return self._natural_size

    def get_rendered_rect(self) -> RenderedRect:
        if self._natural_size is None:
            return RenderedRect(self.offset_x, self.offset_y, 0.0, 0.0)
        return RenderedRect(
            left=self.offset_x,
            top=self.offset_y,
            width=self._natural_size.width * self.scale,
            height=self._natural_size.height * self.scale,
        )

    def zoom_at(self, x: float, y: float, factor: float):
        """Zoom by ``factor`` keeping the window point (x, y) fixed."""
        new_scale = float(np.clip(self.scale * factor, self.min_scale, self.max_scale))
        ratio = new_scale / self.scale
        self.offset_x = x - (x - self.offset_x) * ratio
        self.offset_y = y - (y - self.offset_y) * ratio
        self.scale = new_scale

    def pan(self, dx: float, dy: float):
        self.offset_x += dx
        self.offset_y += dy

    def reset(self):
        self.scale = 1.0
        self.offset_x = 0.0
        self.offset_y = 0.0

    def to_frame(
        self, image: np.ndarray, background: Sequence[int] = (0, 0, 0)
    ) -> np.ndarray:
        """Render a natural-size image into a window-size frame."""
        matrix = np.float32(
            [
                [self.scale, 0, self.offset_x],
                [0, self.scale, self.offset_y],
            ]
        )
        return cv2.warpAffine(
            image,
            matrix,
            (self.window_width, self.window_height),
            flags=cv2.INTER_LINEAR,
            borderMode=cv2.BORDER_CONSTANT,
            borderValue=tuple(int(c) for c in background),
        )
