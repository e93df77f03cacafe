"""
Test fixtures for mapgraph tests.

Provides reusable sessions, graphs, images and a stand-in viewport.
"""

from typing import Optional

import numpy as np
import pytest

from mapgraph.core.annotation import (
    Edge,
    EditorSession,
    Graph,
    NaturalSize,
    Node,
    PlacementMode,
    RenderedRect,
)


class FakeViewport:
    """Viewport that reports a fixed rendered rectangle."""

    def __init__(self, rect: RenderedRect, natural_size: Optional[NaturalSize]):
        self.rect = rect
        self.natural_size = natural_size

    def get_rendered_rect(self) -> RenderedRect:
        return self.rect

    def get_natural_size(self) -> Optional[NaturalSize]:
        return self.natural_size


@pytest.fixture
def viewport():
    """Surface of 400x200 natural pixels shown at half size at (10, 20)."""
    return FakeViewport(RenderedRect(10, 20, 200, 100), NaturalSize(400, 200))


@pytest.fixture
def unloaded_viewport():
    """Viewport whose surface size is not known yet."""
    return FakeViewport(RenderedRect(0, 0, 0, 0), None)


@pytest.fixture
def session():
    return EditorSession()


@pytest.fixture
def placing_session():
    s = EditorSession()
    s.set_mode(PlacementMode.PLACING)
    return s


@pytest.fixture
def sample_graph():
    """Triangle plus an isolated node."""
    return Graph(
        nodes=[
            Node("n1", 10, 10),
            Node("n2", 50, 10),
            Node("n3", 30, 40),
            Node("n4", 90, 90),
        ],
        edges=[
            Edge("n1", "n2"),
            Edge("n2", "n3"),
            Edge("n3", "n1"),
        ],
    )


@pytest.fixture
def test_image():
    """Create a black BGR test image (H=100, W=120)."""
    return np.zeros((100, 120, 3), dtype=np.uint8)
