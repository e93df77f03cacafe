"""
Pure utility functions for annotation logic.

These functions have no side effects and can be tested in isolation.
"""

from typing import Optional, Tuple

import cv2
import numpy as np

from .exceptions import MissingSurfaceSize
from .state import Graph, NaturalSize, Node, RenderedRect

# OpenCV colors are BGR
DEEP_SKY_BLUE = (255, 191, 0)
ORANGE = (0, 165, 255)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(np.copysign(np.floor(np.abs(value) + 0.5), value))


def map_pointer_to_image(
    pointer_x: float,
    pointer_y: float,
    rect: RenderedRect,
    natural_size: Optional[NaturalSize],
) -> Tuple[int, int]:
    """
    Convert a screen-space pointer position to natural pixel coordinates.

    The rendered rectangle already reflects the current pan and zoom, so the
    result does not depend on either.

    Args:
        pointer_x: Pointer X in screen units
        pointer_y: Pointer Y in screen units
        rect: Rendered bounding rectangle of the surface
        natural_size: Natural size of the surface, None if not loaded yet

    Returns:
        (x, y) in natural pixel space

    Raises:
        MissingSurfaceSize: If the natural size is unknown or the surface
            is rendered with no area
    """
    if natural_size is None:
        raise MissingSurfaceSize("Surface natural size is not known yet")
    if rect.width <= 0 or rect.height <= 0:
        raise MissingSurfaceSize(f"Surface is rendered with no area: {rect}")

    scale_x = natural_size.width / rect.width
    scale_y = natural_size.height / rect.height
    x = round_half_away((pointer_x - rect.left) * scale_x)
    y = round_half_away((pointer_y - rect.top) * scale_y)
    return x, y


def find_node_at(graph: Graph, x: float, y: float, radius: float) -> Optional[Node]:
    """
    Find the top-most node within ``radius`` of (x, y).

    Nodes are drawn in insertion order, so the last match is the one on top.
    """
    for node in reversed(graph.nodes):
        if (node.x - x) ** 2 + (node.y - y) ** 2 <= radius ** 2:
            return node
    return None


def draw_graph_on_image(
    image: np.ndarray,
    graph: Graph,
    selected_id: Optional[str] = None,
    node_radius: int = 6,
    selected_radius: int = 8,
    edge_thickness: int = 4,
    node_color: Tuple[int, int, int] = DEEP_SKY_BLUE,
    selected_color: Tuple[int, int, int] = ORANGE,
    edge_color: Tuple[int, int, int] = DEEP_SKY_BLUE,
) -> np.ndarray:
    """
    Draw edges and nodes on a copy of the image, in natural pixel space.

    Edges whose endpoints are missing from the graph are skipped.

    Returns:
        Image with graph drawn
    """
    result = image.copy()
    positions = {n.id: (n.x, n.y) for n in graph.nodes}

    for edge in graph.edges:
        start = positions.get(edge.from_id)
        end = positions.get(edge.to_id)
        if start is None or end is None:
            continue
        cv2.line(result, start, end, edge_color, edge_thickness, cv2.LINE_AA)

    for node in graph.nodes:
        is_selected = node.id == selected_id
        radius = selected_radius if is_selected else node_radius
        color = selected_color if is_selected else node_color
        center = (node.x, node.y)

        # Black outline, white ring, then the fill
        cv2.circle(result, center, radius + 3, BLACK, -1, cv2.LINE_AA)
        cv2.circle(result, center, radius + 2, WHITE, -1, cv2.LINE_AA)
        cv2.circle(result, center, radius, color, -1, cv2.LINE_AA)

    return result


def validate_image(image: np.ndarray) -> None:
    """
    Validate that image can be used as a background surface.

    Raises:
        ValueError: If image is invalid
    """
    if image is None:
        raise ValueError("Image is None")

    if not isinstance(image, np.ndarray):
        raise ValueError(f"Image must be numpy array, got {type(image)}")

    if image.ndim != 3:
        raise ValueError(f"Image must be 3D (H, W, C), got shape {image.shape}")

    if image.shape[2] != 3:
        raise ValueError(f"Image must have 3 channels, got {image.shape[2]}")

    if image.dtype != np.uint8:
        raise ValueError(f"Invalid image dtype: {image.dtype}")


def compute_graph_statistics(graph: Graph) -> dict:
    """
    Compute statistics about a graph.

    Returns:
        Dictionary with statistics
    """
    degree = {n.id: 0 for n in graph.nodes}
    for edge in graph.edges:
        for node_id in (edge.from_id, edge.to_id):
            if node_id in degree:
                degree[node_id] += 1

    pairs = [frozenset((e.from_id, e.to_id)) for e in graph.edges]

    return {
        "num_nodes": len(graph.nodes),
        "num_edges": len(graph.edges),
        "num_isolated": sum(1 for d in degree.values() if d == 0),
        "num_parallel": len(pairs) - len(set(pairs)),
        "max_degree": max(degree.values()) if degree else 0,
    }
