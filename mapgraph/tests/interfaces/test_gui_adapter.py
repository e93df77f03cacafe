"""Tests for routing window events through GUIAnnotationAdapter."""

from unittest.mock import Mock

import cv2
import numpy as np
import pytest

from mapgraph.core.annotation import Edge, EditorSession, EventType, PlacementMode
from mapgraph.interfaces import GUIAnnotationAdapter, Viewport
from mapgraph.utils.config import get_config


@pytest.fixture
def cfg():
    return get_config(env={})


@pytest.fixture
def adapter(cfg, test_image):
    session = EditorSession()
    session.set_mode(PlacementMode.PLACING)
    gui = GUIAnnotationAdapter(session, viewport=Viewport(200, 100), cfg=cfg)
    gui.set_image(test_image)
    return gui


def click(adapter, x, y):
    adapter.on_mouse(cv2.EVENT_LBUTTONDOWN, x, y, 0)
    adapter.on_mouse(cv2.EVENT_LBUTTONUP, x, y, 0)


def test_set_image_announces_surface(cfg, test_image):
    session = EditorSession()
    listener = Mock()
    session.events.on(EventType.SURFACE_READY, listener)

    gui = GUIAnnotationAdapter(session, viewport=Viewport(200, 100), cfg=cfg)
    gui.set_image(test_image)

    assert listener.call_args[0][0].data == {"width": 120, "height": 100}
    assert gui.viewport.get_natural_size().width == 120


def test_background_click_places_node(adapter):
    click(adapter, 30, 40)
    nodes = adapter.session.graph.nodes
    assert [(n.x, n.y) for n in nodes] == [(30, 40)]


def test_node_click_does_not_place_node(adapter):
    click(adapter, 30, 40)
    click(adapter, 32, 41)

    assert len(adapter.session.graph.nodes) == 1
    assert adapter.session.selected_node.id == "n1"


def test_two_node_clicks_link_nodes(adapter):
    click(adapter, 30, 40)
    click(adapter, 80, 40)
    click(adapter, 30, 40)
    click(adapter, 80, 40)
    assert adapter.session.graph.edges == [Edge("n1", "n2")]


def test_node_hit_follows_zoom(adapter):
    click(adapter, 30, 40)
    adapter.viewport.zoom_at(0, 0, 2)
    click(adapter, 61, 79)
    assert adapter.session.selected_node.id == "n1"


def test_drag_is_not_a_click(adapter):
    adapter.on_mouse(cv2.EVENT_LBUTTONDOWN, 10, 10, 0)
    adapter.on_mouse(cv2.EVENT_LBUTTONUP, 40, 10, 0)
    assert adapter.session.graph.is_empty()


def test_right_drag_pans(adapter):
    adapter.on_mouse(cv2.EVENT_RBUTTONDOWN, 10, 10, 0)
    adapter.on_mouse(cv2.EVENT_MOUSEMOVE, 25, 5, 0)
    adapter.on_mouse(cv2.EVENT_RBUTTONUP, 25, 5, 0)
    adapter.on_mouse(cv2.EVENT_MOUSEMOVE, 90, 90, 0)
    rect = adapter.viewport.get_rendered_rect()
    assert (rect.left, rect.top) == (15, -5)


def test_wheel_zooms(adapter, cfg):
    adapter.on_mouse(cv2.EVENT_MOUSEWHEEL, 0, 0, 120 << 16)
    assert adapter.viewport.scale == pytest.approx(cfg.viewport.zoom_step)


def test_keys(adapter):
    click(adapter, 30, 40)

    assert adapter.on_key(-1)
    assert adapter.on_key(ord("p"))
    assert adapter.session.mode is PlacementMode.IDLE

    click(adapter, 60, 60)
    assert len(adapter.session.graph.nodes) == 1

    adapter.on_key(ord("u"))
    assert adapter.session.graph.is_empty()

    adapter.on_key(ord("c"))
    assert not adapter.on_key(ord("q"))
    assert not adapter.on_key(27)


def test_save_key(cfg, test_image):
    persistence = Mock()
    gui = GUIAnnotationAdapter(
        EditorSession(), viewport=Viewport(200, 100), persistence=persistence, cfg=cfg
    )
    gui.set_image(test_image)
    gui.session.add_node(1, 2)

    gui.on_key(ord("s"))

    data, name = persistence.request_save.call_args[0]
    assert name == cfg.document_name
    assert b'"n1"' in data


def test_save_without_location(adapter):
    assert adapter.save() is None


def test_visualization(cfg, test_image):
    gui = GUIAnnotationAdapter(EditorSession(), viewport=Viewport(200, 100), cfg=cfg)
    assert gui.get_visualization() is None

    gui.set_image(test_image)
    gui.session.add_node(50, 50)
    frame = gui.get_visualization()

    assert frame.shape == (100, 200, 3)
    np.testing.assert_array_equal(frame[50, 50], cfg.draw.node_color)
    # Outside the image: window background
    np.testing.assert_array_equal(frame[90, 180], cfg.window.background)


def test_redraw_callback(cfg, test_image):
    callback = Mock()
    gui = GUIAnnotationAdapter(
        EditorSession(), viewport=Viewport(200, 100), cfg=cfg, update_image_callback=callback
    )
    gui.set_image(test_image)
    callback.reset_mock()

    gui.session.add_node(1, 1)

    callback.assert_called()
