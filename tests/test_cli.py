import cv2
import numpy as np
import pytest

from mapgraph.cli import build_parser
from mapgraph.core.annotation import Edge, Graph, Node, serialize


@pytest.fixture
def document(tmp_path):
    graph = Graph(
        nodes=[Node("n1", 5, 5), Node("n2", 30, 20)],
        edges=[Edge("n1", "n2")],
    )
    path = tmp_path / "graph.json"
    path.write_bytes(serialize(graph))
    return path


@pytest.fixture
def image(tmp_path):
    path = tmp_path / "map.png"
    cv2.imwrite(str(path), np.zeros((40, 50, 3), dtype=np.uint8))
    return path


def run(*argv):
    args = build_parser().parse_args([str(a) for a in argv])
    return args.fn(args)


def test_subcommands_are_discovered():
    parser = build_parser()
    for name in ("annotate", "info", "render"):
        args = parser.parse_args(_minimal(name))
        assert args.fn is not None


def _minimal(name):
    return {
        "annotate": ["annotate", "map.png"],
        "info": ["info", "graph.json"],
        "render": ["render", "map.png", "graph.json", "out.png"],
    }[name]


def test_info(document, capsys):
    assert run("info", document) == 0
    out = capsys.readouterr().out
    assert "num_nodes: 2" in out
    assert "num_edges: 1" in out


def test_info_malformed(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('{"nodes": []}')
    assert run("info", path) == 1


def test_render(image, document, tmp_path):
    output = tmp_path / "out" / "rendered.png"
    assert run("render", image, document, output) == 0

    rendered = cv2.imread(str(output))
    assert rendered.shape == (40, 50, 3)
    assert rendered[5, 5].sum() > 0


def test_render_refuses_overwrite(image, document, tmp_path):
    output = tmp_path / "rendered.png"
    output.write_bytes(b"")
    with pytest.raises(AssertionError):
        run("render", image, document, output)


def test_render_missing_image(document, tmp_path):
    assert run("render", tmp_path / "nope.png", document, tmp_path / "o.png") == 1


def test_annotate_missing_image(tmp_path):
    assert run("annotate", tmp_path / "nope.png", tmp_path / "graph.json") == 1


def test_annotate_malformed_document(image, tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('{"edges": []}')
    assert run("annotate", image, path) == 1


def test_info_missing_document(tmp_path):
    assert run("info", tmp_path / "missing.json") == 1


def test_render_missing_document(image, tmp_path):
    assert run("render", image, tmp_path / "missing.json", tmp_path / "o.png") == 1
