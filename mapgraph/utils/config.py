import copy
import os
from typing import Dict, Optional

from easydict import EasyDict as edict

from mapgraph.utils.env import load_cfg_from_env

# Colors are BGR, as OpenCV expects them
DEFAULT_CONFIG = dict(
    document_name="graph.json",
    draw=dict(
        node_radius=6,
        selected_radius=8,
        edge_thickness=4,
        node_color=[255, 191, 0],
        selected_color=[0, 165, 255],
        edge_color=[255, 191, 0],
    ),
    viewport=dict(
        min_scale=0.2,
        max_scale=6.0,
        zoom_step=1.2,
        window_width=1280,
        window_height=800,
    ),
    window=dict(
        name="mapgraph",
        background=[32, 32, 32],
    ),
)


def get_config(env: Optional[Dict[str, str]] = None) -> edict:
    """Defaults overridden by ``MAPGRAPH_*`` environment variables."""
    cfg = edict(copy.deepcopy(DEFAULT_CONFIG))
    return load_cfg_from_env(cfg, os.environ if env is None else env)
