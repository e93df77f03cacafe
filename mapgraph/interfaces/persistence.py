"""File-backed persistence for graph documents."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FilePersistence:
    """
    Saves and loads documents at a path.

    If ``path`` is a directory, saves go to ``path / suggested_name`` and
    loads read ``path / default_name``.
    """

    def __init__(self, path: Path, default_name: str = "graph.json"):
        self.path = Path(path)
        self.default_name = default_name

    def _target(self, name: str) -> Path:
        if self.path.is_dir():
            return self.path / name
        return self.path

    def request_save(self, data: bytes, suggested_name: str) -> Path:
        target = self._target(suggested_name)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(data)
        logger.info("Saved graph document to %s", target)
        return target

    def request_load(self) -> bytes:
        source = self._target(self.default_name)
        logger.debug("Loading graph document from %s", source)
        return source.read_bytes()

    def exists(self) -> bool:
        return self._target(self.default_name).is_file()
