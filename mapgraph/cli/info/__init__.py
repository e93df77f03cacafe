import logging
from gettext import gettext as _
from pathlib import Path

logger = logging.getLogger(__name__)

COMMAND_DESCRIPTION = _("Validate a graph document and show its statistics")


def command(subparser):
    subparser.add_argument("document", type=Path)

    def handle(args):
        from mapgraph.core.annotation import MalformedDocument, deserialize
        from mapgraph.core.annotation.utils import compute_graph_statistics

        try:
            graph = deserialize(args.document.read_bytes())
        except (MalformedDocument, OSError) as e:
            logger.error(
                _("Invalid document {path}: {error}").format(
                    path=args.document, error=e
                )
            )
            return 1

        for key, value in compute_graph_statistics(graph).items():
            print(f"{key}: {value}")
        return 0

    return handle
