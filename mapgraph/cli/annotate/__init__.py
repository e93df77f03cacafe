# flake8: noqa E501

from gettext import gettext as _
from pathlib import Path

COMMAND_DESCRIPTION = _("Interactively place nodes and edges over an image")


def command(subparser):
    subparser.add_argument("image", type=Path, help=_("Background image"))
    subparser.add_argument(
        "document",
        type=Path,
        nargs="?",
        default=Path("graph.json"),
        help=_("Graph document to load (if it exists) and save to"),
    )
    subparser.add_argument(
        "--placing",
        action="store_true",
        help=_("Start with node placement enabled"),
    )

    def handle(args):
        from .annotator import handle as annotator_handle

        return annotator_handle(args)

    return handle
