import logging
from gettext import gettext as _
from pathlib import Path

logger = logging.getLogger(__name__)

COMMAND_DESCRIPTION = _("Draw a graph document over its background image")


def command(subparser):
    subparser.add_argument("image", type=Path, help=_("Background image"))
    subparser.add_argument("document", type=Path, help=_("Graph document"))
    subparser.add_argument("output", type=Path, help=_("Where to write the image"))
    subparser.add_argument(
        "--overwrite",
        action="store_true",
        help=_("Overwrite output image if it exists"),
    )

    def handle(args):
        import cv2

        from mapgraph.core.annotation import MalformedDocument, deserialize
        from mapgraph.core.annotation.utils import draw_graph_on_image
        from mapgraph.utils.config import get_config

        if not args.overwrite:
            assert not args.output.exists(), _(
                "Output exists, use --overwrite to ignore this"
            )
        image = cv2.imread(str(args.image), cv2.IMREAD_COLOR)
        if image is None:
            logger.error(_("Could not read image {path}").format(path=args.image))
            return 1
        try:
            graph = deserialize(args.document.read_bytes())
        except (MalformedDocument, OSError) as e:
            logger.error(
                _("Invalid document {path}: {error}").format(
                    path=args.document, error=e
                )
            )
            return 1

        draw = get_config().draw
        result = draw_graph_on_image(
            image,
            graph,
            node_radius=draw.node_radius,
            selected_radius=draw.selected_radius,
            edge_thickness=draw.edge_thickness,
            node_color=tuple(draw.node_color),
            edge_color=tuple(draw.edge_color),
        )
        args.output.parent.mkdir(exist_ok=True, parents=True)
        if not cv2.imwrite(str(args.output), result):
            logger.error(_("Could not write {path}").format(path=args.output))
            return 1
        logger.info(_("Wrote {path}").format(path=args.output))
        return 0

    return handle
