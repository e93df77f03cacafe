import logging
from gettext import gettext as _

import cv2

from mapgraph.core.annotation import EditorSession, MalformedDocument, PlacementMode
from mapgraph.interfaces import FilePersistence, GUIAnnotationAdapter
from mapgraph.utils.config import get_config

logger = logging.getLogger(__name__)

HELP_TEXT = _(
    "left click: place node / select node | right drag: pan | wheel: zoom\n"
    "p: toggle placement | u: undo | s: save | c: clear | r: reset view | q: quit"
)


def handle(args):
    cfg = get_config()

    image = cv2.imread(str(args.image), cv2.IMREAD_COLOR)
    if image is None:
        logger.error(_("Could not read image {path}").format(path=args.image))
        return 1

    session = EditorSession()
    persistence = FilePersistence(args.document, default_name=cfg.document_name)
    if persistence.exists():
        try:
            session.load_from(persistence)
        except MalformedDocument as e:
            logger.error(
                _("Invalid document {path}: {error}").format(
                    path=args.document, error=e
                )
            )
            return 1
        logger.info(
            _("Loaded {nodes} nodes and {edges} edges").format(
                nodes=len(session.graph.nodes), edges=len(session.graph.edges)
            )
        )
    if args.placing:
        session.set_mode(PlacementMode.PLACING)

    window = cfg.window.name
    dirty = [True]

    def mark_dirty():
        dirty[0] = True

    adapter = GUIAnnotationAdapter(
        session,
        persistence=persistence,
        cfg=cfg,
        update_image_callback=mark_dirty,
    )
    adapter.set_image(image)

    print(HELP_TEXT)
    cv2.namedWindow(window, cv2.WINDOW_AUTOSIZE)
    cv2.setMouseCallback(window, adapter.on_mouse)
    try:
        while True:
            if dirty[0]:
                cv2.imshow(window, adapter.get_visualization())
                dirty[0] = False
            if not adapter.on_key(cv2.waitKey(20)):
                break
            if cv2.getWindowProperty(window, cv2.WND_PROP_VISIBLE) < 1:
                break
    finally:
        cv2.destroyWindow(window)
    return 0
