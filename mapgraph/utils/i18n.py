import gettext
import logging
import os
from gettext import gettext as _
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DOMAIN = "mapgraph"

# Catalogs shipped with the package; MAPGRAPH_LOCALE_DIR points elsewhere
default_locale_dir = Path(__file__).parent.parent / "i18n"


def bind_domain(locale_dir: Optional[Path] = None) -> Path:
    """Make ``_()`` look up mapgraph catalogs. Returns the directory used."""
    if locale_dir is None:
        locale_dir = Path(os.environ.get("MAPGRAPH_LOCALE_DIR", default_locale_dir))
    gettext.bindtextdomain(DOMAIN, localedir=str(locale_dir))
    gettext.textdomain(DOMAIN)
    logger.debug(
        _('Loading locale data from "{locale_folder}"').format(
            locale_folder=locale_dir
        )
    )
    return Path(locale_dir)


locale_dir = bind_domain()
