"""Gallery page output."""

from pathlib import Path

from bs4 import BeautifulSoup

from ..exceptions import TemplateError
from ..render.template import load_bundled
from ..utils.logging import get_logger
from .container import GalleryContainer

logger = get_logger(__name__)

GALLERY_SELECTOR = "#project-gallery"


class GalleryPage:
    """HTML page skeleton holding the gallery container."""

    def __init__(self, markup: str | None = None) -> None:
        self.soup = BeautifulSoup(markup or load_bundled("gallery.html"), "html.parser")
        element = self.soup.select_one(GALLERY_SELECTOR)
        if element is None:
            raise TemplateError(f"Gallery page has no {GALLERY_SELECTOR} element")
        self.container = GalleryContainer(element)

    def render(self) -> str:
        return str(self.soup)

    def write(self, path: Path) -> Path:
        """Write the page to ``path``, creating parent directories."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.render(), encoding="utf-8")
        logger.info("Gallery written: %s (%d cards)", path, len(self.container))
        return path
