"""Board-game collection (BoardGameGeek) extractor and image upgrader.

The collection page only carries small thumbnails. Each game's detail
document from the XML API names the canonical image, which replaces the
thumbnail as the high-resolution source while the thumbnail becomes the
low-resolution fallback.
"""

import re
from collections.abc import Callable
from urllib.parse import urlparse

from bs4 import Tag

from ..utils.logging import get_logger, source_logger
from .base import BaseExtractor
from .document import DocumentKind, StructuredDocument
from .fetcher import DocumentFetcher
from .models import Host, Image, Project

logger = source_logger(get_logger(__name__), Host.BOARDGAMEGEEK.value)

_NUMERIC_SEGMENT = re.compile(r"[0-9]+")


class BoardGameGeekExtractor(BaseExtractor):
    """Extract games from a BoardGameGeek collection page."""

    host = Host.BOARDGAMEGEEK
    base_url = "https://boardgamegeek.com"
    block_selector = 'tr[id*="row_"]'

    TITLE = 'td[class*="collection_objectname"] > div > a'
    DESCRIPTION = 'td[class*="collection_objectname"] > p'
    LINK = 'td[class*="collection_thumbnail"] > a'
    IMAGE = 'td[class*="collection_thumbnail"] > a > img'

    def extract_block(self, doc: StructuredDocument, block: Tag) -> Project:
        return Project(
            host=self.host,
            title=self._text(doc, block, self.TITLE),
            description=self._text(doc, block, self.DESCRIPTION),
            url=self._url(doc, block, self.LINK),
            image=self._image(doc, block),
        )

    def _image(self, doc: StructuredDocument, block: Tag) -> Image | None:
        src = self._attr(doc, block, self.IMAGE, "src")
        if not src:
            return None
        # Low-res tier is filled in later by upgrade_image
        return Image(high_res_src=src, alt=self._attr(doc, block, self.IMAGE, "alt"))


def extract_item_id(url: str | None) -> str | None:
    """Get the game identifier: the first purely numeric path segment.

    >>> extract_item_id("https://boardgamegeek.com/boardgame/13/catan")
    '13'
    """
    if not url:
        return None
    for segment in urlparse(url).path.split("/"):
        if _NUMERIC_SEGMENT.fullmatch(segment):
            return segment
    return None


def upgrade_image(project: Project, detail_doc: StructuredDocument) -> bool:
    """Promote a game's thumbnail to low-res and install the canonical image.

    Mutates ``project`` in place. A detail document without an image
    element leaves the project untouched.

    Args:
        project: Game extracted from the collection page
        detail_doc: Parsed XML API document for that one game

    Returns:
        True if the image was upgraded
    """
    image_url = detail_doc.text(detail_doc.query("image"))
    if not image_url or project.image is None:
        logger.debug("No image upgrade for %s", project.url)
        return False

    project.image.low_res_src = project.image.high_res_src
    project.image.high_res_src = image_url
    return True


async def upgrade_images(
    fetcher: DocumentFetcher,
    projects: list[Project],
    detail_source: Callable[[str], str],
) -> int:
    """Fetch each game's detail document in turn and upgrade its image.

    Games without a numeric id in their URL are skipped without a request.

    Args:
        fetcher: Open document fetcher
        projects: Games from the collection page, upgraded in place
        detail_source: Maps a game id to its detail document location

    Returns:
        Number of games whose image was upgraded

    Raises:
        TransportError: If a detail document cannot be fetched
    """
    upgraded = 0
    for project in projects:
        item_id = extract_item_id(project.url)
        if item_id is None:
            logger.debug("No game id in %s, skipping image upgrade", project.url)
            continue
        detail = await fetcher.fetch(detail_source(item_id), DocumentKind.DATA)
        if upgrade_image(project, detail):
            upgraded += 1

    logger.info("Upgraded %d of %d game images", upgraded, len(projects))
    return upgraded
