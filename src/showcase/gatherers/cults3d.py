"""3D-model marketplace (Cults3D) creation extractor."""

import re

from bs4 import Tag

from .base import BaseExtractor
from .document import StructuredDocument
from .models import Host, Image, Project

# Lazy-load values are often CDN thumbnail wrappers embedding the original file URL
FULL_SIZE_PATTERN = re.compile(r"https://files\.cults3d\.com[^'\"]+")


def split_lazy_source(data_src: str) -> tuple[str, str | None]:
    """Split a lazy-load value into (high-res, low-res fallback).

    Args:
        data_src: Raw ``data-src`` attribute value

    Returns:
        The embedded full-size URL and the original value when one is
        embedded, otherwise the raw value and None
    """
    match = FULL_SIZE_PATTERN.search(data_src)
    if match:
        return match.group(0), data_src
    return data_src, None


class Cults3DExtractor(BaseExtractor):
    """Extract creations from a Cults3D user profile page."""

    host = Host.CULTS3D
    base_url = "https://cults3d.com"
    block_selector = 'article[class*="crea"]'

    LINK = 'a[class*="drawer-contents"]'
    IMAGE = 'img[class*="painting-image"]'

    def extract_block(self, doc: StructuredDocument, block: Tag) -> Project:
        return Project(
            host=self.host,
            # The link text is decorated; the title attribute is the clean name
            title=self._attr(doc, block, self.LINK, "title"),
            url=self._url(doc, block, self.LINK),
            image=self._image(doc, block),
        )

    def _image(self, doc: StructuredDocument, block: Tag) -> Image | None:
        data_src = self._attr(doc, block, self.IMAGE, "data-src")
        if not data_src:
            return None

        high_res, low_res = split_lazy_source(data_src)
        return Image(
            high_res_src=high_res,
            low_res_src=low_res,
            alt=self._attr(doc, block, self.IMAGE, "alt"),
        )
