"""Base class for source extractors."""

from abc import ABC, abstractmethod
from urllib.parse import urljoin, urlparse

from bs4 import Tag

from ..utils.logging import get_logger, source_logger
from .document import StructuredDocument
from .models import Host, Project

logger = get_logger(__name__)


def resolve_url(href: str | None, base: str) -> str | None:
    """Resolve a link against a source origin.

    Args:
        href: Raw href from the page (may be relative)
        base: The source site's base origin

    Returns:
        Absolute http(s) URL, or None when the link is missing or unusable
    """
    if not href or href.startswith("#"):
        return None

    url = urljoin(base, href.strip())
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return None
    return url


class BaseExtractor(ABC):
    """Base class for all source extractors.

    Subclasses locate repeating item blocks with a substring-matching
    selector and build one Project per block. Every field lookup is
    independent; a missing sub-element only leaves that field empty.
    """

    host: Host
    base_url: str
    block_selector: str

    def extract(self, doc: StructuredDocument) -> list[Project]:
        """Extract every project listed in a source document.

        Args:
            doc: Parsed source page

        Returns:
            Projects in document order
        """
        blocks = doc.query_all(self.block_selector)
        projects = [self.extract_block(doc, block) for block in blocks]
        source_logger(logger, self.host.value).debug(
            "%d blocks -> %d projects", len(blocks), len(projects)
        )
        return projects

    @abstractmethod
    def extract_block(self, doc: StructuredDocument, block: Tag) -> Project:
        """Build a Project from a single item block."""
        pass

    def _text(self, doc: StructuredDocument, block: Tag, selector: str) -> str | None:
        return doc.text(doc.query(selector, block))

    def _attr(
        self, doc: StructuredDocument, block: Tag, selector: str, name: str
    ) -> str | None:
        value = doc.attr(doc.query(selector, block), name)
        if value is None:
            return None
        return value.strip() or None

    def _url(self, doc: StructuredDocument, block: Tag, selector: str) -> str | None:
        return resolve_url(self._attr(doc, block, selector, "href"), self.base_url)
