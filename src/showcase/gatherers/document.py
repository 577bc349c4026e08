"""Structured document parsing.

Single Responsibility: Turn raw markup or XML text into a queryable tree.
Parsing never raises; malformed input yields a degraded tree.
"""

import re
import xml.etree.ElementTree as ET
from enum import Enum
from typing import Any, Protocol

from bs4 import BeautifulSoup, Tag

from ..utils.logging import get_logger

logger = get_logger(__name__)

_XML_DECLARATION = re.compile(r"^\s*<\?xml[^>]*\?>", re.IGNORECASE)


class DocumentKind(Enum):
    """Supported document formats."""

    MARKUP = "text/html"
    DATA = "text/xml"


class StructuredDocument(Protocol):
    """Protocol for queryable documents - extractors depend only on this.

    Nodes are opaque to callers; read them back through ``text`` and ``attr``
    of the document that produced them.
    """

    kind: DocumentKind

    def query(self, selector: str, node: Any = None) -> Any:
        """Return the first node matching ``selector``, or None."""
        ...

    def query_all(self, selector: str, node: Any = None) -> list[Any]:
        """Return every node matching ``selector``."""
        ...

    def text(self, node: Any) -> str | None:
        """Stripped text content of a node, None when missing or empty."""
        ...

    def attr(self, node: Any, name: str) -> str | None:
        """Attribute value of a node, None when missing or empty."""
        ...


class MarkupDocument:
    """StructuredDocument backed by BeautifulSoup and soupsieve selectors."""

    kind = DocumentKind.MARKUP

    def __init__(self, soup: BeautifulSoup) -> None:
        self.soup = soup

    def query(self, selector: str, node: Tag | None = None) -> Tag | None:
        """Return the first node matching ``selector`` under ``node`` (or the root)."""
        return (self.soup if node is None else node).select_one(selector)

    def query_all(self, selector: str, node: Tag | None = None) -> list[Tag]:
        """Return all nodes matching ``selector`` under ``node`` (or the root)."""
        return list((self.soup if node is None else node).select(selector))

    @staticmethod
    def text(node: Tag | None) -> str | None:
        if node is None:
            return None
        text = node.get_text().strip()
        return text or None

    @staticmethod
    def attr(node: Tag | None, name: str) -> str | None:
        if node is None:
            return None
        value = node.get(name)
        if isinstance(value, list):
            value = " ".join(value)
        return str(value) if value else None


class DataDocument:
    """StructuredDocument over an XML API response.

    Selectors are ElementTree paths matched anywhere below the node, so a
    bare tag name such as ``image`` finds the first descendant of that name.
    A document that failed to parse has no root and matches nothing.
    """

    kind = DocumentKind.DATA

    def __init__(self, root: ET.Element | None) -> None:
        self.root = root

    def query(self, selector: str, node: ET.Element | None = None) -> ET.Element | None:
        scope = self.root if node is None else node
        if scope is None:
            return None
        return scope.find(f".//{selector}")

    def query_all(self, selector: str, node: ET.Element | None = None) -> list[ET.Element]:
        scope = self.root if node is None else node
        if scope is None:
            return []
        return scope.findall(f".//{selector}")

    @staticmethod
    def text(node: ET.Element | None) -> str | None:
        if node is None:
            return None
        text = "".join(node.itertext()).strip()
        return text or None

    @staticmethod
    def attr(node: ET.Element | None, name: str) -> str | None:
        if node is None:
            return None
        return node.get(name) or None


def parse_document(
    text: str, kind: DocumentKind = DocumentKind.MARKUP
) -> MarkupDocument | DataDocument:
    """Parse raw text into a queryable document.

    Args:
        text: Raw document text
        kind: Markup (HTML) or data-interchange (XML)

    Returns:
        MarkupDocument for markup, DataDocument for XML
    """
    if kind is DocumentKind.DATA:
        return _parse_data(text)

    logger.debug("Parsed %s document (%d chars)", kind.value, len(text))
    return MarkupDocument(BeautifulSoup(text, "html.parser"))


def _parse_data(text: str) -> DataDocument:
    # A str carries no bytes to decode, so an encoding declaration is noise
    body = _XML_DECLARATION.sub("", text, count=1).strip()
    try:
        root = ET.fromstring(body) if body else None
    except ET.ParseError as e:
        logger.warning("Malformed XML document (%d chars): %s", len(text), e)
        root = None
    logger.debug("Parsed %s document (%d chars)", DocumentKind.DATA.value, len(text))
    return DataDocument(root)
