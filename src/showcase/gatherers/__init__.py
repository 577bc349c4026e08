"""Source fetching, parsing and extraction."""

from .base import BaseExtractor, resolve_url
from .boardgamegeek import (
    BoardGameGeekExtractor,
    extract_item_id,
    upgrade_image,
    upgrade_images,
)
from .cults3d import Cults3DExtractor
from .document import (
    DataDocument,
    DocumentKind,
    MarkupDocument,
    StructuredDocument,
    parse_document,
)
from .fetcher import DocumentFetcher
from .github import GitHubExtractor
from .models import Host, Image, Language, Project

EXTRACTORS: dict[Host, type[BaseExtractor]] = {
    Host.GITHUB: GitHubExtractor,
    Host.CULTS3D: Cults3DExtractor,
    Host.BOARDGAMEGEEK: BoardGameGeekExtractor,
}

__all__ = [
    "EXTRACTORS",
    # Model
    "Host",
    "Image",
    "Language",
    "Project",
    # Documents
    "DataDocument",
    "DocumentFetcher",
    "DocumentKind",
    "MarkupDocument",
    "StructuredDocument",
    "parse_document",
    # Extractors
    "BaseExtractor",
    "BoardGameGeekExtractor",
    "Cults3DExtractor",
    "GitHubExtractor",
    "extract_item_id",
    "resolve_url",
    "upgrade_image",
    "upgrade_images",
]
