"""Code-host (GitHub) pinned repository extractor."""

from bs4 import Tag

from .base import BaseExtractor
from .document import StructuredDocument
from .models import Host, Image, Language, Project

GITHUB_LOGO = "/images/github.png"


class GitHubExtractor(BaseExtractor):
    """Extract pinned repositories from a GitHub profile page.

    Forks are skipped. Every project gets the local GitHub logo as its
    image rather than anything from the page.
    """

    host = Host.GITHUB
    base_url = "https://github.com"
    block_selector = 'div[class*="Box pinned-item-list-item"]:not([class*="fork"])'

    TITLE = 'span[class*="repo"]'
    DESCRIPTION = 'p[class*="pinned-item-desc"]'
    LINK = 'a[class*="Link"]'
    LANGUAGE_NAME = 'span[itemprop*="programmingLanguage"]'
    LANGUAGE_COLOUR = 'span[class*="repo-language-color"]'

    def extract_block(self, doc: StructuredDocument, block: Tag) -> Project:
        return Project(
            host=self.host,
            title=self._text(doc, block, self.TITLE),
            description=self._text(doc, block, self.DESCRIPTION),
            url=self._url(doc, block, self.LINK),
            image=Image(high_res_src=GITHUB_LOGO, alt="Github Logo"),
            programming_language=self._language(doc, block),
        )

    def _language(self, doc: StructuredDocument, block: Tag) -> Language | None:
        # A name without its colour (or the reverse) is useless to the card
        name = self._text(doc, block, self.LANGUAGE_NAME)
        style = self._attr(doc, block, self.LANGUAGE_COLOUR, "style")
        if name and style:
            return Language(name=name, style=style)
        return None
