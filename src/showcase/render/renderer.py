"""Project rendering into card fragments.

Single Responsibility: Project a Project onto a fresh template clone.
Every value written into the clone passes through a sanitizer right
before assignment; slots whose field is absent are removed entirely.
"""

from collections.abc import Callable
from typing import TypeVar

from bs4 import BeautifulSoup, Tag

from ..gatherers.models import Image, Project
from ..utils.logging import get_logger, source_logger
from ..utils.security import sanitize, sanitize_style, sanitize_url
from .progressive import ImageState, ProgressiveImage
from .template import ProjectTemplate

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_PLACEHOLDER = "/images/default.png"
DEFAULT_ALT = "Feature image"

# data-* attribute carrying each progressive tier after the placeholder
TIER_ATTRIBUTES = {
    ImageState.LOW_RES: "data-low-res-src",
    ImageState.HIGH_RES: "data-high-res-src",
}


class ProjectRenderer:
    """Render projects into detached card fragments."""

    HEADING = '[class="card-heading"]'
    DESCRIPTION = '[class="card-description"]'
    LINK = '[class="card-link"]'
    LANGUAGE = '[class="card-language"]'
    LANGUAGE_COLOUR = '[class="card-language-colour"]'
    LOGO = '[class*="card-logo"]'
    FEATURE_IMAGE = '[class="card-feature-image"]'

    def __init__(
        self, template: ProjectTemplate, placeholder_image: str = DEFAULT_PLACEHOLDER
    ) -> None:
        self.template = template
        self.placeholder_image = placeholder_image

    def render(self, project: Project) -> BeautifulSoup:
        """Render a project into a new fragment.

        Args:
            project: Extracted project (never modified)

        Returns:
            Detached fragment built from a fresh template clone
        """
        fragment = self.template.clone()
        language = project.programming_language

        self._fill(fragment, self.HEADING, sanitize(project.title), _set_text)
        self._fill(fragment, self.DESCRIPTION, sanitize(project.description), _set_text)
        self._fill(fragment, self.LINK, sanitize_url(project.url), _set_attr("href"))
        self._fill(
            fragment, self.LANGUAGE, sanitize(language.name) if language else "", _set_text
        )
        self._fill(
            fragment,
            self.LANGUAGE_COLOUR,
            sanitize_style(language.style) if language else "",
            _set_attr("style"),
        )

        # Logo: host name as text, project URL as its link
        self._fill(fragment, self.LOGO, sanitize(project.host.value), self._set_logo_text)
        self._fill(fragment, self.LOGO, sanitize_url(project.url), _set_attr("href"))

        self._fill(fragment, self.FEATURE_IMAGE, project.image, self._set_feature_image)

        source_logger(logger, project.host.value).debug("Rendered %r", project.title)
        return fragment

    def _fill(
        self,
        fragment: BeautifulSoup,
        selector: str,
        content: T | None,
        setter: Callable[[Tag, T], None],
    ) -> None:
        element = fragment.select_one(selector)
        if element is None:
            return
        if content:
            setter(element, content)
        else:
            element.decompose()

    def _set_logo_text(self, element: Tag, host: str) -> None:
        element.string = host
        element["data-host"] = host

    def _set_feature_image(self, element: Tag, image: Image) -> None:
        element["alt"] = sanitize(image.alt) or DEFAULT_ALT

        clean = Image(
            high_res_src=sanitize_url(image.high_res_src) or None,
            low_res_src=sanitize_url(image.low_res_src) or None,
        )
        loader = ProgressiveImage(clean, self.placeholder_image)
        element["src"] = loader.src

        # Replay the load signals; the page script follows the same tier order
        tiers = []
        while not loader.is_terminal:
            loader.on_load()
            element[TIER_ATTRIBUTES[loader.state]] = loader.src
            tiers.append(loader.state.value)
        element["data-progressive"] = " ".join(tiers) or ImageState.PLACEHOLDER.value


def _set_text(element: Tag, text: str) -> None:
    element.string = text


def _set_attr(name: str) -> Callable[[Tag, str], None]:
    def setter(element: Tag, value: str) -> None:
        element[name] = value

    return setter
