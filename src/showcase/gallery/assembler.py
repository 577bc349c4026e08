"""Gallery assembler - coordinator class.

Orchestrates fetch -> extract -> enrich -> render -> insert for every
source, one source and one request at a time.
"""

import random

from ..config import Settings, settings
from ..gatherers.boardgamegeek import BoardGameGeekExtractor, upgrade_images
from ..gatherers.cults3d import Cults3DExtractor
from ..gatherers.fetcher import DocumentFetcher
from ..gatherers.github import GitHubExtractor
from ..gatherers.models import Host, Project
from ..render.renderer import ProjectRenderer
from ..utils.logging import get_logger, source_logger
from .container import GalleryContainer, append_random

logger = get_logger(__name__)


class GalleryAssembler:
    """Build the combined gallery from all source sites.

    Sources run sequentially: GitHub, then BoardGameGeek, then Cults3D.
    A TransportError from any fetch propagates and stops the remaining
    sources; cards already inserted stay in the container.

    Components can be injected for testing.
    """

    def __init__(
        self,
        fetcher: DocumentFetcher,
        renderer: ProjectRenderer,
        config: Settings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize assembler.

        Args:
            fetcher: Open document fetcher
            renderer: Card renderer
            config: Source locations (defaults to global settings)
            rng: Random source for card positions
        """
        self.fetcher = fetcher
        self.renderer = renderer
        self.config = config or settings
        self.rng = rng or random.Random()
        self.results: dict[Host, list[Project]] = {}

    async def assemble(self, container: GalleryContainer) -> dict[Host, list[Project]]:
        """Add every source to the container in the fixed order.

        Returns:
            Projects added, keyed by source host

        Raises:
            TransportError: If a source or detail document cannot be fetched
        """
        await self.add_github(container)
        await self.add_boardgamegeek(container)
        await self.add_cults3d(container)
        return self.results

    async def add_github(self, container: GalleryContainer) -> list[Project]:
        doc = await self.fetcher.fetch(self.config.github_source)
        projects = GitHubExtractor().extract(doc)
        return self._insert(container, Host.GITHUB, projects)

    async def add_boardgamegeek(self, container: GalleryContainer) -> list[Project]:
        """Add the game collection, upgrading each game's image first.

        One detail request per game, issued sequentially.
        """
        doc = await self.fetcher.fetch(self.config.bgg_source)
        projects = BoardGameGeekExtractor().extract(doc)
        await upgrade_images(self.fetcher, projects, self.config.bgg_detail_source)
        return self._insert(container, Host.BOARDGAMEGEEK, projects)

    async def add_cults3d(self, container: GalleryContainer) -> list[Project]:
        doc = await self.fetcher.fetch(self.config.cults3d_source)
        projects = Cults3DExtractor().extract(doc)
        return self._insert(container, Host.CULTS3D, projects)

    def _insert(
        self, container: GalleryContainer, host: Host, projects: list[Project]
    ) -> list[Project]:
        fragments = [self.renderer.render(project) for project in projects]
        append_random(container, fragments, self.rng)
        self.results[host] = projects
        source_logger(logger, host.value).info("Added %d projects", len(projects))
        return projects
