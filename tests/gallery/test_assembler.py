"""Tests for end-to-end gallery assembly."""

import asyncio
import random

import pytest

from showcase.config import Settings
from showcase.exceptions import TemplateError, TransportError
from showcase.gallery import GalleryAssembler, GalleryPage
from showcase.gatherers import DocumentFetcher, Host, Project
from showcase.render import ProjectRenderer

GITHUB = "https://github.com/octocat"
BGG = "https://boardgamegeek.com/collection/user/octocat"
CULTS3D = "https://cults3d.com/en/users/octocat/3d-models"
CATAN_DETAIL = "https://boardgamegeek.com/xmlapi/boardgame/13"
CARCASSONNE_DETAIL = "https://boardgamegeek.com/xmlapi/boardgame/822"


@pytest.fixture
def config() -> Settings:
    return Settings(github_url=GITHUB, bgg_url=BGG, cults3d_url=CULTS3D)


@pytest.fixture
def routes(github_html, bgg_html, cults3d_html, bgg_detail_xml) -> dict[str, tuple[int, str]]:
    return {
        GITHUB: (200, github_html),
        BGG: (200, bgg_html),
        CATAN_DETAIL: (200, bgg_detail_xml("https://cf.geekdo-images.com/catan_full.png")),
        CARCASSONNE_DETAIL: (200, "<boardgames><boardgame></boardgame></boardgames>"),
        CULTS3D: (200, cults3d_html),
    }


def run_assembly(
    site, config: Settings, renderer: ProjectRenderer, page: GalleryPage
) -> GalleryAssembler:
    assemblers: list[GalleryAssembler] = []

    async def run() -> None:
        async with DocumentFetcher(client=site.client()) as fetcher:
            assembler = GalleryAssembler(fetcher, renderer, config, random.Random(0))
            assemblers.append(assembler)
            await assembler.assemble(page.container)

    asyncio.run(run())
    return assemblers[0]


class TestGalleryAssembler:
    """Test GalleryAssembler class."""

    def test_assembles_all_sources(self, mock_site, routes, config, renderer) -> None:
        site = mock_site(routes)
        page = GalleryPage()

        assembler = run_assembly(site, config, renderer, page)

        assert len(page.container) == 2 + 2 + 3
        assert {host: len(p) for host, p in assembler.results.items()} == {
            Host.GITHUB: 2,
            Host.BOARDGAMEGEEK: 2,
            Host.CULTS3D: 3,
        }

    def test_sources_and_details_fetched_sequentially_in_order(
        self, mock_site, routes, config, renderer
    ) -> None:
        site = mock_site(routes)
        run_assembly(site, config, renderer, GalleryPage())

        assert site.requested == [GITHUB, BGG, CATAN_DETAIL, CARCASSONNE_DETAIL, CULTS3D]

    def test_game_images_are_upgraded(self, mock_site, routes, config, renderer) -> None:
        site = mock_site(routes)
        page = GalleryPage()

        assembler = run_assembly(site, config, renderer, page)

        catan = assembler.results[Host.BOARDGAMEGEEK][0]
        assert catan.image.high_res_src == "https://cf.geekdo-images.com/catan_full.png"
        assert catan.image.low_res_src == "https://cf.geekdo-images.com/catan_micro.png"

        card = page.soup.select_one('img[alt="Board Game: Catan"]')
        assert card["src"] == "/images/default.png"
        assert card["data-low-res-src"] == "https://cf.geekdo-images.com/catan_micro.png"
        assert card["data-high-res-src"] == "https://cf.geekdo-images.com/catan_full.png"

    def test_game_without_id_is_not_enriched(self, mock_site, config, renderer) -> None:
        html = """
        <table><tr id="row_1">
          <td class="collection_thumbnail"><a href="/wiki/page"><img src="t.png"></a></td>
        </tr></table>
        """
        site = mock_site({BGG: (200, html)})

        async def run():
            async with DocumentFetcher(client=site.client()) as fetcher:
                assembler = GalleryAssembler(fetcher, renderer, config)
                return await assembler.add_boardgamegeek(GalleryPage().container)

        projects = asyncio.run(run())

        assert site.requested == [BGG]
        assert projects[0].image.high_res_src == "t.png"
        assert projects[0].image.low_res_src is None

    def test_transport_error_stops_remaining_sources(
        self, mock_site, routes, config, renderer
    ) -> None:
        """Test a failed source keeps earlier cards and never reaches later sources."""
        routes[BGG] = (503, "unavailable")
        site = mock_site(routes)
        page = GalleryPage()

        with pytest.raises(TransportError):
            run_assembly(site, config, renderer, page)

        assert len(page.container) == 2
        assert CULTS3D not in site.requested
        assert all(
            card.select_one(".card-logo")["data-host"] == "github"
            for card in page.container.children
        )

    def test_literal_sources_need_no_network(self, github_html, renderer) -> None:
        """Test a code-host document given inline yields two cards with the local logo."""
        config = Settings(github_url=github_html)
        page = GalleryPage()

        async def run():
            async with DocumentFetcher() as fetcher:
                return await GalleryAssembler(fetcher, renderer, config).add_github(
                    page.container
                )

        projects = asyncio.run(run())

        assert len(projects) == 2
        assert all(p.host is Host.GITHUB for p in projects)
        assert all(p.image.high_res_src == "/images/github.png" for p in projects)
        assert len(page.container) == 2


class TestGalleryPage:
    """Test GalleryPage output."""

    def test_write_creates_file(self, tmp_path, renderer) -> None:
        page = GalleryPage()
        page.container.insert(0, renderer.render(Project(host=Host.GITHUB, title="x")))
        path = page.write(tmp_path / "out" / "index.html")

        html = path.read_text()
        assert html.startswith("<!DOCTYPE html>")
        assert 'id="project-gallery"' in html
        assert "card-heading" in html

    def test_page_without_container_raises(self) -> None:
        with pytest.raises(TemplateError):
            GalleryPage("<html><body></body></html>")
