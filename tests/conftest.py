"""Shared test fixtures for Showcase."""

from collections.abc import Callable

import httpx
import pytest

from showcase.render import ProjectRenderer, ProjectTemplate


@pytest.fixture
def github_html() -> str:
    """GitHub profile with two pinned repositories and one pinned fork."""
    return """
    <html><body>
    <ol class="js-pinned-items-reorder-list">
      <li>
        <div class="Box pinned-item-list-item d-flex p-3 width-full public source">
          <div class="pinned-item-list-item-content">
            <a href="/octocat/hello-world" class="Link mr-1 text-bold wb-break-word">
              <span class="repo" title="hello-world">  hello-world  </span>
            </a>
            <p class="pinned-item-desc color-fg-muted text-small mt-2 mb-0">
              My first repository
            </p>
            <p class="mb-0 f6 color-fg-muted">
              <span class="d-inline-block mr-3">
                <span class="repo-language-color" style="background-color: #3572A5"></span>
                <span itemprop="programmingLanguage">Python</span>
              </span>
            </p>
          </div>
        </div>
      </li>
      <li>
        <div class="Box pinned-item-list-item d-flex p-3 width-full public fork">
          <div class="pinned-item-list-item-content">
            <a href="/octocat/forked-thing" class="Link mr-1 text-bold">
              <span class="repo">forked-thing</span>
            </a>
            <p class="pinned-item-desc">Somebody else's work</p>
          </div>
        </div>
      </li>
      <li>
        <div class="Box pinned-item-list-item d-flex p-3 width-full public source">
          <div class="pinned-item-list-item-content">
            <a href="/octocat/Spoon-Knife" class="Link mr-1 text-bold">
              <span class="repo">Spoon-Knife</span>
            </a>
            <p class="mb-0 f6 color-fg-muted">
              <span itemprop="programmingLanguage">HTML</span>
            </p>
          </div>
        </div>
      </li>
    </ol>
    </body></html>
    """


@pytest.fixture
def cults3d_html() -> str:
    """Cults3D profile with a CDN-wrapped image and a plain one."""
    return """
    <html><body>
    <div class="tbox-grid">
      <article class="crea">
        <div class="crea-header">
          <a class="drawer-contents" title="  Articulated Dragon  "
             href="/en/3d-model/various/articulated-dragon">Articulated Dragon <i>new</i></a>
          <img class="painting-image" alt="Articulated Dragon"
               data-src="https://images.cults3d.com/abc/fit-in/213x213/filters:no_upscale()/https://files.cults3d.com/uploaders/1/dragon.png">
        </div>
      </article>
      <article class="crea">
        <a class="drawer-contents" title="Cable Clip" href="/en/3d-model/home/cable-clip">Cable Clip</a>
        <img class="painting-image" alt="Cable Clip" data-src="https://images.cults3d.com/clip.webp">
      </article>
      <article class="crea">
        <a class="drawer-contents" title="No Picture" href="/en/3d-model/home/no-picture">No Picture</a>
      </article>
    </div>
    </body></html>
    """


@pytest.fixture
def bgg_html() -> str:
    """BoardGameGeek collection with two games, one without a thumbnail."""
    return """
    <html><body>
    <table class="collection_table">
      <tr id="row_101">
        <td class="collection_thumbnail">
          <a href="/boardgame/13/catan"><img src="https://cf.geekdo-images.com/catan_micro.png" alt="Board Game: Catan"></a>
        </td>
        <td class="collection_objectname" id="results_objectname1">
          <div style="z-index:1000;"><a href="/boardgame/13/catan" class="primary">Catan</a></div>
          <p class="smallerfont dull">Trade, build and settle the island.</p>
        </td>
      </tr>
      <tr id="row_102">
        <td class="collection_thumbnail"><a href="/boardgame/822/carcassonne"></a></td>
        <td class="collection_objectname">
          <div><a href="/boardgame/822/carcassonne" class="primary">Carcassonne</a></div>
        </td>
      </tr>
    </table>
    </body></html>
    """


@pytest.fixture
def bgg_detail_xml() -> Callable[[str], str]:
    """Build a BoardGameGeek XML API document naming a full-size image."""

    def build(image: str) -> str:
        return (
            '<?xml version="1.0" encoding="utf-8"?>'
            '<boardgames termsofuse="https://boardgamegeek.com/xmlapi/termsofuse">'
            '<boardgame objectid="13">'
            "<name primary=\"true\">Catan</name>"
            "<thumbnail>https://cf.geekdo-images.com/catan_t.png</thumbnail>"
            f"<image>{image}</image>"
            "</boardgame></boardgames>"
        )

    return build


@pytest.fixture
def template() -> ProjectTemplate:
    """The bundled card template."""
    return ProjectTemplate.load()


@pytest.fixture
def renderer(template: ProjectTemplate) -> ProjectRenderer:
    return ProjectRenderer(template)


class MockSite:
    """Serve canned responses through httpx.MockTransport and record requests."""

    def __init__(self, routes: dict[str, tuple[int, str]]) -> None:
        self.routes = routes
        self.requested: list[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)
        status, text = self.routes.get(url, (404, "not found"))
        return httpx.Response(status, text=text)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def mock_site() -> Callable[[dict[str, tuple[int, str]]], MockSite]:
    """Factory for MockSite instances."""
    return MockSite
