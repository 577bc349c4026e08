"""Unified project record shared by every source site."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class Host(Enum):
    """Source site a project was extracted from."""

    GITHUB = "github"  # code host
    CULTS3D = "cults3d"  # 3D-model marketplace
    BOARDGAMEGEEK = "boardgamegeek"  # board-game collection


@dataclass
class Image:
    """Progressive-loading image reference.

    When both sources are present, ``high_res_src`` is the better asset.
    """

    high_res_src: str | None = None
    low_res_src: str | None = None
    alt: str | None = None


@dataclass
class Language:
    """Programming language with its raw, untrusted colour style."""

    name: str
    style: str


@dataclass
class Project:
    """A single gallery item. Every field besides ``host`` may be absent."""

    host: Host
    title: str | None = None
    description: str | None = None
    url: str | None = None  # always absolute
    image: Image | None = None
    programming_language: Language | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        data = asdict(self)
        data["host"] = self.host.value
        return data
