"""Cloneable visual templates.

A template is kept as markup text; every clone is a freshly parsed,
detached tree so concurrent renders never share mutable state.
"""

from functools import lru_cache
from pathlib import Path

from bs4 import BeautifulSoup

from ..exceptions import TemplateError
from ..utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_TEMPLATE = "project.html"

_TEMPLATE_DIR = Path(__file__).parent / "templates"


@lru_cache(maxsize=8)
def load_bundled(name: str) -> str:
    """Load a template file from the templates/ directory.

    Raises:
        ValueError: If name contains path traversal.
        FileNotFoundError: If template file does not exist.
    """
    path = (_TEMPLATE_DIR / name).resolve()
    if not path.is_relative_to(_TEMPLATE_DIR.resolve()):
        raise ValueError(f"Invalid template name: {name}")
    return path.read_text(encoding="utf-8")


class ProjectTemplate:
    """Named, cloneable card template with slots addressed by selector."""

    def __init__(self, markup: str, name: str = DEFAULT_TEMPLATE) -> None:
        """Initialize template.

        Args:
            markup: Template markup
            name: Name used in log and error messages

        Raises:
            TemplateError: If the markup has no root element
        """
        if BeautifulSoup(markup, "html.parser").find() is None:
            raise TemplateError(f"Template {name!r} has no root element")
        self.markup = markup
        self.name = name

    @classmethod
    def load(cls, path: Path | None = None) -> "ProjectTemplate":
        """Load a template from a file, or the bundled card template.

        Raises:
            TemplateError: If the file cannot be read
        """
        if path is None:
            return cls(load_bundled(DEFAULT_TEMPLATE))

        try:
            markup = path.read_text(encoding="utf-8")
        except OSError as e:
            raise TemplateError(f"Cannot read template {path}: {e}") from e

        logger.debug("Loaded template from %s", path)
        return cls(markup, name=path.name)

    def clone(self) -> BeautifulSoup:
        """Create an independent, detached instance of the template."""
        return BeautifulSoup(self.markup, "html.parser")
