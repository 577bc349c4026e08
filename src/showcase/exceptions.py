"""Exception hierarchy for Showcase.

Extraction gaps and enrichment misses are not errors; only the
conditions below ever raise.
"""


class ShowcaseError(Exception):
    """Base exception for Showcase errors."""

    pass


class TransportError(ShowcaseError):
    """Raised when a source document cannot be fetched."""

    def __init__(self, location: str, message: str) -> None:
        self.location = location
        super().__init__(f"{message} ({location})")


class TemplateError(ShowcaseError):
    """Raised when a visual template cannot be loaded."""

    pass
