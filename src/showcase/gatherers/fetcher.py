"""HTTP fetching for source documents.

Single Responsibility: Retrieve raw text and hand it to the parser.
Locations that are not absolute http(s) URLs are treated as literal
document content, which keeps extraction testable without a network.
"""

from ipaddress import ip_address
from types import TracebackType
from urllib.parse import urlparse

import httpx

from ..exceptions import TransportError
from ..utils.logging import get_logger
from .document import DocumentKind, StructuredDocument, parse_document

logger = get_logger(__name__)

NETWORK_PREFIXES = ("http://", "https://")
BLOCKED_HOSTNAMES = frozenset({"localhost", "localhost.localdomain"})


def is_network_location(location: str) -> bool:
    """Check whether a location should be fetched over the network."""
    return location.startswith(NETWORK_PREFIXES)


class DocumentFetcher:
    """Fetches source documents with proper headers/timeouts.

    Implements an async context manager for proper resource cleanup.
    Requests are issued one at a time by callers; nothing here batches.
    """

    DEFAULT_TIMEOUT = 30.0
    USER_AGENT = "Showcase/0.1 (Project Gallery)"

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = USER_AGENT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize fetcher.

        Args:
            timeout: HTTP request timeout in seconds
            user_agent: User-Agent header sent with every request
            client: Pre-built client to use instead of creating one (tests)
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self._injected = client
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "DocumentFetcher":
        """Enter context manager, create HTTP client."""
        self._client = self._injected or httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            max_redirects=5,
            verify=True,
            headers={"User-Agent": self.user_agent},
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Exit context manager, close HTTP client."""
        if self._client and self._client is not self._injected:
            await self._client.aclose()
        self._client = None

    def _is_safe_url(self, url: str) -> bool:
        """Check if URL is safe to fetch (SSRF protection).

        Args:
            url: Absolute http(s) URL

        Returns:
            True if URL is safe, False otherwise
        """
        hostname = urlparse(url).hostname
        if not hostname:
            return False
        if hostname.lower() in BLOCKED_HOSTNAMES:
            logger.warning("Blocked local hostname: %s", hostname)
            return False

        try:
            ip = ip_address(hostname)
        except ValueError:
            return True

        if ip.is_private or ip.is_loopback or ip.is_link_local or ip.is_unspecified:
            logger.warning("Blocked private IP: %s", hostname)
            return False
        return True

    async def fetch_text(self, location: str) -> str:
        """Retrieve raw text for a location.

        Args:
            location: Absolute http(s) URL, or literal document content

        Returns:
            Response body, or ``location`` itself when it is not a URL

        Raises:
            RuntimeError: If fetcher not used as context manager
            TransportError: On blocked URLs, network errors or non-success status
        """
        if not is_network_location(location):
            return location

        if not self._client:
            raise RuntimeError("DocumentFetcher must be used as async context manager")

        if not self._is_safe_url(location):
            raise TransportError(location, "URL blocked by security policy")

        logger.debug("Fetching: %s", location)
        try:
            response = await self._client.get(location)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                location, f"Source returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(location, f"Request failed: {e}") from e

        logger.debug("Fetched %d bytes from %s", len(response.text), location)
        return response.text

    async def fetch(
        self, location: str, kind: DocumentKind = DocumentKind.MARKUP
    ) -> StructuredDocument:
        """Retrieve and parse a document.

        Args:
            location: Absolute http(s) URL, or literal document content
            kind: Markup (HTML) or data-interchange (XML)

        Returns:
            Parsed, queryable document

        Raises:
            TransportError: On network errors or non-success status
        """
        return parse_document(await self.fetch_text(location), kind)
