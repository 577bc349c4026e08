"""Security utilities for neutralizing third-party content.

Everything scraped from a source site is treated as hostile. This module provides:
- Text sanitization (markup and executable content removed)
- URL sanitization (only http(s) and site-relative locations survive)
- Inline style sanitization (script-capable declarations dropped)
"""

import re
import warnings
from typing import Final
from urllib.parse import urlparse

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning

# Elements removed together with everything inside them
DANGEROUS_TAGS: Final[list[str]] = [
    "script",
    "style",
    "iframe",
    "object",
    "embed",
    "noscript",
    "template",
    "svg",
    "math",
    "link",
    "meta",
    "base",
    "form",
]

SAFE_URL_SCHEMES: Final[tuple[str, ...]] = ("http", "https")

# Style declarations that can load resources or run script
UNSAFE_STYLE_PATTERNS: Final[list[str]] = [
    r"expression\s*\(",
    r"url\s*\(",
    r"javascript\s*:",
    r"vbscript\s*:",
    r"behavior\s*:",
    r"-moz-binding",
    r"@import",
    r"[<>]",
]

_COMPILED_STYLE_PATTERNS: list[re.Pattern[str]] = [
    re.compile(pattern, re.IGNORECASE) for pattern in UNSAFE_STYLE_PATTERNS
]

# Control characters and whitespace browsers ignore inside a URL scheme
_URL_NOISE = re.compile(r"[\x00-\x20\x7f]+")

# Legitimate URLs percent-encode these; a raw one means markup was injected
_MARKUP_CHARS = re.compile(r"[<>]")

# Entity-encoded payloads decode into markup, so cleaning repeats until stable
MAX_SANITIZE_PASSES = 5


def _strip_markup(text: str) -> str:
    """Remove dangerous elements and return the remaining text content."""
    with warnings.catch_warnings():
        # Scraped titles can look like filenames or URLs
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        soup = BeautifulSoup(text, "html.parser")
    for element in soup(DANGEROUS_TAGS):
        element.decompose()
    return soup.get_text()


def sanitize(text: str | None) -> str:
    """Neutralize markup and executable content in untrusted text.

    Executable or embedding elements are dropped along with their content,
    any other markup is reduced to its text. Never raises.

    Args:
        text: Untrusted text, possibly containing markup

    Returns:
        Plain text safe to assign as element content or attribute value
    """
    if not text:
        return ""

    cleaned = text
    for _ in range(MAX_SANITIZE_PASSES):
        stripped = _strip_markup(cleaned)
        if stripped == cleaned:
            break
        cleaned = stripped
    else:
        # Still changing after the last pass: drop anything tag-like
        cleaned = cleaned.replace("<", "").replace(">", "")

    return cleaned


def sanitize_url(value: str | None) -> str:
    """Sanitize an untrusted URL for use in href/src attributes.

    Args:
        value: Untrusted URL

    Returns:
        The URL unchanged, or an empty string when it carries markup or its
        scheme is not allowed
    """
    url = (value or "").strip()
    # Kept verbatim, never parsed as HTML, so query strings like &lang= survive
    if not url or _MARKUP_CHARS.search(url):
        return ""

    scheme = urlparse(_URL_NOISE.sub("", url)).scheme.lower()
    if scheme in SAFE_URL_SCHEMES:
        return url
    if not scheme and url.startswith("/"):
        return url
    return ""


def sanitize_style(value: str | None) -> str:
    """Sanitize an untrusted inline style attribute value.

    Args:
        value: Untrusted style, e.g. ``background-color: #3572A5``

    Returns:
        The declarations that passed, joined with ``;``
    """
    style = sanitize(value)
    declarations = []
    for declaration in style.split(";"):
        declaration = declaration.strip()
        if not declaration or ":" not in declaration:
            continue
        if any(pattern.search(declaration) for pattern in _COMPILED_STYLE_PATTERNS):
            continue
        declarations.append(declaration)
    return "; ".join(declarations)
