"""
BeautifulSoup sanitizing utilities for the docformat service.

Every piece of document markup is passed through sanitize_html() before it is
wrapped into the output document or returned as a preview.

Usage:
    from docformat.utils.beautifulsoup_utils import sanitize_html

    safe_markup = sanitize_html(body_markup)
"""

import re
from typing import Optional, Mapping, AbstractSet

from bs4 import BeautifulSoup, Comment

from ..config import (
    ALLOWED_ATTRS,
    ALLOWED_TAGS,
    BLOCKED_URL_SCHEMES,
    STRIPPED_TAGS,
    URL_ATTRS,
)
from .logging_config import get_logger

logger = get_logger()

# Characters browsers ignore while reading a URL scheme
_SCHEME_NOISE = re.compile(r'[\x00-\x20\x7f]+')
_SCHEME = re.compile(r'^([a-z][a-z0-9+.\-]*):', re.IGNORECASE)


class BeautifulSoupProcessor:
    """
    Allow-list HTML cleaner built on BeautifulSoup.

    Disallowed tags are unwrapped (their content survives), tags that can
    execute or load code are removed with their content, and attributes are
    reduced to a per-tag allow-list.
    """

    def __init__(self, parser: str = "html.parser"):
        """
        Initialize the BeautifulSoup processor.

        Args:
            parser: HTML parser to use ('html.parser', 'lxml', 'html5lib')
        """
        self.parser = parser
        self.soup = None

    def load_html(self, html_content: str) -> bool:
        """Load HTML content into the processor. Returns False for empty input."""
        if not html_content:
            return False

        self.soup = BeautifulSoup(html_content, self.parser)
        return True

    def clean_html(
        self,
        html_content: str,
        stripped_tags: Optional[AbstractSet[str]] = None,
        remove_comments: bool = True,
        allowed_tags: Optional[AbstractSet[str]] = None,
        allowed_attrs: Optional[Mapping[str, AbstractSet[str]]] = None,
        prettify: bool = False
    ) -> str:
        """
        Clean HTML content.

        Args:
            html_content: The HTML content to clean
            stripped_tags: Tags removed together with everything inside them
            remove_comments: Remove HTML comments
            allowed_tags: Set of allowed tag names (others are unwrapped)
            allowed_attrs: Dict mapping tag names to allowed attributes;
                tags missing from it keep no attributes
            prettify: Format the output HTML nicely

        Returns:
            Cleaned HTML content
        """
        if not self.load_html(html_content):
            return ""

        if stripped_tags:
            for tag in self.soup.find_all(list(stripped_tags)):
                if not tag.decomposed:
                    tag.decompose()

        if remove_comments:
            for comment in self.soup.find_all(string=lambda text: isinstance(text, Comment)):
                comment.extract()

        if allowed_tags is not None:
            for tag in self.soup.find_all():
                if tag.name not in allowed_tags:
                    tag.unwrap()

        if allowed_attrs is not None:
            for tag in self.soup.find_all():
                allowed = allowed_attrs.get(tag.name, frozenset())
                for attr in [attr for attr in tag.attrs if attr not in allowed]:
                    del tag[attr]

        self._remove_unsafe_urls()

        if prettify:
            return self.soup.prettify()
        return str(self.soup)

    def _remove_unsafe_urls(self) -> None:
        """Drop href/src values whose scheme could run script."""
        for tag in self.soup.find_all():
            for attr in URL_ATTRS:
                value = tag.get(attr)
                if value is None:
                    continue
                if not is_safe_url(value, allow_data_image=(tag.name == "img" and attr == "src")):
                    logger.warning(f"Removed unsafe {attr} on <{tag.name}>")
                    del tag[attr]


def is_safe_url(value: str, allow_data_image: bool = False) -> bool:
    """
    Check a URL attribute value against the blocked schemes.

    Args:
        value: Raw attribute value
        allow_data_image: Accept data:image/* URLs (embedded pictures)

    Returns:
        True if the URL may be kept
    """
    compact = _SCHEME_NOISE.sub('', value)
    match = _SCHEME.match(compact)
    if not match:
        return True

    scheme = match.group(1).lower()
    if scheme not in BLOCKED_URL_SCHEMES:
        return True

    return allow_data_image and scheme == "data" and compact.lower().startswith("data:image/")


def sanitize_html(html_content: str) -> str:
    """
    Sanitize document markup by removing dangerous elements and attributes.

    Args:
        html_content: The HTML fragment to sanitize

    Returns:
        Sanitized HTML fragment
    """
    processor = BeautifulSoupProcessor()
    return processor.clean_html(
        html_content,
        stripped_tags=STRIPPED_TAGS,
        remove_comments=True,
        allowed_tags=ALLOWED_TAGS,
        allowed_attrs=ALLOWED_ATTRS,
        prettify=False
    )
