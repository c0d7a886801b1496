"""Web page metadata extraction over HTTP.

Reads Open Graph, Twitter card and standard HTML meta tags. Fields are
taken from the first source that has them, in that order.
"""

from typing import Optional
from urllib.parse import urljoin, urlparse

import httpx
import logfire
from bs4 import BeautifulSoup

from brainshelf.config import MetadataSettings
from brainshelf.domain.service import ExtractedMetadata, MetadataExtractor

# <link rel=...> values that point at a page icon, best first
ICON_RELS = ("icon", "shortcut icon", "apple-touch-icon")


def _meta(soup: BeautifulSoup, *keys: str) -> Optional[str]:
    """First non-blank content of <meta property|name=key> among keys."""
    for key in keys:
        tag = soup.find("meta", attrs={"property": key}) or soup.find(
            "meta", attrs={"name": key}
        )
        if tag is not None:
            content = (tag.get("content") or "").strip()
            if content:
                return content
    return None


def _favicon(soup: BeautifulSoup, page_url: str) -> str:
    for rel in ICON_RELS:
        for link in soup.find_all("link", href=True):
            rels = link.get("rel") or []
            if " ".join(rels).lower() == rel:
                return urljoin(page_url, link["href"])
    return urljoin(page_url, "/favicon.ico")


def parse_metadata(html: str, page_url: str) -> ExtractedMetadata:
    """Read metadata from an HTML document.

    Args:
        html: Page markup
        page_url: URL the page was served from, used to resolve relative links

    Returns:
        Extracted metadata; the title falls back to the host name
    """
    soup = BeautifulSoup(html, "html.parser")

    title = _meta(soup, "og:title", "twitter:title")
    if not title and soup.title and soup.title.string:
        title = soup.title.string.strip() or None
    if not title:
        title = urlparse(page_url).hostname

    image = _meta(soup, "og:image", "twitter:image")

    return ExtractedMetadata(
        title=title,
        description=_meta(soup, "og:description", "twitter:description", "description"),
        keywords=_meta(soup, "keywords"),
        image_url=urljoin(page_url, image) if image else None,
        favicon_url=_favicon(soup, page_url),
        author=_meta(soup, "author", "article:author", "twitter:creator"),
        site_name=_meta(soup, "og:site_name"),
    )


class HttpMetadataExtractor(MetadataExtractor):
    """Fetches pages with httpx and parses them with BeautifulSoup."""

    def __init__(
        self,
        settings: MetadataSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize extractor.

        Args:
            settings: Timeout and user agent configuration
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.settings = settings
        self.transport = transport

    async def extract(self, url: str) -> Optional[ExtractedMetadata]:
        """Fetch a page and read its metadata.

        Non-http(s) URLs, failed requests, error statuses and non-HTML
        responses yield None.
        """
        with logfire.span("metadata_extractor.extract", url=url):
            if urlparse(url).scheme not in ("http", "https"):
                logfire.warn("Refusing to fetch non-http URL", url=url)
                return None

            try:
                async with httpx.AsyncClient(
                    timeout=self.settings.timeout_seconds,
                    headers={"User-Agent": self.settings.user_agent},
                    follow_redirects=True,
                    transport=self.transport,
                ) as client:
                    response = await client.get(url)
                    response.raise_for_status()
            except httpx.HTTPError as e:
                logfire.warn("Metadata fetch failed", url=url, error=str(e))
                return None

            content_type = response.headers.get("content-type", "")
            if "html" not in content_type.lower():
                logfire.warn(
                    "Metadata fetch returned non-HTML content",
                    url=url,
                    content_type=content_type,
                )
                return None

            metadata = parse_metadata(response.text, str(response.url))
            logfire.info("Metadata extracted", url=url, title=metadata.title)
            return metadata
