"""Unit tests for web page metadata extraction."""

import httpx
import pytest

from brainshelf.adapter.web.metadata import HttpMetadataExtractor, parse_metadata
from brainshelf.config import MetadataSettings

ARTICLE_HTML = """
<html>
  <head>
    <title>Fallback title</title>
    <meta property="og:title" content="Vector clocks explained">
    <meta name="description" content="How distributed systems order events">
    <meta name="keywords" content="distributed, clocks">
    <meta name="author" content="Ada">
    <meta property="og:site_name" content="Example Blog">
    <meta property="og:image" content="/img/cover.png">
    <link rel="shortcut icon" href="/static/favicon.png">
  </head>
  <body></body>
</html>
"""


def html_transport(html: str, status_code: int = 200, content_type="text/html"):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            status_code, headers={"content-type": content_type}, text=html
        )

    return httpx.MockTransport(handler)


class TestParseMetadata:
    """Tests for parse_metadata."""

    def test_reads_open_graph_and_meta_tags(self):
        """Open Graph wins over <title>; relative links are resolved."""
        # Act
        metadata = parse_metadata(ARTICLE_HTML, "https://blog.example.com/posts/1")

        # Assert
        assert metadata.title == "Vector clocks explained"
        assert metadata.description == "How distributed systems order events"
        assert metadata.keywords == "distributed, clocks"
        assert metadata.author == "Ada"
        assert metadata.site_name == "Example Blog"
        assert metadata.image_url == "https://blog.example.com/img/cover.png"
        assert metadata.favicon_url == "https://blog.example.com/static/favicon.png"

    def test_title_falls_back_to_title_tag_then_host(self):
        """Without Open Graph the <title> is used, then the host name."""
        # Act
        titled = parse_metadata(
            "<html><head><title> Plain </title></head></html>", "https://a.io/x"
        )
        untitled = parse_metadata("<html><body>hi</body></html>", "https://a.io/x")

        # Assert
        assert titled.title == "Plain"
        assert untitled.title == "a.io"
        assert untitled.favicon_url == "https://a.io/favicon.ico"
        assert untitled.description is None


class TestHttpMetadataExtractor:
    """Tests for HttpMetadataExtractor."""

    @pytest.mark.asyncio
    async def test_extracts_from_html_response(self):
        """An HTML page yields its metadata."""
        # Arrange
        extractor = HttpMetadataExtractor(
            MetadataSettings(), transport=html_transport(ARTICLE_HTML)
        )

        # Act
        metadata = await extractor.extract("https://blog.example.com/posts/1")

        # Assert
        assert metadata is not None
        assert metadata.title == "Vector clocks explained"

    @pytest.mark.asyncio
    async def test_error_status_yields_none(self):
        """4xx/5xx responses are not parsed."""
        # Arrange
        extractor = HttpMetadataExtractor(
            MetadataSettings(), transport=html_transport("gone", status_code=404)
        )

        # Act & Assert
        assert await extractor.extract("https://a.io/missing") is None

    @pytest.mark.asyncio
    async def test_non_html_response_yields_none(self):
        """Binary or JSON responses are skipped."""
        # Arrange
        extractor = HttpMetadataExtractor(
            MetadataSettings(),
            transport=html_transport("{}", content_type="application/json"),
        )

        # Act & Assert
        assert await extractor.extract("https://a.io/api") is None

    @pytest.mark.asyncio
    async def test_connection_error_yields_none(self):
        """Network failures are reported as no metadata."""

        # Arrange
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        extractor = HttpMetadataExtractor(
            MetadataSettings(), transport=httpx.MockTransport(refuse)
        )

        # Act & Assert
        assert await extractor.extract("https://a.io") is None

    @pytest.mark.asyncio
    async def test_non_http_url_is_never_fetched(self):
        """Only http(s) URLs are requested."""
        # Arrange
        requested = []

        def record(request: httpx.Request) -> httpx.Response:
            requested.append(request.url)
            return httpx.Response(200, text="")

        extractor = HttpMetadataExtractor(
            MetadataSettings(), transport=httpx.MockTransport(record)
        )

        # Act
        result = await extractor.extract("file:///etc/passwd")

        # Assert
        assert result is None
        assert requested == []
