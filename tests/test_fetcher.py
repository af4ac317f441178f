"""HTTP fetching and HTML rendering."""

import httpx
import pytest
from bs4 import BeautifulSoup

from engine.errors import FetchError
from scraping.converter import extract_metadata, html_to_markdown
from scraping.fetcher import HttpContentFetcher

SAMPLE_HTML = """<html>
<head>
<title>Acme Widgets</title>
<meta name="description" content="Handmade widgets">
<meta property="og:title" content="Acme">
<script>var tracking = 1;</script>
</head>
<body>
<h1>Welcome to Acme</h1>
<p>We build <a href="/about">things</a> by hand.</p>
<a href="/"><img src="/logo.png" alt="Acme logo"></a>
<ul><li>One</li><li>Two</li></ul>
<h3></h3>
<script>document.write("hidden")</script>
</body>
</html>"""


def fetcher_for(handler):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpContentFetcher(client=client)


def soup(html):
    return BeautifulSoup(html, "lxml")


class TestConverter:
    def test_renders_markdown_blocks(self):
        content = html_to_markdown(soup(SAMPLE_HTML))

        assert content == (
            "# Welcome to Acme\n\n"
            "We build [things](/about) by hand.\n\n"
            "[![Acme logo](/logo.png)](/)\n\n"
            "- One\n\n"
            "- Two"
        )

    def test_extracts_metadata(self):
        assert extract_metadata(soup(SAMPLE_HTML)) == {
            "title": "Acme Widgets",
            "description": "Handmade widgets",
            "ogTitle": "Acme",
        }

    def test_link_with_text_and_image(self):
        html = '<body><p><a href="/shop"><img src="/cart.png" alt="">Shop now</a></p></body>'

        assert html_to_markdown(soup(html)) == "![](/cart.png) [Shop now](/shop)"

    def test_brackets_and_spaces_are_escaped(self):
        html = '<body><p><a href="/a b(1)">[Sale] items</a></p></body>'

        assert html_to_markdown(soup(html)) == "[Sale items](/a%20b%281%29)"


class TestHttpContentFetcher:
    @pytest.mark.asyncio
    async def test_fetch_success(self):
        fetcher = fetcher_for(lambda request: httpx.Response(200, text=SAMPLE_HTML))

        page = await fetcher.fetch("https://example.com/home")

        assert page.url == "https://example.com/home"
        assert page.metadata["title"] == "Acme Widgets"
        assert page.content.startswith("# Welcome to Acme")

    @pytest.mark.asyncio
    async def test_http_error_status(self):
        fetcher = fetcher_for(lambda request: httpx.Response(404, text="missing"))

        with pytest.raises(FetchError) as exc_info:
            await fetcher.fetch("https://example.com/gone")

        assert exc_info.value.reason == "HTTP 404"
        assert exc_info.value.url == "https://example.com/gone"

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def refuse(request):
            raise httpx.ConnectError("Connection refused", request=request)

        with pytest.raises(FetchError) as exc_info:
            await fetcher_for(refuse).fetch("https://unreachable.test")

        assert exc_info.value.reason == "Connection refused"

    @pytest.mark.asyncio
    async def test_timeout(self):
        def slow(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(FetchError) as exc_info:
            await fetcher_for(slow).fetch("https://slow.test")

        assert exc_info.value.reason == "Timeout fetching page"

    @pytest.mark.asyncio
    async def test_empty_body(self):
        fetcher = fetcher_for(lambda request: httpx.Response(200, text="   "))

        with pytest.raises(FetchError, match="Empty response body"):
            await fetcher.fetch("https://example.com")

    def test_page_without_content_or_metadata(self):
        with pytest.raises(FetchError, match="No usable content"):
            HttpContentFetcher().parse(
                "https://example.com",
                "<html><body><script>x()</script></body></html>",
            )
