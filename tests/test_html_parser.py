# File: tests/test_html_parser.py
import pytest

from site_indexer.crawler.fetcher import PageParseError
from site_indexer.parser.html_parser import html_to_markdown, parse_html

PAGE = """
<html>
  <head><title> Getting started </title><style>body {}</style></head>
  <body>
    <header><a href="/from-header">Header</a></header>
    <nav><a href="/from-nav">Menu</a></nav>
    <h1>Install</h1>
    <p>Run <code>pip install</code> and read <a href="/docs/next">next</a>.</p>
    <script>var a = "<a href='/from-script'>";</script>
    <iframe src="/frame"></iframe>
    <a href="#top">Top</a>
    <a>no href</a>
    <footer><a href="/from-footer">Footer</a></footer>
  </body>
</html>
"""


def test_parse_html_removes_noise_before_collecting_links():
    parsed = parse_html(PAGE, "https://x.test/start")
    assert parsed.title == "Getting started"
    assert parsed.hrefs == ["/docs/next", "#top"]
    assert "Menu" not in parsed.body_html
    assert "Footer" not in parsed.body_html
    assert "iframe" not in parsed.body_html


def test_parse_html_title_falls_back_to_url():
    parsed = parse_html("<html><body><p>x</p></body></html>", "https://x.test/untitled")
    assert parsed.title == "https://x.test/untitled"


def test_parse_html_custom_noise_tags():
    html = "<body><aside>side</aside><nav>kept</nav></body>"
    parsed = parse_html(html, "https://x.test/", noise_tags=["aside"])
    assert "side" not in parsed.body_html
    assert "kept" in parsed.body_html


def test_html_to_markdown_uses_atx_headings():
    parsed = parse_html(PAGE, "https://x.test/start")
    markdown = html_to_markdown(parsed.body_html)
    assert "# Install" in markdown
    assert "[next](/docs/next)" in markdown
    assert "Menu" not in markdown


def test_html_to_markdown_empty():
    assert html_to_markdown("") == ""


def test_html_to_markdown_deep_nesting_is_a_parse_error():
    depth = 5000
    fragment = "<div>" * depth + "deep" + "</div>" * depth
    with pytest.raises(PageParseError) as excinfo:
        html_to_markdown(fragment)
    assert "Markdown" in excinfo.value.reason
