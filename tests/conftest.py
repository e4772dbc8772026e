"""Shared fixtures: canned article HTML and a counting fetcher."""

from __future__ import annotations

from typing import Dict, List

import pytest

from wikinet.errors import NetworkError
from wikinet.scraper.models import RawPage

WAFFLE_HTML = """\
<!DOCTYPE html>
<html>
<head><title>Waffle - Wikipedia</title></head>
<body>
  <div class="mw-parser-output">
    <p>A waffle is a dish made from leavened
    <a href="/wiki/Batter_(cooking)#Types" title="Batter (cooking)">batter</a> or
    <a href="/wiki/Dough" title="Dough">dough</a>.</p>
    <a href="/wiki/Flour">Flour</a>
    <a href="/wiki/Flour">Flour again</a>
    <a href="/wiki/Category:Breads">Breads</a>
    <a href="/wiki/File:Waffle.jpg">image</a>
    <a href="https://example.com/external">External</a>
    <a href="#cite_note-1">[1]</a>
    <a href="/w/index.php?title=Waffle&amp;action=edit">edit</a>
    <a href="/wiki/Baking">Baking</a>
  </div>
</body>
</html>
"""


class CountingFetcher:
    """Test double for :func:`wikinet.scraper.fetcher.fetch_html`.

    Serves canned HTML keyed by absolute url and records every call. Unknown
    urls behave like an HTTP 404.
    """

    def __init__(self, pages: Dict[str, str]):
        self.pages = pages
        self.calls: List[str] = []

    def __call__(self, url: str) -> RawPage:
        self.calls.append(url)
        if url not in self.pages:
            raise NetworkError(url, "HTTP 404", status_code=404)
        return RawPage(url=url, html=self.pages[url], status_code=200)

    @property
    def count(self) -> int:
        return len(self.calls)

@pytest.fixture
def fetcher() -> CountingFetcher:
    return CountingFetcher({"https://en.wikipedia.org/wiki/Waffle": WAFFLE_HTML})

@pytest.fixture(autouse=True)
def default_host(monkeypatch):
    """Pin the wiki host regardless of the caller's environment."""
    monkeypatch.setattr("wikinet.config.settings.wikipedia_host", "en.wikipedia.org")

@pytest.fixture
def waffle_html() -> str:
    return WAFFLE_HTML

@pytest.fixture
def make_fetcher():
    """Build a :class:`CountingFetcher` over an arbitrary url → html mapping."""
    return CountingFetcher
