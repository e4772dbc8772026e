"""wikinet — turn Wikipedia into a lazily explored semantic network.

Usage::

    from wikinet import Page, WikipediaUrl

    url = WikipediaUrl.from_path("/wiki/Waffle")
    page = Page.new(url)
    page.get_title()            # "Waffle" (fetches the body)
    links = page.get_connections()
    page.unload_body()          # free the HTML, keep the title

    for link in links:
        print(link.get_title(), link.get_url())
"""

from wikinet.config import settings
from wikinet.errors import (
    FetchError,
    InvalidHostError,
    InvalidPathError,
    NetworkError,
    ParseError,
    UrlError,
    WikinetError,
)
from wikinet.graph import WikipediaGraph, crawl
from wikinet.page import Page
from wikinet.scraper import RawPage, extract_links, extract_title, fetch_html
from wikinet.url import WikipediaUrl

__all__ = [
    "settings",
    "WikipediaUrl",
    "Page",
    "WikipediaGraph",
    "crawl",
    "RawPage",
    "extract_links",
    "extract_title",
    "fetch_html",
    "WikinetError",
    "UrlError",
    "InvalidPathError",
    "InvalidHostError",
    "FetchError",
    "NetworkError",
    "ParseError",
]
