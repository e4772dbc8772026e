"""Lazily-materialised Wikipedia article pages."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from wikinet.errors import ParseError
from wikinet.scraper.extractor import extract_links, extract_title
from wikinet.scraper.fetcher import fetch_html
from wikinet.scraper.models import RawPage
from wikinet.url import WikipediaUrl

logger = logging.getLogger(__name__)

Fetcher = Callable[[str], RawPage]


@dataclass(eq=False)
class Page:
    """One article: a :class:`WikipediaUrl` plus an optional body and title.

    The body is fetched the first time something needs it and can be dropped
    again with :meth:`unload_body`. A title, once computed, stays cached even
    after the body is unloaded.

    ``fetcher`` replaces :func:`~wikinet.scraper.fetcher.fetch_html` for this
    page and for every connection discovered from it.

    A page is not safe to share between threads.
    """

    url: WikipediaUrl
    title: Optional[str] = None
    body: Optional[str] = field(default=None, repr=False)
    fetcher: Optional[Fetcher] = field(default=None, repr=False)

    @classmethod
    def new(cls, url: WikipediaUrl) -> Page:
        """Create an unloaded :class:`Page` with no cached title."""
        return cls(url=url)

    @classmethod
    def new_load_title(cls, url: WikipediaUrl) -> Page:
        """Create a :class:`Page` and immediately load its title."""
        page = cls(url=url)
        page.load_title()
        return page

    def get_url(self) -> str:
        """Return the absolute url of the page (no I/O)."""
        return self.url.get_url()

    @property
    def is_loaded(self) -> bool:
        return self.body is not None

    # ------------------------------------------------------------------
    # Body
    # ------------------------------------------------------------------
    def load_body(self) -> None:
        """Fetch the body if it is not already loaded.

        Raises:
            NetworkError: If the request fails. ``body`` stays ``None``.
        """
        if self.body is not None:
            return
        fetch = self.fetcher or fetch_html
        raw = fetch(self.get_url())
        self.body = raw.html
        logger.debug("Loaded %s (%d bytes)", self.url.path, len(self.body))

    def _get_body(self) -> str:
        self.load_body()
        assert self.body is not None
        return self.body

    def unload_body(self) -> None:
        """Drop the body to free memory. The next access refetches it."""
        if self.body is not None:
            logger.debug("Unloaded %s", self.url.path)
        self.body = None

    # ------------------------------------------------------------------
    # Title
    # ------------------------------------------------------------------
    def _title_from_body(self, body: str) -> str:
        title = extract_title(body)
        if title is None:
            raise ParseError(self.get_url(), "title")
        return title

    def load_title(self) -> None:
        """Cache the title, loading the body first if necessary."""
        if self.title is not None:
            return
        self.title = self._title_from_body(self._get_body())

    def get_title(self) -> str:
        """Return the title, fetching the body only if it is not cached.

        Raises:
            NetworkError: If the body had to be fetched and the request failed.
            ParseError: If the page has no ``<title>`` element.
        """
        self.load_title()
        assert self.title is not None
        return self.title

    def try_get_title(self) -> Optional[str]:
        """Return the title only if it can be had without a fetch.

        Parses and caches it when the body is already loaded; returns
        ``None`` when the page is unloaded and no title is cached.
        """
        if self.title is None and self.body is not None:
            self.title = self._title_from_body(self.body)
        return self.title

    # ------------------------------------------------------------------
    # Connections
    # ------------------------------------------------------------------
    def _connections_from_body(self, body: str) -> List[Page]:
        return [Page(url=url, fetcher=self.fetcher) for url in extract_links(body)]

    def get_connections(self) -> List[Page]:
        """Return a fresh, unloaded :class:`Page` for every article link.

        Links come back in document order with duplicates removed.

        Raises:
            NetworkError: If the body had to be fetched and the request failed.
        """
        return self._connections_from_body(self._get_body())

    def try_get_connections(self) -> Optional[List[Page]]:
        """Like :meth:`get_connections`, but ``None`` instead of fetching."""
        if self.body is None:
            return None
        return self._connections_from_body(self.body)
