"""Content extraction: article title and in-wiki article links from page HTML."""

from __future__ import annotations

from typing import Iterator, List, Optional
from urllib.parse import unquote, urlsplit

from bs4 import BeautifulSoup

from wikinet.config import settings
from wikinet.errors import UrlError
from wikinet.url import ARTICLE_PREFIX, WikipediaUrl, canonical_path

# Namespaces that hold non-article content. Compared case-insensitively with
# underscores folded to spaces.
RESERVED_NAMESPACES = frozenset(
    {
        "special",
        "talk",
        "user",
        "user talk",
        "wikipedia",
        "wikipedia talk",
        "file",
        "file talk",
        "image",
        "mediawiki",
        "mediawiki talk",
        "template",
        "template talk",
        "help",
        "help talk",
        "category",
        "category talk",
        "portal",
        "portal talk",
        "draft",
        "draft talk",
        "module",
        "module talk",
        "timedtext",
        "timedtext talk",
    }
)

_TITLE_SUFFIX = " - Wikipedia"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _is_reserved(slug: str) -> bool:
    """Return ``True`` if *slug* lives in a non-article namespace."""
    name = unquote(slug)
    if ":" not in name:
        return False
    namespace = name.split(":", 1)[0].replace("_", " ").strip().casefold()
    return namespace in RESERVED_NAMESPACES


def _article_path(href: str) -> Optional[str]:
    """Reduce *href* to an article path, or ``None`` if it is not one.

    Relative ``/wiki/...`` hrefs and absolute or protocol-relative hrefs on
    the configured host qualify. The fragment is dropped.
    """
    href = href.strip()
    if not href or href.startswith("#"):
        return None

    parts = urlsplit(href)
    if parts.netloc:
        if parts.scheme not in ("", "http", "https"):
            return None
        if (parts.hostname or "").lower() != settings.wikipedia_host.lower():
            return None
    elif parts.scheme:
        # mailto:, javascript: and friends
        return None

    path = parts.path
    if parts.query or not path.startswith(ARTICLE_PREFIX):
        return None

    slug = path[len(ARTICLE_PREFIX):]
    if not slug or _is_reserved(slug):
        return None
    return path


def _iter_hrefs(html: str) -> Iterator[str]:
    soup = BeautifulSoup(html, "html.parser")
    for anchor in soup.find_all("a", href=True):
        href = anchor.get("href")
        if isinstance(href, str):
            yield href


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_links(html: str) -> List[WikipediaUrl]:
    """Return the article links in *html*, deduplicated, in document order.

    Paths that differ only in percent-encoding count as one link; the first
    spelling seen is kept.

    External links, same-page anchors and reserved namespaces
    (``Category:``, ``File:``, ``Talk:`` …) are skipped. A path that passes
    the filters but still fails :meth:`WikipediaUrl.from_path` is dropped so
    one malformed link cannot fail the whole page.
    """
    seen: set[str] = set()
    links: List[WikipediaUrl] = []
    for href in _iter_hrefs(html):
        path = _article_path(href)
        if path is None:
            continue
        key = canonical_path(path)
        if key in seen:
            continue
        seen.add(key)
        try:
            links.append(WikipediaUrl.from_path(path))
        except UrlError:
            continue
    return links


def extract_title(html: str) -> Optional[str]:
    """Return the article title from the ``<title>`` element.

    The `` - Wikipedia`` site suffix is removed. Returns ``None`` if there is
    no title element or it is blank.
    """
    soup = BeautifulSoup(html, "html.parser")
    if soup.title is None:
        return None
    title = soup.title.get_text(strip=True)
    if title.endswith(_TITLE_SUFFIX):
        title = title[: -len(_TITLE_SUFFIX)].strip()
    return title or None
