"""Exceptions raised by wikinet.

Two families: :class:`UrlError` for malformed article references (raised at
construction time, never retried) and :class:`FetchError` for failures while
materialising a page (network or missing markup).
"""

from __future__ import annotations


class WikinetError(Exception):
    """Base class for every error raised by this package."""


# ---------------------------------------------------------------------------
# URL errors
# ---------------------------------------------------------------------------

class UrlError(WikinetError, ValueError):
    """A string could not be turned into a :class:`~wikinet.url.WikipediaUrl`."""


class InvalidPathError(UrlError):
    """Raised when a path does not have the ``/wiki/<Slug>`` shape.

    Covers a missing prefix, an empty slug, and characters that are not
    allowed in a URL path component.
    """

    def __init__(self, path: str, reason: str = "not a Wikipedia article path"):
        self.path = path
        self.reason = reason
        super().__init__(f"'{path}' is not a valid article path: {reason}")


class InvalidHostError(UrlError):
    """Raised when an absolute URL points somewhere other than the wiki host."""

    def __init__(self, url: str, host: str):
        self.url = url
        self.host = host
        super().__init__(f"'{url}' is not a {host} url")


# ---------------------------------------------------------------------------
# Fetch errors
# ---------------------------------------------------------------------------

class FetchError(WikinetError):
    """A page could not be materialised."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(message)


class NetworkError(FetchError):
    """The HTTP request failed: transport error, timeout or non-2xx status.

    ``status_code`` is set only when the server actually answered.
    """

    def __init__(self, url: str, detail: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(url, f"Failed to fetch '{url}': {detail}")


class ParseError(FetchError):
    """The fetched HTML lacked an element the caller asked for."""

    def __init__(self, url: str, element: str = "title"):
        self.element = element
        super().__init__(url, f"No <{element}> element found in page '{url}'")
