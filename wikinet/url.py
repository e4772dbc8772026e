"""Validated references to Wikipedia articles."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from urllib.parse import quote, unquote, urlsplit

from wikinet.config import settings
from wikinet.errors import InvalidHostError, InvalidPathError

ARTICLE_PREFIX = "/wiki/"

# Whitespace, control characters and the delimiters RFC 3986 does not allow
# unescaped inside a path segment.
_DISALLOWED_CHARS = re.compile(r'[\s\x00-\x1f\x7f#?<>"{}|\\^`\[\]]')
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# Characters left as-is when re-encoding a decoded path.
_PATH_SAFE = "/:@!$&'()*+,;=~"


def canonical_path(path: str) -> str:
    """Normalise percent-encoding so equivalent spellings of a path compare equal.

    ``/wiki/Caf%C3%A9`` and ``/wiki/Café`` both become ``/wiki/Caf%C3%A9``.
    """
    return quote(unquote(path), safe=_PATH_SAFE)


@dataclass(frozen=True)
class WikipediaUrl:
    """A validated ``/wiki/<Slug>`` path on the configured Wikipedia host.

    Build instances with :meth:`from_path` or :meth:`from_url`; the
    constructor itself does not validate.
    """

    path: str
    host: str = field(default_factory=lambda: settings.wikipedia_host)

    @classmethod
    def from_path(cls, path: str, host: str | None = None) -> WikipediaUrl:
        """Create a :class:`WikipediaUrl` from the path part of an article url.

        For example ``/wiki/Waffle`` rather than
        ``https://en.wikipedia.org/wiki/Waffle``.

        Raises:
            InvalidPathError: If the prefix is missing, the slug is empty, or
                the path contains characters not allowed in a url path or a
                malformed percent-escape.
        """
        if not isinstance(path, str) or not path.startswith(ARTICLE_PREFIX):
            raise InvalidPathError(str(path), f"must start with '{ARTICLE_PREFIX}'")
        if not path[len(ARTICLE_PREFIX):]:
            raise InvalidPathError(path, "empty article name")
        match = _DISALLOWED_CHARS.search(path)
        if match:
            raise InvalidPathError(path, f"disallowed character {match.group(0)!r}")
        if _BAD_ESCAPE.search(path):
            raise InvalidPathError(path, "malformed percent-escape")
        return cls(path=path, host=host or settings.wikipedia_host)

    @classmethod
    def from_url(cls, url: str) -> WikipediaUrl:
        """Create a :class:`WikipediaUrl` from an absolute url.

        The fragment, if any, is dropped. A query string makes the path
        invalid.

        Raises:
            InvalidHostError: If the url is not on the configured host.
            InvalidPathError: If the path is not an article path.
        """
        parts = urlsplit(url.strip())
        host = (parts.hostname or "").lower()
        if host != settings.wikipedia_host.lower():
            raise InvalidHostError(url, settings.wikipedia_host)
        path = parts.path
        if parts.query:
            path = f"{path}?{parts.query}"
        return cls.from_path(path)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------
    @property
    def canonical(self) -> str:
        """The path with normalised percent-encoding; use as an identity key."""
        return canonical_path(self.path)

    @property
    def slug(self) -> str:
        return self.path[len(ARTICLE_PREFIX):]

    @property
    def title(self) -> str:
        """Human-readable article name derived from the slug (no I/O)."""
        return unquote(self.slug).replace("_", " ")

    @property
    def full_url(self) -> str:
        return f"https://{self.host}{self.path}"

    def get_url(self) -> str:
        """Return the absolute url of the article."""
        return self.full_url

    def __str__(self) -> str:
        return self.full_url
