"""Blocking HTTP fetcher for article pages."""

from __future__ import annotations

import logging

import httpx

from wikinet.config import settings
from wikinet.errors import NetworkError
from wikinet.scraper.models import RawPage

logger = logging.getLogger(__name__)


def _default_headers() -> dict[str, str]:
    return {"User-Agent": settings.user_agent}


def fetch_html(url: str) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    One GET per call; redirects are followed and the response body is
    returned as-is.

    Raises:
        NetworkError: On a transport failure, a timeout, or a 4xx/5xx status.
    """
    logger.debug("GET %s", url)
    try:
        with httpx.Client(
            headers=_default_headers(),
            timeout=settings.request_timeout,
            follow_redirects=True,
        ) as client:
            response = client.get(url)
            response.raise_for_status()
            html = response.text
            status_code = response.status_code
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        logger.warning("GET %s returned HTTP %d", url, status)
        raise NetworkError(url, f"HTTP {status}", status_code=status) from exc
    except httpx.HTTPError as exc:
        logger.warning("GET %s failed: %s", url, exc)
        raise NetworkError(url, str(exc) or type(exc).__name__) from exc
    except httpx.InvalidURL as exc:
        # Not an HTTPError subclass; raised before any request is sent.
        logger.warning("GET %s rejected: %s", url, exc)
        raise NetworkError(url, str(exc) or type(exc).__name__) from exc

    logger.debug("GET %s -> %d (%d bytes)", url, status_code, len(html))
    return RawPage(url=url, html=html, status_code=status_code)
