"""Data models for the scraper layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RawPage:
    """The raw HTTP response for a single article fetch."""

    url: str
    html: str
    status_code: int
