"""Scraper package — article fetch & link extraction."""

from wikinet.scraper.extractor import extract_links, extract_title
from wikinet.scraper.fetcher import fetch_html
from wikinet.scraper.models import RawPage

__all__ = ["fetch_html", "extract_links", "extract_title", "RawPage"]
