"""Centralised settings for wikinet.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Wikipedia
    # ------------------------------------------------------------------
    wikipedia_host: str = field(
        default_factory=lambda: os.environ.get("WIKIPEDIA_HOST", "en.wikipedia.org")
    )

    @property
    def base_url(self) -> str:
        """Scheme + host, without a trailing slash."""
        return f"https://{self.wikipedia_host}"

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "WIKINET_USER_AGENT", "wikinet/0.1 (+https://github.com/wikinet)"
        )
    )

    # ------------------------------------------------------------------
    # Crawling
    # ------------------------------------------------------------------
    crawl_max_pages: int = field(
        default_factory=lambda: int(os.environ.get("CRAWL_MAX_PAGES", "50"))
    )


# Module-level singleton — import this everywhere:
#   from wikinet.config import settings
settings = Settings()
