"""Centralised settings for the replay service.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).  The defaults are the
fixed listen address and upstream page the service was built around.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Listener
    # ------------------------------------------------------------------
    host: str = field(
        default_factory=lambda: os.environ.get("REPLAY_HOST", "127.0.0.1")
    )
    port: int = field(
        default_factory=lambda: int(os.environ.get("REPLAY_PORT", "1337"))
    )

    # ------------------------------------------------------------------
    # Upstream replay page
    # ------------------------------------------------------------------
    upstream_url: str = field(
        default_factory=lambda: os.environ.get(
            "REPLAY_UPSTREAM_URL", "http://replay.pokemonshowdown.com"
        )
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )

    # ------------------------------------------------------------------
    # Scraping
    # ------------------------------------------------------------------
    scrape_workers: int = field(
        default_factory=lambda: int(os.environ.get("REPLAY_SCRAPE_WORKERS", "4"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO")
    )

    @property
    def timeout(self) -> Optional[float]:
        """Outbound timeout in seconds, or ``None`` when disabled (``0``)."""
        return self.request_timeout if self.request_timeout > 0 else None


# Module-level singleton — import this everywhere:
#   from replay_service.config import settings
settings = Settings()
