"""Fetch-and-scrape service shared by every request."""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import Executor

import httpx

from replay_service.scraper.extractor import scrape_replays
from replay_service.scraper.fetcher import fetch_document

logger = logging.getLogger(__name__)


class ReplayService:
    """Fetches the upstream replay page and scrapes it off the event loop.

    Holds the outbound HTTP client and a handle to the worker pool.  Both are
    created once at startup and never mutated; every call works on its own
    buffer and document.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        pool: Executor,
        upstream_url: str,
    ) -> None:
        self.client = client
        self.pool = pool
        self.upstream_url = upstream_url

    async def fetch_replays(self) -> str:
        """Return the recent replays of the upstream page as a JSON string.

        Raises:
            httpx.HTTPError: On upstream connection, timeout, or status errors.
            UpstreamDecodeError: If the upstream body is not valid UTF-8.
        """
        document = await fetch_document(self.client, self.upstream_url)
        loop = asyncio.get_event_loop()
        body = await loop.run_in_executor(
            self.pool, scrape_replays, document.html, self.upstream_url
        )
        logger.debug("Scraped %d bytes of replay JSON", len(body))
        return body
