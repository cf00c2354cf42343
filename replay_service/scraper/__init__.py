"""Scraper package — upstream fetch & replay link extraction."""

from replay_service.scraper.extractor import extract_replays, scrape_replays
from replay_service.scraper.fetcher import (
    UpstreamDecodeError,
    UpstreamError,
    create_client,
    fetch_document,
)
from replay_service.scraper.models import ReplayList, UpstreamDocument
from replay_service.scraper.service import ReplayService

__all__ = [
    "extract_replays",
    "scrape_replays",
    "fetch_document",
    "create_client",
    "ReplayService",
    "ReplayList",
    "UpstreamDocument",
    "UpstreamError",
    "UpstreamDecodeError",
]
