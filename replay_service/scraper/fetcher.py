"""Async fetcher for the upstream replay page."""

from __future__ import annotations

import logging

import httpx

from replay_service.scraper.models import UpstreamDocument

logger = logging.getLogger(__name__)

_DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (compatible; ShowdownReplayService/1.0)"
}


class UpstreamError(Exception):
    """The upstream replay page could not be turned into a document."""


class UpstreamDecodeError(UpstreamError):
    """The upstream body is not valid UTF-8."""


def create_client(timeout: float | None = 30.0) -> httpx.AsyncClient:
    """Return the shared outbound client used for every upstream fetch."""
    return httpx.AsyncClient(
        headers=_DEFAULT_HEADERS,
        timeout=timeout,
        follow_redirects=True,
    )


async def fetch_document(client: httpx.AsyncClient, url: str) -> UpstreamDocument:
    """Fetch *url* with *client* and return an :class:`UpstreamDocument`.

    The body is streamed and accumulated chunk by chunk before decoding.

    Raises:
        httpx.HTTPStatusError: If the upstream returns a 4xx/5xx status code.
        httpx.HTTPError: On connection failures and timeouts.
        UpstreamDecodeError: If the body is not valid UTF-8.
    """
    logger.debug("Fetching upstream page %s", url)
    body = bytearray()
    async with client.stream("GET", url) as response:
        response.raise_for_status()
        async for chunk in response.aiter_bytes():
            body.extend(chunk)
        status_code = response.status_code

    try:
        html = body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise UpstreamDecodeError(
            f"Upstream body from {url} is not valid UTF-8: {exc}"
        ) from exc

    return UpstreamDocument(url=url, html=html, status_code=status_code)
