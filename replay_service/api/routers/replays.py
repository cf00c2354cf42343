"""Recent replays endpoint.

Routes
------
GET /    → {"replays": ["http://replay.pokemonshowdown.com/...", ...]}

Upstream failures are mapped to gateway errors: 504 when the upstream
times out, 502 for every other fetch or decode failure.
"""

from __future__ import annotations

import logging

import httpx
from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response

from replay_service.scraper import ReplayService, UpstreamError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
async def recent_replays(request: Request) -> Response:
    """Fetch the upstream replay page and return its recent replay links.

    The JSON body is passed through as produced by the scraper, with
    ``Content-Length`` set to its exact byte length.
    """
    service: ReplayService = request.app.state.replay_service
    try:
        body = await service.fetch_replays()
    except httpx.TimeoutException as exc:
        logger.warning("Upstream timed out: %s", exc)
        raise HTTPException(
            status_code=504, detail=f"Upstream timed out: {exc}"
        ) from exc
    except (httpx.HTTPError, UpstreamError) as exc:
        logger.warning("Upstream fetch failed: %s", exc)
        raise HTTPException(
            status_code=502, detail=f"Upstream fetch failed: {exc}"
        ) from exc

    content = body.encode("utf-8")
    return Response(
        content=content,
        media_type="application/json",
        headers={"Content-Length": str(len(content))},
    )
