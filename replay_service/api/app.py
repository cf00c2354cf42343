"""FastAPI application factory.

Lifespan
--------
On startup the app creates the two resources shared by all requests: the
outbound ``httpx.AsyncClient`` and the scraping ``ThreadPoolExecutor``.
Both are wrapped in a :class:`ReplayService` stored on
``app.state.replay_service``.  On shutdown the client is closed and the pool
is drained.

Routes
------
Only ``GET /`` is served.  Every other path or method is answered with a
bare 404 and an empty body.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from replay_service.api.routers import replays as replays_router
from replay_service.config import settings
from replay_service.scraper import ReplayService, create_client


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the shared client and worker pool on startup, release on shutdown."""
    client = create_client(timeout=settings.timeout)
    pool = ThreadPoolExecutor(
        max_workers=settings.scrape_workers, thread_name_prefix="scrape"
    )
    app.state.replay_service = ReplayService(
        client=client, pool=pool, upstream_url=settings.upstream_url
    )
    try:
        yield
    finally:
        await client.aclose()
        pool.shutdown(wait=True)


async def _not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Answer unknown paths and unsupported methods with an empty 404."""
    if exc.status_code in (404, 405):
        return Response(status_code=404)
    return await http_exception_handler(request, exc)


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="Showdown Replay Service",
        description=(
            "Scrapes the Pokemon Showdown replay page and returns the links "
            "of the most recent replays as JSON."
        ),
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.add_exception_handler(StarletteHTTPException, _not_found_handler)
    app.include_router(replays_router.router)

    return app


# Module-level instance used by uvicorn:
#   uvicorn replay_service.api.app:app
app = create_app()
