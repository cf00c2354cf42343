"""Showdown replay service CLI — entry-point for the server.

Usage:
    python cli/main.py --help

Commands:
    serve   → run the HTTP service on the configured address
    scrape  → fetch the replay page once and print the JSON
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that
# `from replay_service.xxx import ...` works when the CLI is invoked as
# `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio
from concurrent.futures import ThreadPoolExecutor

import httpx
import typer

from replay_service.config import settings
from replay_service.logging_config import setup_logging
from replay_service.scraper import ReplayService, UpstreamError, create_client
from replay_service.server import (
    ServerStartupError,
    bind_socket,
    bound_address,
    run_server,
)

app = typer.Typer(
    name="replays",
    help="Pokemon Showdown recent replays service.",
    no_args_is_help=True,
)


@app.command("serve")
def serve() -> None:
    """Serve recent replays as JSON on the configured address."""
    setup_logging(settings.log_level)
    try:
        sock = bind_socket(settings.host, settings.port)
    except ServerStartupError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1)

    typer.echo(f"Listening on http://{bound_address(sock)}")
    try:
        run_server(sock, log_level=settings.log_level)
    except ServerStartupError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1)
    finally:
        sock.close()


async def _scrape_once() -> str:
    pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="scrape")
    try:
        async with create_client(timeout=settings.timeout) as client:
            service = ReplayService(
                client=client, pool=pool, upstream_url=settings.upstream_url
            )
            return await service.fetch_replays()
    finally:
        pool.shutdown(wait=True)


@app.command("scrape")
def scrape() -> None:
    """Fetch the replay page once and print the recent replays JSON to stdout."""
    setup_logging(settings.log_level)
    try:
        body = asyncio.run(_scrape_once())
    except (httpx.HTTPError, UpstreamError) as exc:
        typer.echo(f"[scrape] Upstream fetch failed: {exc}", err=True)
        raise typer.Exit(1)
    typer.echo(body)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
