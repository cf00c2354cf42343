"""Listener: binds the service address and runs uvicorn on it.

The socket is bound here rather than by uvicorn so that a bad address or a
port already in use fails fast with a clear error before the event loop
starts, and so the address actually bound can be announced.
"""

from __future__ import annotations

import logging
import socket

import uvicorn

from replay_service.api.app import app

logger = logging.getLogger(__name__)


class ServerStartupError(Exception):
    """The listener could not be bound or the server failed to start."""


def bind_socket(host: str, port: int) -> socket.socket:
    """Return a listening TCP socket bound to *host*:*port*.

    Raises:
        ServerStartupError: If the address is invalid or cannot be bound.
    """
    try:
        return socket.create_server((host, port))
    except (OSError, OverflowError) as exc:
        raise ServerStartupError(f"Error binding address {host}:{port}: {exc}") from exc


def bound_address(sock: socket.socket) -> str:
    """Format the local address of *sock* as ``host:port``."""
    host, port = sock.getsockname()[:2]
    if ":" in host:
        host = f"[{host}]"
    return f"{host}:{port}"


def run_server(sock: socket.socket, log_level: str = "info") -> None:
    """Serve the app on the pre-bound *sock* until interrupted.

    Raises:
        ServerStartupError: If the server never finished starting up.
    """
    config = uvicorn.Config(app, log_level=log_level.lower(), lifespan="on")
    server = uvicorn.Server(config)
    server.run(sockets=[sock])
    if not server.started:
        raise ServerStartupError("Error running the server")
