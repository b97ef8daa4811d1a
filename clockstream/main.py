"""FastAPI application for clockstream — a single SSE clock endpoint."""

from __future__ import annotations

import logging
import socket
import sys
from typing import Callable, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, StreamingResponse

from clockstream import __version__
from clockstream.config.settings import Settings
from clockstream.streaming import STREAM_HEADERS, ClockTicker

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def can_flush(request: Request) -> bool:
    """ASGI servers deliver every body message as soon as it is sent."""
    return True


def create_app(
    settings: Optional[Settings] = None,
    streaming_check: Callable[[Request], bool] = can_flush,
) -> FastAPI:
    """Build a new app with its own router and one stream route."""
    settings = settings or Settings()

    app = FastAPI(title="clockstream", version=__version__)
    app.state.ticker = ClockTicker(interval=settings.interval)

    @app.get(settings.stream_path)
    async def stream_clock(request: Request):
        """SSE endpoint — pushes the server time every interval."""
        if not streaming_check(request):
            return PlainTextResponse("Streaming unsupported", status_code=500)
        return StreamingResponse(
            app.state.ticker.events(),
            headers=STREAM_HEADERS,
            media_type="text/event-stream",
        )

    return app


app = create_app()


def bind_socket(settings: Settings) -> socket.socket:
    """Bind and listen on the configured address. Raises OSError on failure."""
    family = socket.AF_INET6 if ":" in settings.host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((settings.host, settings.port))
        sock.listen()
    except OSError:
        sock.close()
        raise
    sock.set_inheritable(True)
    return sock


def serve(settings: Optional[Settings] = None) -> None:
    """Run the server until shutdown. Exits with status 1 if the port can't be bound."""
    settings = settings or Settings()
    try:
        sock = bind_socket(settings)
    except OSError as e:
        logger.error("Failed to start server: %s", e)
        sys.exit(1)

    host, port = sock.getsockname()[:2]
    logger.info("SSE server listening on %s:%d", host, port)

    config = uvicorn.Config(
        create_app(settings),
        log_level=settings.log_level,
        limit_concurrency=settings.limit_concurrency,
        timeout_graceful_shutdown=settings.shutdown_timeout,
    )
    uvicorn.Server(config).run(sockets=[sock])


if __name__ == "__main__":
    serve()
