"""
Process bootstrap for the Profile API.

Runs the application under uvicorn using the listen address and
timeouts from ``Settings``.  A failure to start (for example when the
port is already bound) is logged and reported as exit status 1; a
normal shutdown logs a final message and reports 0.
"""

import asyncio
import logging
from typing import Optional

from fastapi import FastAPI
from uvicorn import Config, Server

from .core.config import Settings, settings as default_settings
from .main import create_app


logger = logging.getLogger(__name__)


def build_config(app: FastAPI, settings: Settings) -> Config:
    """Return the uvicorn configuration for ``app``.

    The idle timeout becomes uvicorn's keep‑alive timeout.  Read and
    write timeouts are enforced by ``TimeoutMiddleware`` inside the
    application.  Uvicorn's own access log is disabled because the
    application writes one.
    """
    return Config(
        app=app,
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=int(settings.idle_timeout),
        reload=False,
        access_log=False,
        log_level=settings.log_level.lower(),
    )


async def serve(settings: Settings) -> None:
    """Serve a freshly created application until shutdown."""
    app = create_app(settings)
    server = Server(build_config(app, settings))
    logger.info("Listening on %s:%s", settings.host, settings.port)
    await server.serve()
    if not server.started:
        raise RuntimeError(f"could not start server on {settings.host}:{settings.port}")


def main(settings: Optional[Settings] = None) -> int:
    """Run the server and return the process exit status."""
    settings = settings or default_settings
    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        pass
    except SystemExit as exc:
        # uvicorn exits with status 1 when it cannot bind the socket.
        if exc.code:
            logger.error("Failed to start server: exit status %s", exc.code)
            return 1
    except (OSError, RuntimeError) as exc:
        logger.error("Failed to start server: %s", exc)
        return 1
    logger.info("All systems offline.")
    return 0
