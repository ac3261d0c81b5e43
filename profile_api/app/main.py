"""
Main entrypoint for the Profile API.

This module assembles the FastAPI application, sets up logging,
installs middleware and error handlers and includes the API router.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``.  Importing the app
here makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn profile_api.app.main:app

``server.py`` does the same with the listen address and timeouts
taken from ``Settings``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from starlette.types import ASGIApp

from .api.responses import INVALID_BODY_MESSAGE, send_json
from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.middleware import RequestContextMiddleware, TimeoutMiddleware
from .schemas.user import Envelope
from .services.user_service import UserStore


logger = logging.getLogger(__name__)


class ProfileAPI(FastAPI):
    """FastAPI application with the connection timeouts as its outermost layer.

    ``TimeoutMiddleware`` wraps the whole stack, including Starlette's
    server error middleware, so a request aborted by a read timeout is
    never answered by the application.
    """

    def build_middleware_stack(self) -> ASGIApp:
        settings = self.state.settings
        return TimeoutMiddleware(
            super().build_middleware_stack(),
            read_timeout=settings.read_timeout,
            write_timeout=settings.write_timeout,
        )


async def invalid_body_handler(request: Request, exc: RequestValidationError) -> Response:
    """Answer an undecodable request body with the standard 400 envelope."""
    logger.debug("Rejected body for %s %s: %s", request.method, request.url.path, exc.errors())
    return send_json(Envelope(error=INVALID_BODY_MESSAGE), status.HTTP_400_BAD_REQUEST)


def create_app(settings: Optional[Settings] = None, store: Optional[UserStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the module‑level instance read from
        the environment.
    store : Optional[UserStore]
        Store to serve.  A fresh, empty store is created when omitted,
        so every application starts with no users.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file, settings.access_log)

    app = ProfileAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = store if store is not None else UserStore()

    app.add_exception_handler(RequestValidationError, invalid_body_handler)

    app.add_middleware(RequestContextMiddleware)

    app.include_router(api_router, prefix="/api")
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
