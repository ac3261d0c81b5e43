"""
Helpers for rendering API responses.

JSON responses are wrapped in the :class:`Envelope` model.  Encoding
happens eagerly inside :func:`send_json` so that a payload which
cannot be serialised is caught here, logged and downgraded to a
generic 500 envelope instead of crashing the request.
"""

import logging
import uuid
from typing import Optional

from fastapi import Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse

from ..schemas.user import Envelope


logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Please provide FirstName LastName and bio for the user"
INVALID_ID_MESSAGE = "UUID not valid"
NOT_FOUND_MESSAGE = "The user with the specified ID does not exist."
SERVER_ERROR_MESSAGE = "something went wrong"


def send_json(envelope: Envelope, status_code: int) -> Response:
    """Render ``envelope`` as a JSON response with ``status_code``."""
    try:
        return JSONResponse(jsonable_encoder(envelope.render()), status_code=status_code)
    except (TypeError, ValueError) as exc:
        logger.error("failed to marshal JSON data: %s", exc)
        return server_error()


def server_error() -> Response:
    return JSONResponse({"error": SERVER_ERROR_MESSAGE}, status_code=500)


def no_content() -> Response:
    return Response(status_code=204)


def invalid_id() -> Response:
    """Plain‑text 400 for a path identifier that is not a UUID."""
    return PlainTextResponse(INVALID_ID_MESSAGE, status_code=400)


def parse_user_id(raw_id: str) -> Optional[uuid.UUID]:
    """Parse a path segment into a UUID, or return ``None``."""
    try:
        return uuid.UUID(raw_id)
    except ValueError:
        return None
