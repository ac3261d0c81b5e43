"""FastAPI dependencies shared by the endpoints."""

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from ..schemas.user import User
from ..services.user_service import UserStore


def get_user_store(request: Request) -> UserStore:
    """Return the store attached to the running application."""
    return request.app.state.store


async def read_user_body(request: Request) -> User:
    """Decode the request body as a :class:`User`.

    The body is parsed as JSON whatever ``Content-Type`` the client
    sent.  A body that does not decode raises
    :class:`RequestValidationError`, which the application answers
    with the 400 envelope.  Dependencies resolve before the handler
    runs, so the body is always checked ahead of the path id.
    """
    body = await request.body()
    try:
        return User.model_validate_json(body)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors()) from exc
