"""
User endpoints.

Expose create, list, fetch, replace and delete operations over the
in‑memory :class:`UserStore`.  Request bodies are decoded as JSON
into :class:`User` by the ``read_user_body`` dependency; a body that
cannot be decoded never reaches these handlers and is answered with
a 400 envelope by the application's validation error handler.  Path
identifiers are taken as plain strings and parsed here so a malformed
id gets a plain‑text 400.
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from ..deps import get_user_store, read_user_body
from ..responses import (
    NOT_FOUND_MESSAGE,
    invalid_id,
    no_content,
    parse_user_id,
    send_json,
)
from ...schemas.user import Envelope, User, UserRead
from ...services.user_service import UserStore


logger = logging.getLogger(__name__)

router = APIRouter()


def _not_found() -> Response:
    return send_json(Envelope(error=NOT_FOUND_MESSAGE), status.HTTP_404_NOT_FOUND)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    user: User = Depends(read_user_body),
    store: UserStore = Depends(get_user_store),
) -> Response:
    """Store a new user and return it together with its generated id."""
    stored, user_id = store.insert(user)
    logger.info("Created user %s", user_id)
    return send_json(
        Envelope(data=UserRead.from_record(user_id, stored)),
        status.HTTP_201_CREATED,
    )


@router.get("")
async def list_users(store: UserStore = Depends(get_user_store)) -> Response:
    """Return every stored user.  An empty store yields ``{"data": []}``."""
    users = [
        UserRead.from_record(user_id, user)
        for user_id, user in store.find_all().items()
    ]
    return send_json(Envelope(data=users), status.HTTP_200_OK)


@router.get("/{user_id}")
async def get_user(user_id: str, store: UserStore = Depends(get_user_store)) -> Response:
    """Return one user, 404 if the id is unknown."""
    parsed_id = parse_user_id(user_id)
    if parsed_id is None:
        return invalid_id()

    user = store.find_by_id(parsed_id)
    if user is None:
        return _not_found()

    return send_json(Envelope(data=UserRead.from_record(parsed_id, user)), status.HTTP_200_OK)


@router.put("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_user(
    user_id: str,
    user: User = Depends(read_user_body),
    store: UserStore = Depends(get_user_store),
) -> Response:
    """Replace all fields of an existing user.

    The body is validated before the identifier, so a request where
    both are malformed is reported as a bad body.
    """
    parsed_id = parse_user_id(user_id)
    if parsed_id is None:
        return invalid_id()

    if store.find_by_id(parsed_id) is None:
        return _not_found()

    store.update(parsed_id, user)
    logger.info("Updated user %s", parsed_id)
    return no_content()


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, store: UserStore = Depends(get_user_store)) -> Response:
    """Remove a user, 404 if the id is unknown."""
    parsed_id = parse_user_id(user_id)
    if parsed_id is None:
        return invalid_id()

    if store.find_by_id(parsed_id) is None:
        return _not_found()

    store.delete(parsed_id)
    logger.info("Deleted user %s", parsed_id)
    return no_content()
