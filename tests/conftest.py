"""Shared fixtures for the Profile API tests."""

import pytest
from fastapi.testclient import TestClient

from profile_api.app.main import create_app
from profile_api.app.schemas.user import User
from profile_api.app.services.user_service import UserStore


@pytest.fixture
def store():
    """An empty user store."""
    return UserStore()


@pytest.fixture
def client(store):
    """A test client for an application serving ``store``."""
    with TestClient(create_app(store=store)) as c:
        yield c


@pytest.fixture
def ada():
    """A valid user payload."""
    return {"first_name": "Ada", "last_name": "Lovelace", "biography": "mathematician"}


@pytest.fixture
def grace():
    return User(first_name="Grace", last_name="Hopper", biography="rear admiral")
