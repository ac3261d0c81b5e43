"""
Application package initializer.

The service is organised into small pieces: ``core`` holds settings,
logging and middleware, ``schemas`` the Pydantic payload models,
``services`` the in‑memory user store and ``api`` the HTTP routes.
``main`` assembles them into a FastAPI application and ``server``
runs that application under uvicorn.
"""

from .main import app, create_app  # noqa: F401
