"""
Top‑level API router.

Aggregates resource routers under a unified prefix.  The application
mounts this router at ``/api``.
"""

from fastapi import APIRouter

from .endpoints import users


router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
