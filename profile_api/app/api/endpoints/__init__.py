"""
Endpoint modules.

Each module defines an ``APIRouter`` for one resource.  The routers
are aggregated in ``api/router.py`` and mounted under ``/api``.
"""
