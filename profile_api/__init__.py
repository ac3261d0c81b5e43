"""
Top‑level package for the Profile API.

This file makes ``profile_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``profile_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
