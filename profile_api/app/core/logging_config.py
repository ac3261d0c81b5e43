"""
Logging setup for the Profile API.

Every record written by the application's handlers carries the id of
the request being served, taken from ``request_id_var`` which
``RequestContextMiddleware`` sets for the duration of each request.
Records logged outside a request show ``-`` instead.  The access log
(``profile_api.access``) can be switched off on its own without
touching the rest of the logging.
"""

import logging
from contextvars import ContextVar
from pathlib import Path
from typing import Optional


ACCESS_LOGGER_NAME = "profile_api.access"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")


class RequestIdFilter(logging.Filter):
    """Stamp each record with the current request id."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get()
        return True


def is_request_handler(handler: logging.Handler) -> bool:
    """Return whether ``handler`` was installed by :func:`setup_logging`."""
    return any(isinstance(f, RequestIdFilter) for f in handler.filters)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, access_log: bool = True) -> None:
    """Configure the root logger and the access logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that receives the same records as the console.
    access_log : bool
        When false the per‑request access lines are suppressed.

    Handlers are attached only if the root logger carries none of ours
    yet, so repeated ``create_app()`` calls do not duplicate output.
    Handlers installed by other tools (pytest, uvicorn) are left alone.
    The access logger switch is applied every time.
    """
    logging.getLogger(ACCESS_LOGGER_NAME).setLevel(logging.NOTSET if access_log else logging.WARNING)

    root = logging.getLogger()
    if any(is_request_handler(h) for h in root.handlers):
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(RequestIdFilter())
        root.addHandler(handler)
