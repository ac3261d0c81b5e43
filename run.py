"""Entry point for the Profile API server.

Listen address, timeouts and log level are read from environment
variables (``HOST``, ``PORT``, ``READ_TIMEOUT``, ``WRITE_TIMEOUT``,
``IDLE_TIMEOUT``, ``LOG_LEVEL``).  See ``profile_api/app/core/config.py``
for the full list and defaults.

Usage:
    python run.py
"""
import sys

from profile_api.app.server import main


if __name__ == "__main__":
    sys.exit(main())
