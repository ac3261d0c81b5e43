"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all: it listens on port 8080
with 10 second read/write timeouts and a 60 second idle timeout.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Profile API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file written in addition to the console.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None
    # Set ACCESS_LOG=false to drop the one‑line‑per‑request access log.
    access_log: bool = os.getenv("ACCESS_LOG", "true").lower() in {"1", "true", "yes"}

    # Listen address for the HTTP server.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    # Per‑connection limits, in seconds.  ``read_timeout`` bounds the
    # time spent receiving a request body, ``write_timeout`` the time
    # spent sending each part of a response and ``idle_timeout`` how
    # long a keep‑alive connection may sit without a new request.
    read_timeout: float = float(os.getenv("READ_TIMEOUT", "10"))
    write_timeout: float = float(os.getenv("WRITE_TIMEOUT", "10"))
    idle_timeout: float = float(os.getenv("IDLE_TIMEOUT", "60"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at import time, environment variables should be set
# before importing this module.
settings = Settings()
