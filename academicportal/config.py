"""
Runtime configuration.

Values come from environment variables (optionally loaded from a .env file):

    PORTAL_API_URL       backend base URL, e.g. https://professor.runasp.net/api
    PORTAL_TIMEOUT       request timeout in seconds
    PORTAL_MOCK_DELAY    simulated latency of the mock services in seconds
    PORTAL_SESSION_FILE  where the login session is stored
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from urllib.parse import urlparse

from dotenv import load_dotenv

from academicportal.errors import ConfigError

load_dotenv()

DEFAULT_API_URL = "https://professor.runasp.net/api"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MOCK_DELAY = 0.5

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def normalize_base_url(url: str) -> str:
    """
    Strip whitespace and trailing slashes and make sure the URL is http(s).
    """
    base = (url or "").strip().rstrip("/")
    parsed = urlparse(base)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigError(f"Invalid API base URL: {url!r}")
    return base


def get_api_url() -> str:
    return normalize_base_url(os.getenv("PORTAL_API_URL") or DEFAULT_API_URL)


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}")


def get_timeout() -> float:
    return _float_env("PORTAL_TIMEOUT", DEFAULT_TIMEOUT)


def get_mock_delay() -> float:
    return _float_env("PORTAL_MOCK_DELAY", DEFAULT_MOCK_DELAY)


def get_session_path() -> Path:
    custom = os.getenv("PORTAL_SESSION_FILE")
    if custom:
        return Path(custom).expanduser()
    return Path.home() / ".academicportal" / "session.json"


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
