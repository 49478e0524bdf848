"""
Environment configuration for a YouTrack connection (optional .env):

    YOUTRACK_BASE_URL   instance root, e.g. https://example.youtrack.cloud
    YOUTRACK_TOKEN      permanent token, sent as a Bearer token
    YOUTRACK_TIMEOUT    request timeout in seconds (optional)

Resources address endpoints as "api/...", so a base URL pasted together
with its REST suffix ("https://example.youtrack.cloud/api") is trimmed back
to the instance root.
"""

from __future__ import annotations

import os
from typing import Optional, Tuple
from urllib.parse import urlsplit

from . import client as _client
from .client import YouTrackClient

ENV_BASE_URL = "YOUTRACK_BASE_URL"
ENV_TOKEN = "YOUTRACK_TOKEN"
ENV_TIMEOUT = "YOUTRACK_TIMEOUT"


def normalize_base_url(base_url: str) -> str:
    """
    >>> normalize_base_url(" https://yt.example.com/youtrack/api/ ")
    'https://yt.example.com/youtrack'
    """
    url = (base_url or "").strip().rstrip("/")
    if not url:
        return ""
    parts = urlsplit(url)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ValueError(f"{ENV_BASE_URL} must be an http(s) URL, got {url!r}.")
    if parts.path.endswith("/api"):
        url = url[: -len("/api")]
    return url


def load_env_config(*, use_dotenv: bool = True) -> Tuple[str, str]:
    """Return (base_url, token); base_url is normalized, either may be empty."""
    if use_dotenv:
        _client.load_dotenv()
    base_url = normalize_base_url(os.getenv(ENV_BASE_URL, ""))
    token = os.getenv(ENV_TOKEN, "").strip()
    return base_url, token


def load_env_timeout() -> Optional[float]:
    raw = os.getenv(ENV_TIMEOUT, "").strip()
    if not raw:
        return None
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"{ENV_TIMEOUT} must be a number of seconds, got {raw!r}.")
    if timeout <= 0:
        raise ValueError(f"{ENV_TIMEOUT} must be positive, got {raw!r}.")
    return timeout


def create_client_from_env(**kwargs) -> YouTrackClient:
    """
    Create a YouTrackClient from the environment. Keyword arguments are passed
    to the client and win over YOUTRACK_TIMEOUT.
    """
    base_url, token = load_env_config()
    pairs = ((ENV_BASE_URL, base_url), (ENV_TOKEN, token))
    missing = [name for name, value in pairs if not value]
    if missing:
        raise ValueError(f"Missing {' and '.join(missing)} in environment.")
    if "timeout_seconds" not in kwargs:
        timeout = load_env_timeout()
        if timeout is not None:
            kwargs["timeout_seconds"] = timeout
    return YouTrackClient(base_url=base_url, token=token, **kwargs)


__all__ = [
    "ENV_BASE_URL",
    "ENV_TOKEN",
    "ENV_TIMEOUT",
    "normalize_base_url",
    "load_env_config",
    "load_env_timeout",
    "create_client_from_env",
]
