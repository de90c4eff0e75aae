from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from urllib.parse import urlparse

import httpx

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_AUTH_URL = "PROPELAUTH_AUTH_URL"
ENV_API_KEY = "PROPELAUTH_API_KEY"
ENV_TIMEOUT = "PROPELAUTH_TIMEOUT"

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "propelauth-sdk-python"
BACKEND_API_PREFIX = "api/backend/v1"


@dataclass(frozen=True)
class Configuration:
    """Read-only connection settings shared by every service call.

    ``http_client`` lets callers share one :class:`httpx.AsyncClient` across
    requests; when omitted each request opens and closes its own client.
    """

    auth_url: str
    api_key: str = field(repr=False)
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    http_client: httpx.AsyncClient | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.api_key or not self.api_key.strip():
            raise ConfigurationError("A PropelAuth backend API key is required")
        parsed = urlparse(self.auth_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigurationError(f"Invalid auth URL: {self.auth_url!r}")
        if self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")

    @property
    def base_url(self) -> str:
        return f"{self.auth_url.rstrip('/')}/{BACKEND_API_PREFIX}"

    @classmethod
    def from_env(cls, *, http_client: httpx.AsyncClient | None = None) -> Configuration:
        """Build a configuration from ``PROPELAUTH_*`` environment variables."""

        auth_url = os.getenv(ENV_AUTH_URL)
        api_key = os.getenv(ENV_API_KEY)
        if not auth_url:
            raise ConfigurationError(f"{ENV_AUTH_URL} is not set")
        if not api_key:
            raise ConfigurationError(f"{ENV_API_KEY} is not set")

        raw_timeout = os.getenv(ENV_TIMEOUT)
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ConfigurationError(f"{ENV_TIMEOUT} must be a number, got {raw_timeout!r}") from exc
        logger.debug("Loaded PropelAuth configuration for %s", auth_url)
        return cls(auth_url=auth_url, api_key=api_key, timeout=timeout, http_client=http_client)


__all__ = ["Configuration", "ENV_AUTH_URL", "ENV_API_KEY", "ENV_TIMEOUT"]
