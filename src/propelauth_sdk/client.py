"""Entry point bundling the PropelAuth service facades."""

from __future__ import annotations

from dataclasses import replace
from types import TracebackType

import httpx

from .clients.api_key import ApiKeyService
from .clients.org import OrgService
from .clients.user import UserService
from .config import DEFAULT_TIMEOUT, Configuration
from .errors import ConfigurationError


class PropelAuthClient:
    """Async client for the PropelAuth backend API.

    The client owns a pooled :class:`httpx.AsyncClient` unless built from a
    ``config`` (directly or through :meth:`from_config`), in which case the
    caller keeps ownership of whatever client the configuration carries.
    """

    def __init__(
        self,
        auth_url: str | None = None,
        api_key: str | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        config: Configuration | None = None,
    ) -> None:
        self._owned_client: httpx.AsyncClient | None = None
        if config is not None:
            self.config = config
            return
        if auth_url is None or api_key is None:
            raise ConfigurationError("auth_url and api_key are required when no configuration is given")
        config = Configuration(auth_url=auth_url, api_key=api_key, timeout=timeout)
        self._owned_client = httpx.AsyncClient(timeout=timeout)
        self.config = replace(config, http_client=self._owned_client)

    @classmethod
    def from_config(cls, config: Configuration) -> PropelAuthClient:
        return cls(config=config)

    @property
    def user(self) -> UserService:
        return UserService(self.config)

    @property
    def org(self) -> OrgService:
        return OrgService(self.config)

    @property
    def api_key(self) -> ApiKeyService:
        return ApiKeyService(self.config)

    async def aclose(self) -> None:
        """Close the HTTP client created by this instance, if any."""

        if self._owned_client is not None:
            await self._owned_client.aclose()

    async def __aenter__(self) -> PropelAuthClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


__all__ = ["PropelAuthClient"]
