from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from .config import Configuration
from .errors import ConnectorError, ResponseError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

ErrorModels = Mapping[int, type[BaseModel]]


def _clean_params(params: Mapping[str, Any] | None) -> dict[str, Any] | None:
    if not params:
        return None
    return {key: value for key, value in params.items() if value is not None}


def path_segment(value: str) -> str:
    """Percent-encode one path segment so it cannot add or climb path levels."""

    encoded = quote(value, safe="")
    if encoded in (".", ".."):
        encoded = encoded.replace(".", "%2E")
    return encoded


def dump_body(payload: BaseModel) -> dict[str, Any]:
    """Serialise a request model, dropping unset optional fields."""

    return payload.model_dump(mode="json", by_alias=True, exclude_none=True)


def decode(resp: httpx.Response, model: type[ModelT]) -> ModelT:
    """Validate a success body into ``model``; undecodable bodies are connector failures."""

    try:
        return model.model_validate(resp.json())
    except (ValueError, ValidationError) as exc:
        raise ConnectorError(
            f"Unable to decode {model.__name__} from {resp.request.method} {resp.request.url}"
        ) from exc


def decode_list(resp: httpx.Response, model: type[ModelT]) -> list[ModelT]:
    try:
        data = resp.json()
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array, got {type(data).__name__}")
        return [model.model_validate(item) for item in data]
    except (ValueError, ValidationError) as exc:
        raise ConnectorError(
            f"Unable to decode list of {model.__name__} from {resp.request.method} {resp.request.url}"
        ) from exc


class HttpClient:
    """Thin async httpx wrapper that injects the backend API key and decodes error bodies."""

    def __init__(self, config: Configuration) -> None:
        self.config = config
        self.base_url = config.base_url

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        }

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json: Any | None = None,
        error_models: ErrorModels | None = None,
    ) -> httpx.Response:
        url = f"{self.base_url}/{path.lstrip('/')}"
        request_kwargs: dict[str, Any] = {
            "params": _clean_params(params),
            "headers": self._headers(),
        }
        if json is not None:
            request_kwargs["json"] = json

        logger.debug("PropelAuth %s %s", method, url)
        shared = self.config.http_client
        if shared is not None and shared.is_closed:
            raise ConnectorError("Transport error: the shared HTTP client has been closed")
        try:
            if shared is not None:
                resp = await shared.request(method, url, **request_kwargs)
            else:
                async with httpx.AsyncClient(timeout=self.config.timeout) as client:
                    resp = await client.request(method, url, **request_kwargs)
        except httpx.HTTPError as e:
            raise ConnectorError(f"Transport error: {e}") from e

        if resp.status_code >= 400:
            logger.debug("PropelAuth %s %s returned %s", method, url, resp.status_code)
            raise ResponseError(
                resp.status_code,
                entity=self._decode_error_entity(resp, error_models),
                content=resp.text,
            )
        return resp

    @staticmethod
    def _decode_error_entity(resp: httpx.Response, error_models: ErrorModels | None) -> BaseModel | None:
        if not error_models:
            return None
        model = error_models.get(resp.status_code)
        if model is None:
            return None
        try:
            detail = resp.json()
        except ValueError:
            return None
        if not isinstance(detail, dict):
            return None
        try:
            return model.model_validate(detail)
        except ValidationError:
            return None

    async def get(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("PUT", path, **kwargs)

    async def patch(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("PATCH", path, **kwargs)

    async def delete(self, path: str, **kwargs: Any) -> httpx.Response:
        return await self.request("DELETE", path, **kwargs)


__all__ = ["HttpClient", "decode", "decode_list", "dump_body", "path_segment"]
