"""Endpoint bindings for ``/api/backend/v1/end_user_api_keys``."""

from __future__ import annotations

from ..config import Configuration
from ..http_client import HttpClient, decode, dump_body, path_segment
from ..models.api_key import (
    ApiKeyBadRequest,
    ApiKeyQueryParams,
    CreateApiKeyParams,
    CreateApiKeyResponse,
    FetchApiKeyResponse,
    FetchApiKeysPagedResponse,
    UpdateApiKeyParams,
    ValidateApiKeyParams,
    ValidateApiKeyResponse,
)

_ERRORS = {400: ApiKeyBadRequest}


async def fetch_current_api_keys(
    config: Configuration, params: ApiKeyQueryParams
) -> FetchApiKeysPagedResponse:
    resp = await HttpClient(config).get(
        "end_user_api_keys",
        params=params.model_dump(exclude_none=True),
        error_models=_ERRORS,
    )
    return decode(resp, FetchApiKeysPagedResponse)


async def fetch_archived_api_keys(
    config: Configuration, params: ApiKeyQueryParams
) -> FetchApiKeysPagedResponse:
    resp = await HttpClient(config).get(
        "end_user_api_keys/archived",
        params=params.model_dump(exclude_none=True),
        error_models=_ERRORS,
    )
    return decode(resp, FetchApiKeysPagedResponse)


async def fetch_api_key(config: Configuration, api_key_id: str) -> FetchApiKeyResponse:
    resp = await HttpClient(config).get(f"end_user_api_keys/{path_segment(api_key_id)}", error_models=_ERRORS)
    return decode(resp, FetchApiKeyResponse)


async def create_api_key(config: Configuration, params: CreateApiKeyParams) -> CreateApiKeyResponse:
    resp = await HttpClient(config).post(
        "end_user_api_keys", json=dump_body(params), error_models=_ERRORS
    )
    return decode(resp, CreateApiKeyResponse)


async def update_api_key(
    config: Configuration, api_key_id: str, params: UpdateApiKeyParams
) -> None:
    await HttpClient(config).patch(
        f"end_user_api_keys/{path_segment(api_key_id)}", json=dump_body(params), error_models=_ERRORS
    )


async def delete_api_key(config: Configuration, api_key_id: str) -> None:
    await HttpClient(config).delete(f"end_user_api_keys/{path_segment(api_key_id)}", error_models=_ERRORS)


async def validate_api_key(
    config: Configuration, params: ValidateApiKeyParams
) -> ValidateApiKeyResponse:
    resp = await HttpClient(config).post(
        "end_user_api_keys/validate", json=dump_body(params), error_models=_ERRORS
    )
    return decode(resp, ValidateApiKeyResponse)
