"""Service facade for end-user API key management."""

from __future__ import annotations

from ..apis import api_keys as api
from ..config import Configuration
from ..error_mapping import error_table, translate_errors
from ..errors import (
    BadRequestError,
    InvalidApiKeyError,
    InvalidEndUserApiKeyError,
    InvalidOrgApiKeyError,
    InvalidPersonalApiKeyError,
    NotFoundError,
)
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
    ValidateOrgApiKeyResponse,
    ValidatePersonalApiKeyResponse,
)

_LIST_ERRORS = error_table(
    {401: InvalidApiKeyError, 404: NotFoundError},
    bad_request=BadRequestError,
    entity_type=ApiKeyBadRequest,
)
_KEY_ERRORS = error_table({401: InvalidApiKeyError, 404: InvalidEndUserApiKeyError})
_ERRORS = error_table({401: InvalidApiKeyError, 404: NotFoundError})


class ApiKeyService:
    """Manage and validate end-user API keys."""

    def __init__(self, config: Configuration) -> None:
        self.config = config

    async def fetch_current_api_keys(self, params: ApiKeyQueryParams) -> FetchApiKeysPagedResponse:
        """Page over active API keys matching the filters."""

        return await translate_errors(api.fetch_current_api_keys(self.config, params), _LIST_ERRORS)

    async def fetch_archived_api_keys(self, params: ApiKeyQueryParams) -> FetchApiKeysPagedResponse:
        """Page over expired or deleted API keys matching the filters."""

        return await translate_errors(api.fetch_archived_api_keys(self.config, params), _LIST_ERRORS)

    async def fetch_api_key(self, api_key_id: str) -> FetchApiKeyResponse:
        return await translate_errors(api.fetch_api_key(self.config, api_key_id), _KEY_ERRORS)

    async def create_api_key(self, params: CreateApiKeyParams) -> CreateApiKeyResponse:
        return await translate_errors(api.create_api_key(self.config, params), _ERRORS)

    async def update_api_key(self, api_key_id: str, params: UpdateApiKeyParams) -> None:
        await translate_errors(api.update_api_key(self.config, api_key_id, params), _KEY_ERRORS)

    async def delete_api_key(self, api_key_id: str) -> None:
        await translate_errors(api.delete_api_key(self.config, api_key_id), _KEY_ERRORS)

    async def validate_api_key(self, params: ValidateApiKeyParams) -> ValidateApiKeyResponse:
        """Validate a token presented by an end user."""

        return await translate_errors(api.validate_api_key(self.config, params), _ERRORS)

    async def validate_personal_api_key(
        self, params: ValidateApiKeyParams
    ) -> ValidatePersonalApiKeyResponse:
        """Validate a token and require it to belong to a user, not an organization.

        Raises:
            InvalidPersonalApiKeyError: The key is valid but is not a personal key.
        """

        resp = await self.validate_api_key(params)
        if resp.user is None or resp.org is not None:
            raise InvalidPersonalApiKeyError()
        return ValidatePersonalApiKeyResponse(metadata=resp.metadata, user=resp.user)

    async def validate_org_api_key(self, params: ValidateApiKeyParams) -> ValidateOrgApiKeyResponse:
        """Validate a token and require it to belong to an organization.

        Raises:
            InvalidOrgApiKeyError: The key is valid but has no organization.
        """

        resp = await self.validate_api_key(params)
        if resp.org is None:
            raise InvalidOrgApiKeyError()
        return ValidateOrgApiKeyResponse(
            metadata=resp.metadata,
            user=resp.user,
            org=resp.org,
            user_in_org=resp.user_in_org,
        )


__all__ = ["ApiKeyService"]
