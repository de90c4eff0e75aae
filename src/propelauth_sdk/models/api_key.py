"""Typed models for PropelAuth end-user API key management."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .common import BadRequestDetails
from .user import OrgMemberInfo, UserMetadata


class ApiKeyQueryParams(BaseModel):
    """Filters and pagination for listing API keys."""

    org_id: str | None = None
    user_id: str | None = None
    user_email: str | None = None
    page_size: int | None = None
    page_number: int | None = None

    model_config = ConfigDict(populate_by_name=True)


class CreateApiKeyParams(BaseModel):
    org_id: str | None = None
    user_id: str | None = None
    expires_at_seconds: int | None = None
    metadata: dict[str, Any] | None = None

    model_config = ConfigDict(populate_by_name=True)


class UpdateApiKeyParams(BaseModel):
    expires_at_seconds: int | None = None
    metadata: dict[str, Any] | None = None

    model_config = ConfigDict(populate_by_name=True)


class ValidateApiKeyParams(BaseModel):
    api_key_token: str

    model_config = ConfigDict(populate_by_name=True)


class FetchApiKeyResponse(BaseModel):
    api_key_id: str
    created_at: int | None = None
    expires_at_seconds: int | None = None
    metadata: dict[str, Any] | None = None
    user_id: str | None = None
    org_id: str | None = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class FetchApiKeysPagedResponse(BaseModel):
    api_keys: list[FetchApiKeyResponse] = Field(default_factory=list)
    total_api_keys: int = 0
    current_page: int = 0
    page_size: int = 10
    has_more_results: bool = False

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class CreateApiKeyResponse(BaseModel):
    api_key_id: str
    api_key_token: str

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class ApiKeyOrgMetadata(BaseModel):
    """Organization an API key belongs to."""

    org_id: str
    org_name: str | None = None
    max_users: int | None = None
    metadata: dict[str, Any] | None = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class ValidateApiKeyResponse(BaseModel):
    """General validation result; either ``user`` or ``org`` may be absent."""

    metadata: dict[str, Any] | None = None
    user: UserMetadata | None = Field(default=None, alias="user_metadata")
    org: ApiKeyOrgMetadata | None = Field(default=None, alias="org_metadata")
    user_in_org: OrgMemberInfo | None = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class ValidatePersonalApiKeyResponse(BaseModel):
    """Validation result for a key owned by a user outside any organization."""

    metadata: dict[str, Any] | None = None
    user: UserMetadata

    model_config = ConfigDict(populate_by_name=True)


class ValidateOrgApiKeyResponse(BaseModel):
    """Validation result for a key owned by an organization."""

    metadata: dict[str, Any] | None = None
    user: UserMetadata | None = None
    org: ApiKeyOrgMetadata
    user_in_org: OrgMemberInfo | None = None

    model_config = ConfigDict(populate_by_name=True)


class ApiKeyBadRequest(BadRequestDetails):
    api_key_id: list[str] | None = None
    org_id: list[str] | None = None
    user_id: list[str] | None = None
    user_email: list[str] | None = None
    page_size: list[str] | None = None
    page_number: list[str] | None = None
    expires_at_seconds: list[str] | None = None
    metadata: list[str] | None = None


__all__ = [
    "ApiKeyQueryParams",
    "CreateApiKeyParams",
    "UpdateApiKeyParams",
    "ValidateApiKeyParams",
    "FetchApiKeyResponse",
    "FetchApiKeysPagedResponse",
    "CreateApiKeyResponse",
    "ApiKeyOrgMetadata",
    "ValidateApiKeyResponse",
    "ValidatePersonalApiKeyResponse",
    "ValidateOrgApiKeyResponse",
    "ApiKeyBadRequest",
]
