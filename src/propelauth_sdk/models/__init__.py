"""Re-export typed models for the PropelAuth SDK."""

from __future__ import annotations

from .api_key import (
    ApiKeyBadRequest,
    ApiKeyOrgMetadata,
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
from .common import BadRequestDetails
from .org import (
    AddUserToOrgRequest,
    BadCreateOrgRequest,
    BadFetchOrgQuery,
    BadFetchUsersInOrgQuery,
    BadUpdateOrgRequest,
    ChangeUserRoleInOrgRequest,
    CreateOrgRequest,
    CreateOrgResponse,
    FetchOrgBasicResponse,
    FetchOrgResponse,
    FetchOrgsByQueryParams,
    FetchOrgsResponse,
    FetchUsersInOrgParams,
    RemoveUserFromOrgRequest,
    UpdateOrgRequest,
)
from .user import (
    BadCreateMagicLinkRequest,
    BadCreateUserRequest,
    BadFetchUsersBatchQuery,
    BadFetchUsersByQuery,
    BadMigrateUserRequest,
    BadUpdatePasswordRequest,
    BadUpdateUserEmailRequest,
    BadUpdateUserMetadataRequest,
    CreatedUserResponse,
    CreateMagicLinkRequest,
    CreateUserRequest,
    FetchUserByEmailParams,
    FetchUserByIdParams,
    FetchUserByUsernameParams,
    FetchUsersByEmailsParams,
    FetchUsersByIdsParams,
    FetchUsersByQueryParams,
    FetchUsersByUsernamesParams,
    MagicLink,
    MigrateUserRequest,
    OrgMemberInfo,
    UpdateEmailRequest,
    UpdatePasswordRequest,
    UpdateUserMetadataRequest,
    UserMetadata,
    UserPagedResponse,
)

__all__ = [
    "ApiKeyBadRequest",
    "ApiKeyOrgMetadata",
    "ApiKeyQueryParams",
    "CreateApiKeyParams",
    "CreateApiKeyResponse",
    "FetchApiKeyResponse",
    "FetchApiKeysPagedResponse",
    "UpdateApiKeyParams",
    "ValidateApiKeyParams",
    "ValidateApiKeyResponse",
    "ValidateOrgApiKeyResponse",
    "ValidatePersonalApiKeyResponse",
    "BadRequestDetails",
    "AddUserToOrgRequest",
    "BadCreateOrgRequest",
    "BadFetchOrgQuery",
    "BadFetchUsersInOrgQuery",
    "BadUpdateOrgRequest",
    "ChangeUserRoleInOrgRequest",
    "CreateOrgRequest",
    "CreateOrgResponse",
    "FetchOrgBasicResponse",
    "FetchOrgResponse",
    "FetchOrgsByQueryParams",
    "FetchOrgsResponse",
    "FetchUsersInOrgParams",
    "RemoveUserFromOrgRequest",
    "UpdateOrgRequest",
    "BadCreateMagicLinkRequest",
    "BadCreateUserRequest",
    "BadFetchUsersBatchQuery",
    "BadFetchUsersByQuery",
    "BadMigrateUserRequest",
    "BadUpdatePasswordRequest",
    "BadUpdateUserEmailRequest",
    "BadUpdateUserMetadataRequest",
    "CreatedUserResponse",
    "CreateMagicLinkRequest",
    "CreateUserRequest",
    "FetchUserByEmailParams",
    "FetchUserByIdParams",
    "FetchUserByUsernameParams",
    "FetchUsersByEmailsParams",
    "FetchUsersByIdsParams",
    "FetchUsersByQueryParams",
    "FetchUsersByUsernamesParams",
    "MagicLink",
    "MigrateUserRequest",
    "OrgMemberInfo",
    "UpdateEmailRequest",
    "UpdatePasswordRequest",
    "UpdateUserMetadataRequest",
    "UserMetadata",
    "UserPagedResponse",
]
