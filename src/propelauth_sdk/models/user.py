"""Typed models for the PropelAuth user APIs."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .common import BadRequestDetails


class OrgMemberInfo(BaseModel):
    """Membership of a user inside one organization."""

    org_id: str
    org_name: str | None = None
    url_safe_org_name: str | None = None
    user_role: str | None = None
    inherited_user_roles_plus_current_role: list[str] = Field(default_factory=list)
    user_permissions: list[str] = Field(default_factory=list)
    org_metadata: dict[str, Any] | None = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class UserMetadata(BaseModel):
    """A PropelAuth user record."""

    user_id: str
    email: str
    email_confirmed: bool = False
    has_password: bool = False
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    picture_url: str | None = None
    locked: bool = False
    enabled: bool = True
    mfa_enabled: bool = False
    can_create_orgs: bool = False
    created_at: int | None = None
    last_active_at: int | None = None
    org_id_to_org_info: dict[str, OrgMemberInfo] | None = None
    legacy_user_id: str | None = None
    metadata: dict[str, Any] | None = None
    properties: dict[str, Any] | None = None
    update_password_required: bool | None = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class UserPagedResponse(BaseModel):
    """One page of users."""

    users: list[UserMetadata] = Field(default_factory=list)
    total_users: int = 0
    current_page: int = 0
    page_size: int = 10
    has_more_results: bool = False

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class FetchUserByIdParams(BaseModel):
    user_id: str
    include_orgs: bool | None = None

    model_config = ConfigDict(populate_by_name=True)


class FetchUserByEmailParams(BaseModel):
    email: str
    include_orgs: bool | None = None

    model_config = ConfigDict(populate_by_name=True)


class FetchUserByUsernameParams(BaseModel):
    username: str
    include_orgs: bool | None = None

    model_config = ConfigDict(populate_by_name=True)


class FetchUsersByIdsParams(BaseModel):
    user_ids: list[str]
    include_orgs: bool | None = None

    model_config = ConfigDict(populate_by_name=True)


class FetchUsersByEmailsParams(BaseModel):
    emails: list[str]
    include_orgs: bool | None = None

    model_config = ConfigDict(populate_by_name=True)


class FetchUsersByUsernamesParams(BaseModel):
    usernames: list[str]
    include_orgs: bool | None = None

    model_config = ConfigDict(populate_by_name=True)


class FetchUsersByQueryParams(BaseModel):
    """Filters and pagination for the user query endpoint."""

    page_size: int | None = None
    page_number: int | None = None
    order_by: str | None = None
    email_or_username: str | None = None
    include_orgs: bool | None = None
    legacy_user_id: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class CreateUserRequest(BaseModel):
    email: str
    email_confirmed: bool | None = None
    send_email_to_confirm_email_address: bool | None = None
    ask_user_to_update_password_on_login: bool | None = None
    password: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    properties: dict[str, Any] | None = None

    model_config = ConfigDict(populate_by_name=True)


class CreatedUserResponse(BaseModel):
    user_id: str

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class UpdateUserMetadataRequest(BaseModel):
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    picture_url: str | None = None
    metadata: dict[str, Any] | None = None
    properties: dict[str, Any] | None = None
    update_password_required: bool | None = None

    model_config = ConfigDict(populate_by_name=True)


class UpdateEmailRequest(BaseModel):
    new_email: str
    require_email_confirmation: bool

    model_config = ConfigDict(populate_by_name=True)


class UpdatePasswordRequest(BaseModel):
    password: str | None = None
    ask_user_to_update_password_on_login: bool | None = None

    model_config = ConfigDict(populate_by_name=True)


class MigrateUserRequest(BaseModel):
    """Import a user from another identity provider."""

    email: str
    email_confirmed: bool
    existing_user_id: str | None = None
    existing_password_hash: str | None = None
    existing_mfa_base32_encoded_secret: str | None = None
    ask_user_to_update_password_on_login: bool | None = None
    enabled: bool | None = None
    first_name: str | None = None
    last_name: str | None = None
    username: str | None = None
    properties: dict[str, Any] | None = None

    model_config = ConfigDict(populate_by_name=True)


class CreateMagicLinkRequest(BaseModel):
    email: str
    redirect_to_url: str | None = None
    expires_in_hours: int | None = None
    create_new_user_if_one_doesnt_exist: bool | None = None
    user_signup_query_parameters: dict[str, str] | None = None

    model_config = ConfigDict(populate_by_name=True)


class MagicLink(BaseModel):
    url: str

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class BadFetchUsersByQuery(BadRequestDetails):
    page_size: list[str] | None = None
    page_number: list[str] | None = None
    order_by: list[str] | None = None
    email_or_username: list[str] | None = None


class BadFetchUsersBatchQuery(BadRequestDetails):
    """Validation failure for the by-ids, by-emails and by-usernames lookups."""

    query: list[str] | None = None


class BadCreateUserRequest(BadRequestDetails):
    email: list[str] | None = None
    password: list[str] | None = None
    username: list[str] | None = None
    first_name: list[str] | None = None
    last_name: list[str] | None = None
    properties: list[str] | None = None


class BadUpdateUserMetadataRequest(BadRequestDetails):
    username: list[str] | None = None
    first_name: list[str] | None = None
    last_name: list[str] | None = None
    picture_url: list[str] | None = None
    metadata: list[str] | None = None
    properties: list[str] | None = None


class BadUpdateUserEmailRequest(BadRequestDetails):
    new_email: list[str] | None = None


class BadUpdatePasswordRequest(BadRequestDetails):
    password: list[str] | None = None


class BadMigrateUserRequest(BadRequestDetails):
    email: list[str] | None = None
    existing_password_hash: list[str] | None = None
    existing_mfa_base32_encoded_secret: list[str] | None = None
    username: list[str] | None = None
    first_name: list[str] | None = None
    last_name: list[str] | None = None
    properties: list[str] | None = None


class BadCreateMagicLinkRequest(BadRequestDetails):
    email: list[str] | None = None
    redirect_to_url: list[str] | None = None
    expires_in_hours: list[str] | None = None


__all__ = [
    "OrgMemberInfo",
    "UserMetadata",
    "UserPagedResponse",
    "FetchUserByIdParams",
    "FetchUserByEmailParams",
    "FetchUserByUsernameParams",
    "FetchUsersByIdsParams",
    "FetchUsersByEmailsParams",
    "FetchUsersByUsernamesParams",
    "FetchUsersByQueryParams",
    "CreateUserRequest",
    "CreatedUserResponse",
    "UpdateUserMetadataRequest",
    "UpdateEmailRequest",
    "UpdatePasswordRequest",
    "MigrateUserRequest",
    "CreateMagicLinkRequest",
    "MagicLink",
    "BadFetchUsersByQuery",
    "BadFetchUsersBatchQuery",
    "BadCreateUserRequest",
    "BadUpdateUserMetadataRequest",
    "BadUpdateUserEmailRequest",
    "BadUpdatePasswordRequest",
    "BadMigrateUserRequest",
    "BadCreateMagicLinkRequest",
]
