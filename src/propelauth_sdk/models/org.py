"""Typed models for the PropelAuth organization APIs."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .common import BadRequestDetails


class FetchOrgResponse(BaseModel):
    """Full organization record."""

    org_id: str
    name: str
    url_safe_org_slug: str | None = None
    can_setup_saml: bool = False
    is_saml_configured: bool = False
    max_users: int | None = None
    metadata: dict[str, Any] | None = None
    domain: str | None = None
    legacy_org_id: str | None = None
    custom_role_mapping_name: str | None = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class FetchOrgBasicResponse(BaseModel):
    org_id: str
    name: str
    max_users: int | None = None
    is_saml_configured: bool = False
    metadata: dict[str, Any] | None = None

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class FetchOrgsResponse(BaseModel):
    """One page of organizations."""

    orgs: list[FetchOrgBasicResponse] = Field(default_factory=list)
    total_orgs: int = 0
    current_page: int = 0
    page_size: int = 10
    has_more_results: bool = False

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class FetchOrgsByQueryParams(BaseModel):
    page_size: int | None = None
    page_number: int | None = None
    order_by: str | None = None
    name: str | None = None
    legacy_org_id: str | None = None
    domain: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class FetchUsersInOrgParams(BaseModel):
    """Org identifier plus pagination for listing members."""

    org_id: str
    page_size: int | None = None
    page_number: int | None = None
    include_orgs: bool | None = None
    role: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class AddUserToOrgRequest(BaseModel):
    user_id: str
    org_id: str
    role: str
    additional_roles: list[str] | None = None

    model_config = ConfigDict(populate_by_name=True)


class ChangeUserRoleInOrgRequest(BaseModel):
    user_id: str
    org_id: str
    role: str
    additional_roles: list[str] | None = None

    model_config = ConfigDict(populate_by_name=True)


class RemoveUserFromOrgRequest(BaseModel):
    user_id: str
    org_id: str

    model_config = ConfigDict(populate_by_name=True)


class CreateOrgRequest(BaseModel):
    name: str
    enable_auto_joining_by_domain: bool | None = None
    members_must_have_matching_domain: bool | None = None
    domain: str | None = None
    max_users: int | None = None
    legacy_org_id: str | None = None
    custom_role_mapping_name: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class CreateOrgResponse(BaseModel):
    org_id: str
    name: str

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class UpdateOrgRequest(BaseModel):
    name: str | None = None
    can_setup_saml: bool | None = None
    metadata: dict[str, Any] | None = None
    max_users: int | None = None
    can_join_on_email_domain_match: bool | None = None
    members_must_have_email_domain_match: bool | None = None
    domain: str | None = None
    legacy_org_id: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class BadFetchOrgQuery(BadRequestDetails):
    page_size: list[str] | None = None
    page_number: list[str] | None = None
    order_by: list[str] | None = None
    name: list[str] | None = None
    domain: list[str] | None = None


class BadFetchUsersInOrgQuery(BadRequestDetails):
    page_size: list[str] | None = None
    page_number: list[str] | None = None
    role: list[str] | None = None


class BadCreateOrgRequest(BadRequestDetails):
    name: list[str] | None = None
    domain: list[str] | None = None
    max_users: list[str] | None = None
    legacy_org_id: list[str] | None = None


class BadUpdateOrgRequest(BadRequestDetails):
    name: list[str] | None = None
    domain: list[str] | None = None
    max_users: list[str] | None = None
    metadata: list[str] | None = None
    legacy_org_id: list[str] | None = None


__all__ = [
    "FetchOrgResponse",
    "FetchOrgBasicResponse",
    "FetchOrgsResponse",
    "FetchOrgsByQueryParams",
    "FetchUsersInOrgParams",
    "AddUserToOrgRequest",
    "ChangeUserRoleInOrgRequest",
    "RemoveUserFromOrgRequest",
    "CreateOrgRequest",
    "CreateOrgResponse",
    "UpdateOrgRequest",
    "BadFetchOrgQuery",
    "BadFetchUsersInOrgQuery",
    "BadCreateOrgRequest",
    "BadUpdateOrgRequest",
]
