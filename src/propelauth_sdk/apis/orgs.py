"""Endpoint bindings for ``/api/backend/v1/org`` routes."""

from __future__ import annotations

from ..config import Configuration
from ..http_client import HttpClient, decode, dump_body, path_segment
from ..models.org import (
    AddUserToOrgRequest,
    BadCreateOrgRequest,
    BadFetchOrgQuery,
    BadFetchUsersInOrgQuery,
    BadUpdateOrgRequest,
    ChangeUserRoleInOrgRequest,
    CreateOrgRequest,
    CreateOrgResponse,
    FetchOrgResponse,
    FetchOrgsByQueryParams,
    FetchOrgsResponse,
    FetchUsersInOrgParams,
    RemoveUserFromOrgRequest,
    UpdateOrgRequest,
)
from ..models.user import UserPagedResponse


async def fetch_org(config: Configuration, org_id: str) -> FetchOrgResponse:
    resp = await HttpClient(config).get(f"org/{path_segment(org_id)}")
    return decode(resp, FetchOrgResponse)


async def fetch_orgs_by_query(
    config: Configuration, params: FetchOrgsByQueryParams
) -> FetchOrgsResponse:
    resp = await HttpClient(config).post(
        "org/query",
        json=dump_body(params),
        error_models={400: BadFetchOrgQuery},
    )
    return decode(resp, FetchOrgsResponse)


async def fetch_users_in_org(
    config: Configuration, params: FetchUsersInOrgParams
) -> UserPagedResponse:
    query = params.model_dump(exclude_none=True, exclude={"org_id"})
    resp = await HttpClient(config).get(
        f"user/org/{path_segment(params.org_id)}",
        params=query,
        error_models={400: BadFetchUsersInOrgQuery},
    )
    return decode(resp, UserPagedResponse)


async def add_user_to_org(config: Configuration, request: AddUserToOrgRequest) -> None:
    await HttpClient(config).post("org/add_user", json=dump_body(request))


async def change_user_role_in_org(
    config: Configuration, request: ChangeUserRoleInOrgRequest
) -> None:
    await HttpClient(config).post("org/change_role", json=dump_body(request))


async def remove_user_from_org(config: Configuration, request: RemoveUserFromOrgRequest) -> None:
    await HttpClient(config).post("org/remove_user", json=dump_body(request))


async def create_org(config: Configuration, request: CreateOrgRequest) -> CreateOrgResponse:
    resp = await HttpClient(config).post(
        "org/",
        json=dump_body(request),
        error_models={400: BadCreateOrgRequest},
    )
    return decode(resp, CreateOrgResponse)


async def update_org(config: Configuration, org_id: str, request: UpdateOrgRequest) -> None:
    await HttpClient(config).put(
        f"org/{path_segment(org_id)}",
        json=dump_body(request),
        error_models={400: BadUpdateOrgRequest},
    )


async def allow_org_to_enable_saml(config: Configuration, org_id: str) -> None:
    await HttpClient(config).post(f"org/{path_segment(org_id)}/allow_saml")


async def disallow_saml(config: Configuration, org_id: str) -> None:
    await HttpClient(config).post(f"org/{path_segment(org_id)}/disallow_saml")
