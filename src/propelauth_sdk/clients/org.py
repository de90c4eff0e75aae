"""Service facade for PropelAuth organizations."""

from __future__ import annotations

from ..apis import orgs as api
from ..config import Configuration
from ..error_mapping import error_table, translate_errors
from ..errors import (
    BadRequestError,
    InvalidApiKeyError,
    NotFoundError,
    UnknownRoleError,
)
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
from ..utils.guid import is_valid_id

_NOT_FOUND_ERRORS = error_table({401: InvalidApiKeyError, 404: NotFoundError})
_ROLE_ERRORS = error_table(
    {400: UnknownRoleError, 401: InvalidApiKeyError, 404: NotFoundError}
)
_QUERY_ERRORS = error_table(
    {401: InvalidApiKeyError}, bad_request=BadRequestError, entity_type=BadFetchOrgQuery
)
_USERS_IN_ORG_ERRORS = error_table(
    {401: InvalidApiKeyError}, bad_request=BadRequestError, entity_type=BadFetchUsersInOrgQuery
)
_CREATE_ERRORS = error_table(
    {401: InvalidApiKeyError}, bad_request=BadRequestError, entity_type=BadCreateOrgRequest
)
_UPDATE_ERRORS = error_table(
    {401: InvalidApiKeyError, 404: NotFoundError},
    bad_request=BadRequestError,
    entity_type=BadUpdateOrgRequest,
)


class OrgService:
    """Organization lifecycle and membership operations."""

    def __init__(self, config: Configuration) -> None:
        self.config = config

    async def fetch_org(self, org_id: str) -> FetchOrgResponse:
        """Fetch an organization by its identifier."""

        if not is_valid_id(org_id):
            raise NotFoundError()
        return await translate_errors(api.fetch_org(self.config, org_id), _NOT_FOUND_ERRORS)

    async def fetch_orgs_by_query(self, params: FetchOrgsByQueryParams) -> FetchOrgsResponse:
        """Fetch and page over organizations."""

        return await translate_errors(api.fetch_orgs_by_query(self.config, params), _QUERY_ERRORS)

    async def fetch_users_in_org(self, params: FetchUsersInOrgParams) -> UserPagedResponse:
        """Page over the members of an organization.

        A malformed ``org_id`` cannot have members, so an empty page is returned
        without calling the API.
        """

        if not is_valid_id(params.org_id):
            return UserPagedResponse()
        return await translate_errors(
            api.fetch_users_in_org(self.config, params), _USERS_IN_ORG_ERRORS
        )

    async def add_user_to_org(self, request: AddUserToOrgRequest) -> None:
        await translate_errors(api.add_user_to_org(self.config, request), _ROLE_ERRORS)

    async def change_user_role_in_org(self, request: ChangeUserRoleInOrgRequest) -> None:
        await translate_errors(api.change_user_role_in_org(self.config, request), _ROLE_ERRORS)

    async def remove_user_from_org(self, request: RemoveUserFromOrgRequest) -> None:
        await translate_errors(api.remove_user_from_org(self.config, request), _NOT_FOUND_ERRORS)

    async def create_org(self, request: CreateOrgRequest) -> CreateOrgResponse:
        return await translate_errors(api.create_org(self.config, request), _CREATE_ERRORS)

    async def update_org(self, org_id: str, request: UpdateOrgRequest) -> None:
        if not is_valid_id(org_id):
            raise NotFoundError()
        await translate_errors(api.update_org(self.config, org_id, request), _UPDATE_ERRORS)

    async def allow_org_to_enable_saml(self, org_id: str) -> None:
        """Let the organization's admins configure SAML."""

        if not is_valid_id(org_id):
            raise NotFoundError()
        await translate_errors(api.allow_org_to_enable_saml(self.config, org_id), _NOT_FOUND_ERRORS)

    async def disallow_saml(self, org_id: str) -> None:
        if not is_valid_id(org_id):
            raise NotFoundError()
        await translate_errors(api.disallow_saml(self.config, org_id), _NOT_FOUND_ERRORS)


__all__ = ["OrgService"]
