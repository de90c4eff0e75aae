"""Service facade for PropelAuth users."""

from __future__ import annotations

from ..apis import users as api
from ..config import Configuration
from ..error_mapping import error_table, flatten_reasons, index_by, translate_errors
from ..errors import (
    BadRequestError,
    EmailSentTooRecentlyError,
    InvalidApiKeyError,
    NotFoundError,
)
from ..models.user import (
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
    UpdateEmailRequest,
    UpdatePasswordRequest,
    UpdateUserMetadataRequest,
    UserMetadata,
    UserPagedResponse,
)
from ..utils.guid import is_valid_id


def _batch_bad_request(details: BadFetchUsersBatchQuery) -> BadRequestError:
    return BadRequestError(flatten_reasons(details.query))


_NOT_FOUND_ERRORS = error_table({401: InvalidApiKeyError, 404: NotFoundError})
_BATCH_ERRORS = error_table(
    {401: InvalidApiKeyError},
    bad_request=_batch_bad_request,
    entity_type=BadFetchUsersBatchQuery,
)
_QUERY_ERRORS = error_table(
    {401: InvalidApiKeyError}, bad_request=BadRequestError, entity_type=BadFetchUsersByQuery
)
_CREATE_ERRORS = error_table(
    {401: InvalidApiKeyError}, bad_request=BadRequestError, entity_type=BadCreateUserRequest
)
_METADATA_ERRORS = error_table(
    {401: InvalidApiKeyError, 404: NotFoundError},
    bad_request=BadRequestError,
    entity_type=BadUpdateUserMetadataRequest,
)
_EMAIL_ERRORS = error_table(
    {401: InvalidApiKeyError, 404: NotFoundError, 429: EmailSentTooRecentlyError},
    bad_request=BadRequestError,
    entity_type=BadUpdateUserEmailRequest,
)
_PASSWORD_ERRORS = error_table(
    {401: InvalidApiKeyError, 404: NotFoundError},
    bad_request=BadRequestError,
    entity_type=BadUpdatePasswordRequest,
)
_MIGRATE_ERRORS = error_table(
    {401: InvalidApiKeyError}, bad_request=BadRequestError, entity_type=BadMigrateUserRequest
)
_MAGIC_LINK_ERRORS = error_table(
    {401: InvalidApiKeyError}, bad_request=BadRequestError, entity_type=BadCreateMagicLinkRequest
)


class UserService:
    """User lookups and lifecycle operations.

    Operations that take a single user ID raise :class:`NotFoundError` for a
    malformed ID without contacting the API.
    """

    def __init__(self, config: Configuration) -> None:
        self.config = config

    async def fetch_user_by_email(self, params: FetchUserByEmailParams) -> UserMetadata:
        return await translate_errors(api.fetch_user_by_email(self.config, params), _NOT_FOUND_ERRORS)

    async def fetch_user_by_id(self, params: FetchUserByIdParams) -> UserMetadata:
        if not is_valid_id(params.user_id):
            raise NotFoundError()
        return await translate_errors(api.fetch_user_by_id(self.config, params), _NOT_FOUND_ERRORS)

    async def fetch_user_by_username(self, params: FetchUserByUsernameParams) -> UserMetadata:
        return await translate_errors(
            api.fetch_user_by_username(self.config, params), _NOT_FOUND_ERRORS
        )

    async def fetch_users_by_ids(self, params: FetchUsersByIdsParams) -> dict[str, UserMetadata]:
        """Fetch many users at once, keyed by user ID."""

        users = await translate_errors(api.fetch_users_by_ids(self.config, params), _BATCH_ERRORS)
        return index_by(users, lambda user: user.user_id)

    async def fetch_users_by_emails(
        self, params: FetchUsersByEmailsParams
    ) -> dict[str, UserMetadata]:
        """Fetch many users at once, keyed by email."""

        users = await translate_errors(api.fetch_users_by_emails(self.config, params), _BATCH_ERRORS)
        return index_by(users, lambda user: user.email)

    async def fetch_users_by_usernames(
        self, params: FetchUsersByUsernamesParams
    ) -> dict[str, UserMetadata]:
        """Fetch many users at once, keyed by username.

        Users without a username are left out of the mapping.
        """

        users = await translate_errors(
            api.fetch_users_by_usernames(self.config, params), _BATCH_ERRORS
        )
        return index_by(users, lambda user: user.username)

    async def fetch_users_by_query(self, params: FetchUsersByQueryParams) -> UserPagedResponse:
        return await translate_errors(api.fetch_users_by_query(self.config, params), _QUERY_ERRORS)

    async def create_user(self, request: CreateUserRequest) -> CreatedUserResponse:
        return await translate_errors(api.create_user(self.config, request), _CREATE_ERRORS)

    async def delete_user(self, user_id: str) -> None:
        if not is_valid_id(user_id):
            raise NotFoundError()
        await translate_errors(api.delete_user(self.config, user_id), _NOT_FOUND_ERRORS)

    async def disable_user(self, user_id: str) -> None:
        if not is_valid_id(user_id):
            raise NotFoundError()
        await translate_errors(api.disable_user(self.config, user_id), _NOT_FOUND_ERRORS)

    async def enable_user(self, user_id: str) -> None:
        if not is_valid_id(user_id):
            raise NotFoundError()
        await translate_errors(api.enable_user(self.config, user_id), _NOT_FOUND_ERRORS)

    async def update_user_metadata(self, user_id: str, request: UpdateUserMetadataRequest) -> None:
        if not is_valid_id(user_id):
            raise NotFoundError()
        await translate_errors(
            api.update_user_metadata(self.config, user_id, request), _METADATA_ERRORS
        )

    async def update_user_email(self, user_id: str, request: UpdateEmailRequest) -> None:
        """Change a user's email address.

        Raises:
            EmailSentTooRecentlyError: A confirmation email went out moments ago.
        """

        if not is_valid_id(user_id):
            raise NotFoundError()
        await translate_errors(api.update_user_email(self.config, user_id, request), _EMAIL_ERRORS)

    async def update_user_password(self, user_id: str, request: UpdatePasswordRequest) -> None:
        if not is_valid_id(user_id):
            raise NotFoundError()
        await translate_errors(
            api.update_user_password(self.config, user_id, request), _PASSWORD_ERRORS
        )

    async def disable_user_2fa(self, user_id: str) -> None:
        if not is_valid_id(user_id):
            raise NotFoundError()
        await translate_errors(api.disable_user_2fa(self.config, user_id), _NOT_FOUND_ERRORS)

    async def migrate_user(self, request: MigrateUserRequest) -> CreatedUserResponse:
        """Import a user from an existing identity store."""

        return await translate_errors(api.migrate_user(self.config, request), _MIGRATE_ERRORS)

    async def create_magic_link(self, request: CreateMagicLinkRequest) -> MagicLink:
        return await translate_errors(api.create_magic_link(self.config, request), _MAGIC_LINK_ERRORS)


__all__ = ["UserService"]
