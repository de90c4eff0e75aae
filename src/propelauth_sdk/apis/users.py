"""Endpoint bindings for ``/api/backend/v1/user`` and related routes."""

from __future__ import annotations

from ..config import Configuration
from ..http_client import HttpClient, decode, decode_list, dump_body, path_segment
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


async def fetch_user_by_id(config: Configuration, params: FetchUserByIdParams) -> UserMetadata:
    resp = await HttpClient(config).get(
        f"user/{path_segment(params.user_id)}", params={"include_orgs": params.include_orgs}
    )
    return decode(resp, UserMetadata)


async def fetch_user_by_email(config: Configuration, params: FetchUserByEmailParams) -> UserMetadata:
    resp = await HttpClient(config).get(
        "user/email",
        params={"email": params.email, "include_orgs": params.include_orgs},
    )
    return decode(resp, UserMetadata)


async def fetch_user_by_username(
    config: Configuration, params: FetchUserByUsernameParams
) -> UserMetadata:
    resp = await HttpClient(config).get(
        "user/username",
        params={"username": params.username, "include_orgs": params.include_orgs},
    )
    return decode(resp, UserMetadata)


async def fetch_users_by_ids(
    config: Configuration, params: FetchUsersByIdsParams
) -> list[UserMetadata]:
    resp = await HttpClient(config).post(
        "user/user_ids",
        params={"include_orgs": params.include_orgs},
        json={"user_ids": params.user_ids},
        error_models={400: BadFetchUsersBatchQuery},
    )
    return decode_list(resp, UserMetadata)


async def fetch_users_by_emails(
    config: Configuration, params: FetchUsersByEmailsParams
) -> list[UserMetadata]:
    resp = await HttpClient(config).post(
        "user/emails",
        params={"include_orgs": params.include_orgs},
        json={"emails": params.emails},
        error_models={400: BadFetchUsersBatchQuery},
    )
    return decode_list(resp, UserMetadata)


async def fetch_users_by_usernames(
    config: Configuration, params: FetchUsersByUsernamesParams
) -> list[UserMetadata]:
    resp = await HttpClient(config).post(
        "user/usernames",
        params={"include_orgs": params.include_orgs},
        json={"usernames": params.usernames},
        error_models={400: BadFetchUsersBatchQuery},
    )
    return decode_list(resp, UserMetadata)


async def fetch_users_by_query(
    config: Configuration, params: FetchUsersByQueryParams
) -> UserPagedResponse:
    resp = await HttpClient(config).get(
        "user/query",
        params=params.model_dump(exclude_none=True),
        error_models={400: BadFetchUsersByQuery},
    )
    return decode(resp, UserPagedResponse)


async def create_user(config: Configuration, request: CreateUserRequest) -> CreatedUserResponse:
    resp = await HttpClient(config).post(
        "user/",
        json=dump_body(request),
        error_models={400: BadCreateUserRequest},
    )
    return decode(resp, CreatedUserResponse)


async def update_user_metadata(
    config: Configuration, user_id: str, request: UpdateUserMetadataRequest
) -> None:
    await HttpClient(config).put(
        f"user/{path_segment(user_id)}",
        json=dump_body(request),
        error_models={400: BadUpdateUserMetadataRequest},
    )


async def update_user_email(
    config: Configuration, user_id: str, request: UpdateEmailRequest
) -> None:
    await HttpClient(config).put(
        f"user/{path_segment(user_id)}/email",
        json=dump_body(request),
        error_models={400: BadUpdateUserEmailRequest},
    )


async def update_user_password(
    config: Configuration, user_id: str, request: UpdatePasswordRequest
) -> None:
    await HttpClient(config).put(
        f"user/{path_segment(user_id)}/password",
        json=dump_body(request),
        error_models={400: BadUpdatePasswordRequest},
    )


async def delete_user(config: Configuration, user_id: str) -> None:
    await HttpClient(config).delete(f"user/{path_segment(user_id)}")


async def disable_user(config: Configuration, user_id: str) -> None:
    await HttpClient(config).post(f"user/{path_segment(user_id)}/disable")


async def enable_user(config: Configuration, user_id: str) -> None:
    await HttpClient(config).post(f"user/{path_segment(user_id)}/enable")


async def disable_user_2fa(config: Configuration, user_id: str) -> None:
    await HttpClient(config).post(f"user/{path_segment(user_id)}/disable_2fa")


async def migrate_user(config: Configuration, request: MigrateUserRequest) -> CreatedUserResponse:
    resp = await HttpClient(config).post(
        "migrate_user/",
        json=dump_body(request),
        error_models={400: BadMigrateUserRequest},
    )
    return decode(resp, CreatedUserResponse)


async def create_magic_link(config: Configuration, request: CreateMagicLinkRequest) -> MagicLink:
    resp = await HttpClient(config).post(
        "magic_link",
        json=dump_body(request),
        error_models={400: BadCreateMagicLinkRequest},
    )
    return decode(resp, MagicLink)
