from __future__ import annotations

from dataclasses import replace

import httpx
import pytest

from propelauth_sdk import PropelAuthClient
from propelauth_sdk.clients import ApiKeyService, OrgService, UserService
from propelauth_sdk.errors import ConfigurationError, UnexpectedError
from propelauth_sdk.models.user import FetchUserByIdParams

USER_ID = "9b2d0c1e-8f0a-4c2b-9f3e-1a2b3c4d5e6f"


@pytest.mark.asyncio
async def test_services_share_configuration() -> None:
    async with PropelAuthClient("https://auth.example.com", "key") as client:
        assert isinstance(client.user, UserService)
        assert isinstance(client.org, OrgService)
        assert isinstance(client.api_key, ApiKeyService)
        assert client.user.config is client.config
        assert client.config.http_client is not None


@pytest.mark.asyncio
async def test_context_manager_closes_owned_client() -> None:
    client = PropelAuthClient("https://auth.example.com", "key")
    http_client = client.config.http_client

    async with client:
        pass

    assert http_client is not None
    assert http_client.is_closed


@pytest.mark.asyncio
async def test_from_config_leaves_shared_client_open(config) -> None:
    async with httpx.AsyncClient() as shared:
        client = PropelAuthClient.from_config(replace(config, http_client=shared))
        await client.aclose()

        assert not shared.is_closed


@pytest.mark.asyncio
async def test_client_round_trip(respx_mock) -> None:
    respx_mock.get(f"https://auth.example.com/api/backend/v1/user/{USER_ID}").mock(
        return_value=httpx.Response(200, json={"user_id": USER_ID, "email": "ada@example.com"})
    )

    async with PropelAuthClient("https://auth.example.com", "key") as client:
        user = await client.user.fetch_user_by_id(FetchUserByIdParams(user_id=USER_ID))

    assert user.email == "ada@example.com"


def test_invalid_settings_raise_before_opening_client() -> None:
    with pytest.raises(ConfigurationError):
        PropelAuthClient("not a url", "key")


def test_missing_credentials_without_config_raise() -> None:
    with pytest.raises(ConfigurationError):
        PropelAuthClient("https://auth.example.com")


@pytest.mark.asyncio
async def test_config_keyword_uses_given_configuration(config) -> None:
    client = PropelAuthClient(config=config)

    assert client.config is config
    await client.aclose()


@pytest.mark.asyncio
async def test_request_after_close_raises_domain_error(respx_mock) -> None:
    route = respx_mock.route(url__startswith="https://auth.example.com")
    client = PropelAuthClient("https://auth.example.com", "key")
    await client.aclose()

    with pytest.raises(UnexpectedError):
        await client.user.fetch_user_by_id(FetchUserByIdParams(user_id=USER_ID))

    assert not route.called
