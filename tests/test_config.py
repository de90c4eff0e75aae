from __future__ import annotations

import pytest

from propelauth_sdk.config import ENV_API_KEY, ENV_AUTH_URL, ENV_TIMEOUT, Configuration
from propelauth_sdk.errors import ConfigurationError


def test_base_url_appends_backend_prefix() -> None:
    config = Configuration(auth_url="https://auth.example.com/", api_key="secret")

    assert config.base_url == "https://auth.example.com/api/backend/v1"


def test_repr_masks_api_key() -> None:
    config = Configuration(auth_url="https://auth.example.com", api_key="super-secret")  # nosec B106

    assert "super-secret" not in repr(config)


def test_configuration_is_frozen() -> None:
    config = Configuration(auth_url="https://auth.example.com", api_key="secret")

    with pytest.raises(AttributeError):
        config.api_key = "other"  # type: ignore[misc]


@pytest.mark.parametrize("auth_url", ["auth.example.com", "ftp://auth.example.com", "https://"])
def test_rejects_invalid_auth_url(auth_url: str) -> None:
    with pytest.raises(ConfigurationError):
        Configuration(auth_url=auth_url, api_key="secret")


def test_rejects_blank_api_key() -> None:
    with pytest.raises(ConfigurationError):
        Configuration(auth_url="https://auth.example.com", api_key="  ")


def test_from_env_reads_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_AUTH_URL, "https://auth.example.com")
    monkeypatch.setenv(ENV_API_KEY, "env-key")
    monkeypatch.setenv(ENV_TIMEOUT, "12.5")

    config = Configuration.from_env()

    assert config.auth_url == "https://auth.example.com"
    assert config.api_key == "env-key"
    assert config.timeout == 12.5
    assert config.http_client is None


def test_from_env_requires_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_AUTH_URL, "https://auth.example.com")
    monkeypatch.delenv(ENV_API_KEY, raising=False)

    with pytest.raises(ConfigurationError, match=ENV_API_KEY):
        Configuration.from_env()


def test_from_env_rejects_non_numeric_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_AUTH_URL, "https://auth.example.com")
    monkeypatch.setenv(ENV_API_KEY, "env-key")
    monkeypatch.setenv(ENV_TIMEOUT, "soon")

    with pytest.raises(ConfigurationError, match=ENV_TIMEOUT):
        Configuration.from_env()
