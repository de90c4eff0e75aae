from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from .models.common import BadRequestDetails


class PropelAuthError(Exception):
    """Base error for the PropelAuth SDK."""

    default_message = "PropelAuth request failed"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class ConfigurationError(PropelAuthError, ValueError):
    """Raised when SDK settings are missing or malformed."""


class UnexpectedError(PropelAuthError):
    default_message = "Unexpected exception while calling PropelAuth"


class InvalidApiKeyError(PropelAuthError):
    """The backend integration API key was rejected (HTTP 401)."""

    default_message = "Invalid backend API key"


class NotFoundError(PropelAuthError):
    default_message = "Not found"


class BadRequestError(PropelAuthError):
    """The request was rejected; ``details`` keeps the validation reasons."""

    def __init__(self, details: BadRequestDetails | str) -> None:
        self.details = details
        if isinstance(details, str):
            super().__init__(f"Bad request: {details}")
        else:
            super().__init__(f"Bad request: {', '.join(details.reasons()) or 'invalid request'}")


class UnknownRoleError(PropelAuthError):
    default_message = "Unknown role"


class EmailSentTooRecentlyError(PropelAuthError):
    default_message = "A confirmation email was sent too recently"


class InvalidEndUserApiKeyError(PropelAuthError):
    """The end-user API key referenced by the request does not exist."""

    default_message = "Invalid API key"


class InvalidPersonalApiKeyError(PropelAuthError):
    default_message = "API key is not a personal API key"


class InvalidOrgApiKeyError(PropelAuthError):
    default_message = "API key is not an organization API key"


class TransportError(Exception):
    """Base failure raised by the endpoint bindings."""


class ConnectorError(TransportError):
    """No usable response: network failure or an undecodable response body."""


class ResponseError(TransportError):
    def __init__(
        self,
        status_code: int,
        *,
        entity: Any | None = None,
        content: str = "",
    ) -> None:
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code
        self.entity = entity
        self.content = content


__all__ = [
    "PropelAuthError",
    "ConfigurationError",
    "UnexpectedError",
    "InvalidApiKeyError",
    "NotFoundError",
    "BadRequestError",
    "UnknownRoleError",
    "EmailSentTooRecentlyError",
    "InvalidEndUserApiKeyError",
    "InvalidPersonalApiKeyError",
    "InvalidOrgApiKeyError",
    "TransportError",
    "ConnectorError",
    "ResponseError",
]
