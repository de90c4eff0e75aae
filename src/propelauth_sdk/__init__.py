"""Async service-layer SDK for the PropelAuth backend API."""

from .client import PropelAuthClient
from .clients import ApiKeyService, OrgService, UserService
from .config import Configuration
from .errors import (
    BadRequestError,
    ConfigurationError,
    EmailSentTooRecentlyError,
    InvalidApiKeyError,
    InvalidEndUserApiKeyError,
    InvalidOrgApiKeyError,
    InvalidPersonalApiKeyError,
    NotFoundError,
    PropelAuthError,
    UnexpectedError,
    UnknownRoleError,
)

__version__ = "0.1.0"

__all__ = [
    "PropelAuthClient",
    "ApiKeyService",
    "OrgService",
    "UserService",
    "Configuration",
    "BadRequestError",
    "ConfigurationError",
    "EmailSentTooRecentlyError",
    "InvalidApiKeyError",
    "InvalidEndUserApiKeyError",
    "InvalidOrgApiKeyError",
    "InvalidPersonalApiKeyError",
    "NotFoundError",
    "PropelAuthError",
    "UnexpectedError",
    "UnknownRoleError",
    "__version__",
]
