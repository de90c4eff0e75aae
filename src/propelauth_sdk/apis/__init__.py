"""Raw endpoint bindings: one coroutine per backend API operation.

Bindings raise :class:`~propelauth_sdk.errors.TransportError` subclasses; the
service facades in :mod:`propelauth_sdk.clients` translate them.
"""

from . import api_keys as api_keys
from . import orgs as orgs
from . import users as users

__all__ = ["api_keys", "orgs", "users"]
