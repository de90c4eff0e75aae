from .api_key import ApiKeyService as ApiKeyService
from .org import OrgService as OrgService
from .user import UserService as UserService

__all__ = [
    "ApiKeyService",
    "OrgService",
    "UserService",
]
