from .client_config import ClientConfig
from .token import AccessToken
from .user import UserProfile

__all__ = ["ClientConfig", "AccessToken", "UserProfile"]
