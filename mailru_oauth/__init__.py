from .api import (
    DecodeError,
    HTTPTransport,
    MailRuAuth,
    MailRuClient,
    MailRuError,
    MissingCodeError,
    RequestsTransport,
    TransportError,
    UnexpectedResultCountError,
)
from .models import AccessToken, ClientConfig, UserProfile

__all__ = [
    "AccessToken",
    "ClientConfig",
    "DecodeError",
    "HTTPTransport",
    "MailRuAuth",
    "MailRuClient",
    "MailRuError",
    "MissingCodeError",
    "RequestsTransport",
    "TransportError",
    "UnexpectedResultCountError",
    "UserProfile",
]
