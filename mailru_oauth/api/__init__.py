from .auth import MailRuAuth
from .base import HTTPTransport
from .client import MailRuClient
from .errors import (
    DecodeError,
    MailRuError,
    MissingCodeError,
    TransportError,
    UnexpectedResultCountError,
)
from .transport import RequestsTransport

__all__ = [
    "MailRuAuth",
    "HTTPTransport",
    "MailRuClient",
    "RequestsTransport",
    "MailRuError",
    "MissingCodeError",
    "TransportError",
    "DecodeError",
    "UnexpectedResultCountError",
]
