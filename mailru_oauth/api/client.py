import json
import logging
from typing import Any, Optional, Union
from urllib.parse import parse_qs, urlencode, urlsplit

from .auth import MailRuAuth
from .base import HTTPTransport
from .errors import DecodeError, MissingCodeError, UnexpectedResultCountError
from .transport import RequestsTransport
from ..models import AccessToken, ClientConfig, UserProfile

logger = logging.getLogger(__name__)

AUTH_HOST = "connect.mail.ru"
API_HOST = "www.appsmail.ru"

DIALOG_URL = f"https://{AUTH_HOST}/oauth/authorize"
ACCESS_TOKEN_URL = f"https://{AUTH_HOST}/access_token"
API_URL = f"https://{API_HOST}/platform/api"

USERS_GET_METHOD = "users.get"

# Параметры OAuth-диалога не участвуют в подписи API-запросов
_UNSIGNED_PARAMETERS = ("client_id", "redirect_uri")


def _build_url(base_url: str, params: dict) -> str:
    return f"{base_url}?{urlencode(sorted(params.items()))}"


class MailRuClient:
    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[HTTPTransport] = None,
    ):
        self._config = config
        self._auth = MailRuAuth(config.signing_secret)
        self._transport = transport if transport is not None else RequestsTransport()

    @property
    def config(self) -> ClientConfig:
        return self._config

    def dialog_url(self) -> str:
        return _build_url(DIALOG_URL, {
            "client_id": self._config.app_id,
            "redirect_uri": self._config.redirect_uri,
            "scope": self._config.scope,
            "response_type": "code",
        })

    def access_token_url(self, code: str) -> str:
        return _build_url(ACCESS_TOKEN_URL, {
            "client_id": self._config.app_id,
            "client_secret": self._config.app_secret,
            "code": code,
            "grant_type": "authorization_code",
            "redirect_uri": self._config.redirect_uri,
        })

    def signed_api_url(self, method: str, params: Optional[dict] = None) -> str:
        request_params = {
            k: v for k, v in (params or {}).items()
            if k not in _UNSIGNED_PARAMETERS
        }
        request_params["method"] = method
        return _build_url(API_URL, self._auth.sign_params(request_params))

    def users_get_url(self, uid: str) -> str:
        return self.signed_api_url(USERS_GET_METHOD, {"uids": uid})

    def get_access_token(self, redirect: Union[str, Any]) -> AccessToken:
        """
        Обмен кода авторизации из redirect-запроса на access token.

        Args:
            redirect: URL callback-запроса или объект запроса с атрибутом url

        Raises:
            MissingCodeError: В запросе нет параметра code
            TransportError: Ошибка HTTP-запроса
            DecodeError: Ответ не соответствует ожидаемому формату
        """
        redirect_url = str(getattr(redirect, "url", redirect))
        query = parse_qs(urlsplit(redirect_url).query, keep_blank_values=True)

        code = query.get("code", [""])[0]
        if not code:
            raise MissingCodeError(
                error=query.get("error", [None])[0],
                description=query.get("error_description", [None])[0],
            )

        logger.debug(f"Requesting access token for app {self._config.app_id}")
        body = self._transport.get(self.access_token_url(code))

        data = self._decode(body)
        try:
            return AccessToken.from_api(data)
        except ValueError as e:
            raise DecodeError(f"Invalid access token response: {e}") from e

    def get_user(self, uid: str) -> UserProfile:
        """
        Профиль пользователя через подписанный вызов users.get.

        Raises:
            TransportError: Ошибка HTTP-запроса
            DecodeError: Ответ не массив объектов пользователей
            UnexpectedResultCountError: В ответе не ровно один пользователь
        """
        logger.debug(f"Calling {USERS_GET_METHOD} for uid {uid}")
        body = self._transport.get(self.users_get_url(uid))

        data = self._decode(body)
        if not isinstance(data, list):
            raise DecodeError(f"Expected JSON array of users, got {type(data).__name__}")

        try:
            users = [UserProfile.from_api(item) for item in data]
        except ValueError as e:
            raise DecodeError(f"Invalid user object: {e}") from e

        if len(users) != 1:
            raise UnexpectedResultCountError(len(users))

        return users[0]

    @staticmethod
    def _decode(body: str) -> Any:
        try:
            return json.loads(body)
        except (json.JSONDecodeError, TypeError) as e:
            raise DecodeError(f"Invalid JSON response from API: {e}") from e

    def close(self) -> None:
        close = getattr(self._transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "MailRuClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
