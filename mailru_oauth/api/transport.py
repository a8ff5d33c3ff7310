import logging
from typing import Optional
from urllib.parse import urlsplit

import requests

from .errors import TransportError

logger = logging.getLogger(__name__)


def _safe_url(url: str) -> str:
    # Query содержит client_secret и code: не попадает ни в сообщение, ни в цепочку исключений
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}{parts.path}"


class RequestsTransport:
    def __init__(
        self,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        self._timeout = timeout
        self._session = session or requests.Session()

    def get(self, url: str) -> str:
        try:
            response = self._session.get(url, timeout=self._timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            raise TransportError(f"HTTP {status} from {_safe_url(url)}") from None
        except requests.RequestException as e:
            raise TransportError(f"{type(e).__name__} while requesting {_safe_url(url)}") from None

        logger.debug(f"Response status: {response.status_code}, length: {len(response.text)}")
        return response.text

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "RequestsTransport":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
