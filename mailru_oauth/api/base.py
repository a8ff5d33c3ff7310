from typing import Protocol, runtime_checkable


@runtime_checkable
class HTTPTransport(Protocol):
    def get(self, url: str) -> str:
        """
        Выполнить GET-запрос и вернуть тело ответа.

        Raises:
            TransportError: При сетевой ошибке или неуспешном HTTP-статусе
        """
        ...
