import pytest

from mailru_oauth.api import MailRuClient
from mailru_oauth.models import ClientConfig

from .fakes import FakeTransport


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(
        app_id="APP_ID",
        app_secret="APP_SECRET",
        signing_secret="APP_SERVER_KEY",
        redirect_uri="REDIRECT_URI",
        scope="PERMISSIONS",
    )


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(config: ClientConfig, transport: FakeTransport) -> MailRuClient:
    return MailRuClient(config, transport=transport)
