import json

import pytest

from mailru_oauth import main as cli
from mailru_oauth.api import MailRuClient
from mailru_oauth.config import Settings
from mailru_oauth.main import create_client

from .fakes import FakeTransport


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        mailru_app_id="APP_ID",
        mailru_app_secret="APP_SECRET",
        mailru_secret_key="APP_SERVER_KEY",
        mailru_redirect_uri="REDIRECT_URI",
        mailru_scope="PERMISSIONS",
        log_file=str(tmp_path / "logs" / "test.log"),
    )


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture(autouse=True)
def patch_cli(monkeypatch: pytest.MonkeyPatch, settings: Settings, fake_transport: FakeTransport) -> None:
    monkeypatch.setattr(cli, "get_settings", lambda: settings)
    monkeypatch.setattr(
        cli,
        "create_client",
        lambda s=None: MailRuClient(settings.client_config(), transport=fake_transport),
    )


class TestMain:
    def test_dialog_url(self, capsys) -> None:
        assert cli.main(["dialog-url"]) == 0
        assert capsys.readouterr().out.strip().startswith("https://connect.mail.ru/oauth/authorize?")

    def test_token(self, capsys, fake_transport: FakeTransport) -> None:
        fake_transport.body = '{"access_token":"T","expires_in":43200,"x_mailru_vid":"6492"}'

        assert cli.main(["token", "http://REDIRECT_URI?code=abc"]) == 0
        assert json.loads(capsys.readouterr().out) == {
            "access_token": "T",
            "expires_in": 43200,
            "user_id": "6492",
        }

    def test_user(self, capsys, fake_transport: FakeTransport) -> None:
        fake_transport.body = '[{"uid": "6492", "first_name": "Евгений", "last_name": "Маслов"}]'

        assert cli.main(["user", "6492"]) == 0
        assert json.loads(capsys.readouterr().out)["display_name"] == "Евгений Маслов"

    def test_invalid_uid(self, fake_transport: FakeTransport) -> None:
        assert cli.main(["user", "abc"]) == 1
        assert fake_transport.requested_urls == []

    def test_missing_code(self, fake_transport: FakeTransport) -> None:
        assert cli.main(["token", "http://REDIRECT_URI?error=kek"]) == 1
        assert fake_transport.requested_urls == []

    def test_transport_error(self) -> None:
        assert cli.main(["user", "6492"]) == 1

    def test_missing_app_id(self, monkeypatch: pytest.MonkeyPatch, fake_transport: FakeTransport) -> None:
        monkeypatch.delenv("MAILRU_APP_ID", raising=False)
        monkeypatch.setattr(cli, "get_settings", lambda: Settings(_env_file=None))

        assert cli.main(["dialog-url"]) == 1
        assert fake_transport.requested_urls == []


class TestCreateClient:
    def test_uses_settings(self, settings: Settings) -> None:
        client = create_client(settings)
        assert client.config == settings.client_config()
        client.close()
