import pytest
from pydantic import ValidationError

from mailru_oauth.config import Settings


@pytest.fixture
def mailru_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAILRU_APP_ID", "423004")
    monkeypatch.setenv("MAILRU_APP_SECRET", "app-secret")
    monkeypatch.setenv("MAILRU_SECRET_KEY", "signing-key")
    monkeypatch.setenv("MAILRU_REDIRECT_URI", "https://example.com/cb")
    monkeypatch.setenv("MAILRU_SCOPE", "photos")


class TestSettings:
    def test_from_env(self, mailru_env) -> None:
        settings = Settings(_env_file=None)

        config = settings.client_config()

        assert config.app_id == "423004"
        assert config.app_secret == "app-secret"
        assert config.signing_secret == "signing-key"
        assert config.redirect_uri == "https://example.com/cb"
        assert config.scope == "photos"
        assert settings.http_timeout == 30.0

    def test_app_id_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("MAILRU_APP_ID", raising=False)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)
