from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models import ClientConfig


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    mailru_app_id: str
    mailru_app_secret: str = ""
    mailru_secret_key: str = ""
    mailru_redirect_uri: str = ""
    mailru_scope: str = ""

    http_timeout: float = 30.0

    log_file: str = "logs/mailru_oauth.log"
    log_level: str = "INFO"

    def client_config(self) -> ClientConfig:
        return ClientConfig(
            app_id=self.mailru_app_id,
            app_secret=self.mailru_app_secret,
            signing_secret=self.mailru_secret_key,
            redirect_uri=self.mailru_redirect_uri,
            scope=self.mailru_scope,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
