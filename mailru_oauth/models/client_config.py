from dataclasses import dataclass


@dataclass(frozen=True)
class ClientConfig:
    app_id: str
    app_secret: str
    signing_secret: str
    redirect_uri: str
    scope: str = ""

    def __repr__(self) -> str:
        return (
            f"ClientConfig(app_id={self.app_id!r}, redirect_uri={self.redirect_uri!r}, "
            f"scope={self.scope!r})"
        )
