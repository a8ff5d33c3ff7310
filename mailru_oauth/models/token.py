from dataclasses import dataclass


@dataclass
class AccessToken:
    access_token: str
    expires_in: int
    user_id: str

    def to_dict(self) -> dict:
        return {
            "access_token": self.access_token,
            "expires_in": self.expires_in,
            "user_id": self.user_id,
        }

    @classmethod
    def from_api(cls, data: dict) -> "AccessToken":
        """
        Разбор ответа /access_token.

        Raises:
            ValueError: Если ответ не объект, нет access_token или типы полей неверны
        """
        if not isinstance(data, dict):
            raise ValueError(f"Expected JSON object, got {type(data).__name__}")

        if "access_token" not in data:
            error = data.get("error")
            if error:
                description = data.get("error_description", "")
                raise ValueError(f"Token endpoint returned error: {error} {description}".strip())
            raise ValueError("Response has no access_token")

        access_token = data["access_token"]
        expires_in = data.get("expires_in")
        if expires_in is None:
            expires_in = 0
        user_id = data.get("x_mailru_vid")
        if user_id is None:
            user_id = ""

        if not isinstance(access_token, str):
            raise ValueError("access_token must be a string")
        # bool является подклассом int
        if isinstance(expires_in, bool) or not isinstance(expires_in, int):
            raise ValueError("expires_in must be an integer")
        if not isinstance(user_id, str):
            raise ValueError("x_mailru_vid must be a string")

        return cls(
            access_token=access_token,
            expires_in=expires_in,
            user_id=user_id,
        )
