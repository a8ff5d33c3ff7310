from dataclasses import dataclass

_STRING_FIELDS = ("uid", "pic", "first_name", "last_name", "email")


@dataclass
class UserProfile:
    id: str
    photo_url: str
    first_name: str
    last_name: str
    email: str
    display_name: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "photo_url": self.photo_url,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "display_name": self.display_name,
        }

    @classmethod
    def from_api(cls, data: dict) -> "UserProfile":
        if not isinstance(data, dict):
            raise ValueError(f"Expected user object, got {type(data).__name__}")

        # null в ответе равносилен отсутствующему полю
        fields = {}
        for name in _STRING_FIELDS:
            value = data.get(name)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise ValueError(f"Field {name} must be a string, got {type(value).__name__}")
            fields[name] = value

        first_name = fields["first_name"]
        last_name = fields["last_name"]

        return cls(
            id=fields["uid"],
            photo_url=fields["pic"],
            first_name=first_name,
            last_name=last_name,
            email=fields["email"],
            display_name=f"{first_name} {last_name}",
        )
