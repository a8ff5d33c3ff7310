from typing import Optional


class MailRuError(Exception):
    pass


class MissingCodeError(MailRuError):
    def __init__(self, error: Optional[str] = None, description: Optional[str] = None):
        self.error = error
        self.description = description
        message = "Redirect request has no authorization code"
        if error:
            message = f"{message}: {error}"
            if description:
                message = f"{message} ({description})"
        super().__init__(message)


class TransportError(MailRuError):
    pass


class DecodeError(MailRuError):
    pass


class UnexpectedResultCountError(MailRuError):
    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Expected exactly one result, got {count}")
