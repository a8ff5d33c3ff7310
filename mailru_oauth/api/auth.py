import hashlib
from typing import Mapping

SIG_PARAMETER = "sig"


class MailRuAuth:
    """Подпись серверных запросов к REST API платформы."""

    def __init__(self, signing_secret: str):
        self._signing_secret = signing_secret

    def generate_sig(self, params: Mapping[str, object]) -> str:
        # Порядок ключей побайтовый, между парами нет разделителей
        sorted_params = sorted(
            (str(k), str(v)) for k, v in params.items() if k != SIG_PARAMETER
        )
        params_str = "".join(f"{k}={v}" for k, v in sorted_params)

        sig_string = f"{params_str}{self._signing_secret}"
        return hashlib.md5(sig_string.encode("utf-8")).hexdigest().lower()

    def sign_params(self, params: Mapping[str, object]) -> dict:
        signed_params = {str(k): str(v) for k, v in params.items() if k != SIG_PARAMETER}
        signed_params[SIG_PARAMETER] = self.generate_sig(signed_params)
        return signed_params
