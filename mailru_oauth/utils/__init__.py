from .logging import setup_logging
from .validation import validate_uid

__all__ = ["setup_logging", "validate_uid"]
