import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_file: str, log_level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Настройка логирования с файловым и консольным handler.

    Args:
        log_file: Путь к файлу лога
        log_level: Уровень логирования (по умолчанию INFO)

    Returns:
        Настроенный logger
    """
    log_dir = os.path.dirname(log_file) or "logs"
    os.makedirs(log_dir, exist_ok=True)
    if not os.path.dirname(log_file):
        log_file = os.path.join(log_dir, log_file)

    formatter = logging.Formatter(LOG_FORMAT)

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[file_handler, console_handler],
        force=True,
    )

    logger = logging.getLogger(__name__)
    logger.debug(f"Logging configured: {log_file}")

    return logger
