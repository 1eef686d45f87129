import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


@dataclass(frozen=True)
class Config:
    """Demo configuration loaded from environment variables (and `.env`)."""

    DEBOUNCE_DELAY_MS: int = int(os.getenv("DEBOUNCE_DELAY_MS", "500"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    SERVER_NAME: str = os.getenv("SERVER_NAME", "127.0.0.1")
    SERVER_PORT: int = int(os.getenv("SERVER_PORT", "7860"))

    @classmethod
    def log_level(cls) -> int:
        return logging.getLevelName(cls.LOG_LEVEL)

    @classmethod
    def validate(cls) -> None:
        if cls.DEBOUNCE_DELAY_MS <= 0:
            raise ValueError("DEBOUNCE_DELAY_MS must be a positive number of milliseconds")
        if not 0 < cls.SERVER_PORT < 65536:
            raise ValueError("SERVER_PORT must be between 1 and 65535")
        if not isinstance(cls.log_level(), int):
            raise ValueError(f"LOG_LEVEL {cls.LOG_LEVEL!r} is not a logging level name")
