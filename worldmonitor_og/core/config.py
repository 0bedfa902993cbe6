"""
Configuration for the WorldMonitor OG image service.
Values are read from environment variables, optionally seeded from a .env file.
"""
import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

DEFAULT_CACHE_MAX_AGE = 3600


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


class Settings:
    """Service settings resolved once at import time."""

    def __init__(self):
        self.DEBUG = _env_bool("DEBUG")
        self.CORS_ORIGINS = _split_origins(
            os.getenv("CORS_ORIGINS", "http://localhost:5173,https://worldmonitor.app")
        )
        self.EXTRA_CORS_ORIGINS = _split_origins(os.getenv("EXTRA_CORS_ORIGINS", ""))
        self.OG_CACHE_MAX_AGE = _env_int("OG_CACHE_MAX_AGE", DEFAULT_CACHE_MAX_AGE)
        self.HOST = os.getenv("HOST", "0.0.0.0")
        self.PORT = _env_int("PORT", 8000)

    @property
    def ALL_CORS_ORIGINS(self) -> List[str]:
        # Order preserved, duplicates dropped
        return list(dict.fromkeys(self.CORS_ORIGINS + self.EXTRA_CORS_ORIGINS))

    @property
    def OG_CACHE_CONTROL(self) -> str:
        return f"public, max-age={self.OG_CACHE_MAX_AGE}, s-maxage={self.OG_CACHE_MAX_AGE}"


settings = Settings()
