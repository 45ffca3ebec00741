import logging
import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv


load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:
    """Application configuration loaded from environment variables.

    Values are read once, when this module is first imported. ``PAGE_URL`` and
    ``USER_AGENT`` seed the default host context used when a helper is called
    without an explicit one.
    """

    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    PAGE_URL: str = os.getenv("PAGE_URL", "")
    USER_AGENT: str = os.getenv("USER_AGENT", "")
    LICENSE_PLATE_TRACE: bool = _env_flag("LICENSE_PLATE_TRACE", "true")

    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: str = os.getenv("PORT", "8080")

    CORS_ALLOWED_ORIGINS_ENV: str = os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:3000")

    @staticmethod
    def allowed_origins(extra_origins: List[str] | None = None) -> List[str]:
        env_origins = [o.strip() for o in Config.CORS_ALLOWED_ORIGINS_ENV.split(",") if o.strip()]
        merged = list(env_origins)
        if extra_origins:
            merged.extend(extra_origins)
        # Deduplicate while preserving order
        seen = set()
        result: List[str] = []
        for origin in merged:
            if origin not in seen:
                seen.add(origin)
                result.append(origin)
        return result

    @classmethod
    def log_level(cls) -> int:
        level = logging.getLevelName(cls.LOG_LEVEL)
        return level if isinstance(level, int) else logging.WARNING

    @classmethod
    def validate(cls) -> None:
        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {cls.LOG_LEVEL!r}")
        if not cls.PORT.isdigit():
            raise ValueError(f"PORT must be an integer, got {cls.PORT!r}")
