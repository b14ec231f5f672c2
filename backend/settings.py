import os
from typing import List, Optional, Tuple

from domain.errors import ConfigurationError

# Basic settings helper to read environment configuration.

STORE_MEMORY = "memory"
STORE_DATABASE = "database"


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


def _as_list(val: str | None, default: str = "*") -> List[str]:
    raw = default if val is None else val
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings:
    def __init__(self) -> None:
        self.BOOK_STORE: str = (os.getenv("BOOK_STORE") or STORE_MEMORY).strip().lower()
        self.DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL") or None
        self.SECRET_KEY: Optional[str] = os.getenv("SECRET_KEY") or os.getenv("API_KEY") or None
        self.DATABASE_CREATE_TABLES: bool = _as_bool(os.getenv("DATABASE_CREATE_TABLES"), True)
        self.DATABASE_ECHO: bool = _as_bool(os.getenv("DATABASE_ECHO"), False)
        self.CORS_ALLOW_ORIGINS: List[str] = _as_list(os.getenv("CORS_ALLOW_ORIGINS"))
        self.LOG_LEVEL: str = (os.getenv("LOG_LEVEL") or "INFO").upper()

    def require_database_credentials(self) -> Tuple[str, str]:
        """Return (url, secret key) or raise when either is missing."""
        missing = []
        if not self.DATABASE_URL:
            missing.append("DATABASE_URL")
        if not self.SECRET_KEY:
            missing.append("SECRET_KEY (or API_KEY)")
        if missing:
            raise ConfigurationError(
                "Missing database configuration: " + ", ".join(missing)
            )
        return self.DATABASE_URL, self.SECRET_KEY


settings = Settings()
