import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if value is None:
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    app_env: str = "development"
    database_url: str = "sqlite:///./bookmarks.db"
    database_echo: bool = False

    jwt_secret_key: str = "change-me"
    jwt_algorithm: str = "HS256"
    jwt_expires_minutes: int = 15

    cors_origins: list[str] = field(default_factory=lambda: ["http://localhost:3000"])
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            app_env=os.getenv("APP_ENV", "development"),
            database_url=os.getenv("DATABASE_URL", "sqlite:///./bookmarks.db"),
            database_echo=_get_bool(os.getenv("DATABASE_ECHO"), default=False),
            jwt_secret_key=os.getenv("JWT_SECRET_KEY", "change-me"),
            jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
            jwt_expires_minutes=int(os.getenv("JWT_EXPIRES_MINUTES", "15")),
            cors_origins=_get_list(os.getenv("CORS_ORIGINS"), ["http://localhost:3000"]),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


def validate_runtime_config(settings: Settings) -> None:
    if settings.app_env.lower() == "production" and settings.jwt_secret_key == "change-me":
        raise RuntimeError("JWT_SECRET_KEY must be set in production.")
    if not isinstance(logging.getLevelName(settings.log_level), int):
        raise RuntimeError(f"LOG_LEVEL {settings.log_level!r} is not a logging level name.")
