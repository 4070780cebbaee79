import logging
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_SECRET_KEY = "supersecretkey"


class ConfigError(RuntimeError):
    pass


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


def _bool_env(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    database_url: str = "sqlite:///./habit_tracker.db"
    secret_key: str = DEFAULT_SECRET_KEY
    algorithm: str = "HS256"
    bcrypt_rounds: int = 12
    environment: str = "development"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    sql_echo: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        origins = os.environ.get("CORS_ORIGINS", "*")
        settings = cls(
            database_url=os.environ.get("DATABASE_URL", cls.database_url),
            secret_key=os.environ.get("SECRET_KEY", DEFAULT_SECRET_KEY),
            algorithm=os.environ.get("JWT_ALGORITHM", cls.algorithm),
            bcrypt_rounds=_int_env("BCRYPT_ROUNDS", 12),
            environment=os.environ.get("ENVIRONMENT", cls.environment),
            log_level=os.environ.get("LOG_LEVEL", cls.log_level).upper(),
            host=os.environ.get("HOST", cls.host),
            port=_int_env("PORT", 8000),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
            sql_echo=_bool_env("SQL_ECHO", False),
        )
        if settings.secret_key == DEFAULT_SECRET_KEY and settings.environment != "development":
            logger.warning("SECRET_KEY is not set; using the development default")
        return settings
