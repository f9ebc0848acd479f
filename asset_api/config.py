from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import Any


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # App
    APP_NAME: str = "Asset Registry API"
    APP_ENV: str = "local"
    APP_DEBUG: bool = False
    APP_VERSION: str = "0.1.0"
    LOG_LEVEL: str = "INFO"

    HOST: str = "0.0.0.0"
    PORT: int = 8010

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./assets.db"
    DB_ECHO: bool = False

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def fix_database_url(cls, v: str) -> str:
        # Hosted Postgres providers hand out postgres:// but asyncpg needs postgresql+asyncpg://
        if v.startswith("postgres://"):
            v = v.replace("postgres://", "postgresql+asyncpg://", 1)
        elif v.startswith("postgresql://") and "+asyncpg" not in v:
            v = v.replace("postgresql://", "postgresql+asyncpg://", 1)
        elif v.startswith("sqlite://") and "+aiosqlite" not in v:
            v = v.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return v

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:8080"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Any) -> list[str]:
        if isinstance(v, str):
            import json
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [origin.strip() for origin in v.split(",")]
        return v

    # Rate limiting (set to empty string to disable)
    RATE_LIMIT_DEFAULT: str = "200/minute"

    @property
    def rate_limit_enabled(self) -> bool:
        return bool(self.RATE_LIMIT_DEFAULT)


settings = Settings()
