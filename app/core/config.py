# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - DATABASE_URL (Postgres connection string)
      - JWT_SECRET (signing secret for vendor and staff tokens)

    Optional:
      - JWT_ALG, ACCESS_TOKEN_EXPIRE_MINUTES
      - DATABASE_SSL_REQUIRE (append sslmode=require to Postgres URLs)
      - CORS_ORIGINS (comma separated list)
    """

    PROJECT_NAME: str = "Vendor Supply Backend"
    API_V1_STR: str = "/api/v1"

    # DB config
    DATABASE_URL: str
    DATABASE_SSL_REQUIRE: bool = False

    # JWT signing / verification
    JWT_SECRET: str
    JWT_ALG: str = "HS256"

    # 7 days, same lifetime for vendor and staff tokens
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7

    CORS_ORIGINS: str = "http://localhost:3000,http://127.0.0.1:3000"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
