from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="STREAMCACHE_", env_file=".env", extra="ignore")

    # Backing store: "memory", "local" or "redis"
    store_backend: str = "memory"

    # Directory holding one JSON document per namespace (local backend)
    store_path: str | None = None

    # Namespace shared by every key of this process-wide cache
    namespace: str = "cache"

    # Redis (redis backend)
    redis_url: str = Field(default="redis://localhost:6379/0", validation_alias="REDIS_URL")

    # Logging
    log_level: str = "INFO"
    log_json: bool = False


settings = Settings()
