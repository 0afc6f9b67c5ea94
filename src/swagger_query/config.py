"""Configuration for the Swagger query server."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

    service_name: str = Field(default="swagger-query")
    service_version: str = Field(default="1.0.0")

    swagger_url: Optional[str] = Field(default=None)
    swagger_fetch_timeout_seconds: float = Field(default=30)
    swagger_verify_ssl: bool = Field(default=True)

    server_log_level: str = Field(default="INFO")

    def with_url(self, url: str) -> "Settings":
        return self.model_copy(update={"swagger_url": url})


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
