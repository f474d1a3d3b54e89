from __future__ import annotations

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

HttpClientName = Literal["httpx", "requests", "urllib"]
JsonHandlerName = Literal["orjson", "pydantic", "json"]


class Config(BaseModel):
    """Connection and assembly settings for a `Client`."""

    model_config = ConfigDict(protected_namespaces=())

    host_url: str = "http://localhost:7700"
    api_key: Optional[str] = None
    timeout: float = 30.0  # seconds, applied to connect and read
    verify_ssl: bool = True
    user_agent: str = "meilisearch-client-python"
    # None means auto-detect from installed libraries
    http_client: Optional[HttpClientName] = None
    json_handler: Optional[JsonHandlerName] = None
    # Index uid -> document type for handlers created up front
    model_mapping: Dict[str, Any] = {}

    @field_validator("host_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    def headers(self) -> Dict[str, str]:
        """Default headers sent with every request."""
        h = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }
        if self.api_key:
            h["X-Meili-API-Key"] = self.api_key
            h["Authorization"] = f"Bearer {self.api_key}"
        return h


class Settings(BaseSettings):
    """Top-level settings loaded from environment variables and .env only."""

    model_config = SettingsConfigDict(
        env_prefix="MEILISEARCH_",
        env_nested_delimiter="__",
        env_file=".env",
        extra="ignore",
    )

    client: Config = Config()


def load_settings() -> Settings:
    """Load settings from environment variables and .env only."""
    return Settings()  # type: ignore[call-arg]
