from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


DEFAULT_FILTERS: dict[str, str] = {
    "country": "es",
    "locale": "es",
    "language": "es",
    "maxItems": "50",
    "operation": "rent",
    "propertyType": "homes",
    "order": "priority",
    "center": "40.416,-3.7025",
    "distance": "20000",
    "sort": "desc",
    "maxPrice": "3000",
    "sinceDate": "Y",
}


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True)

    api_key: str | None = Field(default=None, alias="IDEALISTA_API_KEY")
    api_secret: str | None = Field(default=None, alias="IDEALISTA_API_SECRET")

    oauth_url: str = Field(default="https://api.idealista.com/oauth/token", alias="OAUTH_URL")
    search_url: str = Field(default="https://api.idealista.com/3.5/es/search", alias="SEARCH_URL")
    request_timeout_sec: float = Field(default=30.0, alias="REQUEST_TIMEOUT_SEC")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # JSON object in the environment, e.g. DEFAULT_FILTERS='{"operation": "sale", "maxItems": 50}'
    default_filters: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_FILTERS), alias="DEFAULT_FILTERS")

    @field_validator("default_filters", mode="before")
    @classmethod
    def _filters_as_strings(cls, value):
        if not isinstance(value, dict):
            return value
        return {str(key): _filter_value(item) for key, item in value.items()}


def _filter_value(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


settings = Settings()
