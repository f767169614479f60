"""Pydantic Settings — loads configuration from environment variables."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings

from src.scraper.models import DEFAULT_USER_AGENT, ScrapingOptions
from src.text.translator import glossary_for


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore"}

    log_level: str = "INFO"

    scrape_timeout_ms: int = 10000
    scrape_retries: int = 3
    scrape_user_agent: str = DEFAULT_USER_AGENT

    redis_url: str = "redis://localhost:6379"
    storage_ttl_seconds: int = 0
    persist_results: bool = True
    translation_target: str = "ur"

    @field_validator("translation_target")
    @classmethod
    def _known_target(cls, value: str) -> str:
        glossary_for(value)
        return value.lower()

    def scraping_defaults(self) -> ScrapingOptions:
        return ScrapingOptions(
            timeout=self.scrape_timeout_ms,
            retries=self.scrape_retries,
            user_agent=self.scrape_user_agent,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
