from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite:///./lantern.db"

    # Redis
    redis_url: str = "redis://localhost:6379/0"

    # API keys
    bcrypt_rounds: int = 12

    # Environment
    environment: str = "development"
    log_level: str = "INFO"

    # Dashboard
    dashboard_base_url: str = "http://localhost:3000"
    detail_page_list_ttl_seconds: int = 86400

    # Support chat (Crisp); chat is disabled when unset
    crisp_website_id: Optional[str] = None

    # Product analytics (PostHog); capture is disabled when unset
    posthog_api_key: Optional[str] = None
    posthog_host: str = "https://app.posthog.com"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:3001",
    ]

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


settings = Settings()
