"""Application configuration loaded from environment variables."""

from functools import lru_cache
from urllib.parse import quote_plus

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Environment
    ENV: str = "dev"
    DEBUG: bool = False

    # Allow DATABASE_URL to be set directly, or construct from components
    DATABASE_URL: str | None = "sqlite:///./webstore.db"

    # Database connection components (used when DATABASE_URL is empty)
    POSTGRES_HOST: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_USER: str = "webstore"
    POSTGRES_PASSWORD: str = "webstore"
    POSTGRES_DB: str = "webstore"

    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        """Get database URL, either from DATABASE_URL env var or construct from components."""
        if self.DATABASE_URL:
            return self.DATABASE_URL

        # URL encode components in case they contain special characters
        encoded_user = quote_plus(str(self.POSTGRES_USER), safe="")
        encoded_password = quote_plus(str(self.POSTGRES_PASSWORD), safe="")
        encoded_host = quote_plus(str(self.POSTGRES_HOST), safe="")
        encoded_db = quote_plus(str(self.POSTGRES_DB), safe="")
        return (
            f"postgresql+psycopg2://{encoded_user}:{encoded_password}"
            f"@{encoded_host}:{self.POSTGRES_PORT}/{encoded_db}"
        )

    # CORS
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    # Logging
    LOG_LEVEL: str = "INFO"  # INFO for dev, WARNING for prod

    # Reporting
    PENDING_ORDER_STATUS: str = "Pending"
    RECENT_ORDERS_DAYS: int = 30
    TOP_CUSTOMERS_LIMIT: int = 3
    FEATURED_CATEGORY_NAME: str = "Electronics"
    DISCOUNTED_PRODUCTS_SEPARATOR: str = ", "

    model_config = SettingsConfigDict(
        env_file=[".env", "../.env"],  # Try .env in current dir first, then parent dir
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra fields from .env that are not in Settings
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
