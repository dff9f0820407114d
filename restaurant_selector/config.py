"""Configuration management for the Restaurant Week selector using Pydantic."""

import logging
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Registrations API Configuration
    registrations_url: str = Field(
        default="https://api.maitredigital.com.br/v2/events/256/registrations",
        description="Event registrations listing endpoint",
    )
    page: int = Field(default=1, ge=1, description="Listing page to request")
    page_size: int = Field(default=200, gt=0, description="Registrations per page")
    order: str = Field(default="created_desc", description="Listing sort order")
    aggregate: bool = Field(default=True, description="Request aggregated entries")
    request_timeout: float = Field(
        default=30.0, gt=0, description="HTTP timeout in seconds"
    )

    # Output Configuration
    restaurant_base_url: str = Field(
        default="https://maitredigital.com.br/brasiliarestaurantweek/restaurante",
        description="Base URL for restaurant registration pages",
    )

    # Cache Configuration
    cache_file: Path = Field(
        default=Path("./restaurant_week_brasilia_2025.json"),
        description="Local JSON snapshot of the last fetch",
    )

    # Logging Configuration
    log_level: str = Field(default="WARNING", description="Logging level")

    def query_params(self) -> dict[str, str | int]:
        """Build the fixed query parameters for the registrations listing."""
        return {
            "page": self.page,
            "perPage": self.page_size,
            "order": self.order,
            "agg": "true" if self.aggregate else "false",
        }


# Global config instance
config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global config
    if config is None:
        config = Config()
    return config


def setup_logging(cfg: Config | None = None) -> None:
    """Configure logging for the application."""
    if cfg is None:
        cfg = get_config()

    log_level = getattr(logging, cfg.log_level.upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Reduce noise from external libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
