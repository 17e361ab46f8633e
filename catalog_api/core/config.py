"""Application configuration"""

import logging
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_API__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Environment
    environment: str = "development"
    port: int = 8004

    # Database
    db_url: str = "sqlite:///data/catalog.db"
    db_echo: bool = False

    # Audit
    default_actor: str = "System"

    # Unit of work
    slow_transaction_threshold: float = 0.1  # seconds

    # CORS
    enable_cors: bool = True
    cors_origins: List[str] = ["*"]

    # Logging
    log_level: str = "INFO"

    # Version
    version: str = "0.1.0"

    @property
    def is_development(self) -> bool:
        """Check if running in development"""
        return self.environment.lower() == "development"


# Create settings instance
settings = Settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger("catalog-api")
