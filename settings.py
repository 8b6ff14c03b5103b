# settings.py
"""
Rasoi API Settings.

Pydantic settings management with environment variable support.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # MongoDB - checked on first use, not at startup
    MONGODB_URI: Optional[str] = Field(default=None, description="MongoDB connection string")
    DATABASE_NAME: str = Field(default="rasoi")

    # Admin listing
    ADMIN_SECRET: Optional[str] = Field(default=None, description="Shared secret for /api/admin routes")

    # Anthropic relay
    ANTHROPIC_API_KEY: Optional[str] = None
    ANTHROPIC_API_URL: str = "https://api.anthropic.com/v1/messages"
    ANTHROPIC_VERSION: str = "2023-06-01"

    # Server
    PORT: int = 3000
    MAX_BODY_BYTES: int = Field(default=10 * 1024 * 1024, description="Request body limit (10mb)")

    # CORS
    CORS_ORIGINS: str = "*"

    # Sentry Error Tracking
    SENTRY_DSN: Optional[str] = None
    SENTRY_ENVIRONMENT: str = "production"
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1

    def get_cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
