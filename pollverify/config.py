from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables with hardcoded defaults"""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # CORS - localhost origins used by the check-in UI during development
    ALLOWED_ORIGINS: str = "http://localhost:5000,http://127.0.0.1:5000,http://localhost:5173,http://127.0.0.1:5173"

    # Logging
    LOG_LEVEL: str = "INFO"
    SQL_ECHO: bool = False

    # Demo data
    SEED_DEMO_DATA: bool = True
    RANDOM_SEED: Optional[int] = None  # Fix for reproducible demo data

    # The demo has no login, so the acting poll worker and station are configured
    DEMO_OPERATOR_ID: int = 2
    DEMO_STATION_ID: int = 1
    DEMO_CURRENT_USERNAME: str = "pollworker"

    # Environment
    ENVIRONMENT: str = "development"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
