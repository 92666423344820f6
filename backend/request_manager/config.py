"""Application configuration via environment variables."""
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from .env or environment."""

    PROJECT_NAME: str = "Smart Service Request Manager"
    API_VERSION: str = "0.1.0"
    DATABASE_URL: str = "sqlite:///./service_requests.db"
    CORS_ORIGINS: str = "http://localhost:4200"
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    class Config:
        env_file = ".env"


settings = Settings()
