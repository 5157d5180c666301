"""
Application Configuration
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from functools import lru_cache


class Settings(BaseSettings):
    """Application Settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra='ignore'
    )

    # App Configuration
    APP_NAME: str = "Job Portal"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"  # empty string disables the file handler

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 4000

    # Database Configuration
    DATABASE_URL: str

    # CORS (frontend origins)
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://localhost:3001",
        "http://localhost:5174",
        "https://full-stack-app-mcr-frontend.vercel.app",
    ]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
