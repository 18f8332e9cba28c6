"""
Core configuration settings for the application.
"""
from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings."""
    # API Settings
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Medical Voice Assistant API"
    CORS_ORIGINS: List[str] = ["*"]

    # API Keys
    GEMINI_API_KEY: Optional[str] = None
    TAVILY_API_KEY: Optional[str] = None
    # When False a missing key only surfaces once a provider call fails
    REQUIRE_PROVIDER_KEYS: bool = False

    # Model Settings
    GEMINI_MODEL: str = "gemini-1.5-pro"
    PRIMARY_MAX_TOKENS: int = 80
    MERGE_MAX_TOKENS: int = 20
    SYSTEM_PERSONA: str = (
        "You are an expert medical assistant providing accurate, "
        "responsible and helpful medical advice."
    )

    # Search Settings
    TAVILY_SEARCH_URL: str = "https://api.tavily.com/search"
    SEARCH_TIMEOUT: float = 30.0

    # Conversation
    MAX_HISTORY_TURNS: int = 10

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = "logs/app.log"
    LOG_JSON: bool = True

    class Config:
        case_sensitive = True
        env_file = ".env"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
