"""
Centralized application configuration.

This module uses Pydantic's BaseSettings to load configuration from
environment variables and a .env file, providing a single, type-safe
source of truth for all settings.
"""

from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # --- Core API Settings ---
    PROJECT_NAME: str = "LifePulse Health API"
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    # --- Database Settings ---
    # The default keeps everything in process memory; set a real URL to persist.
    DATABASE_URL: str = "sqlite://"
    SEED_ON_STARTUP: bool = True

    # --- Security Settings ---
    SECRET_KEY: str
    ENCRYPTION_KEY: str
    SESSION_COOKIE_NAME: str = "lifepulse_session"
    SESSION_EXPIRE_DAYS: int = 7
    COOKIE_SECURE: bool = False

    # --- External Identity (Google) Settings ---
    GOOGLE_CLIENT_ID: str = ""

    # --- Rewards Settings ---
    TOKEN_REWARD_AMOUNT: int = 10

    # --- Companion Settings ---
    AI_PROVIDER: str = "builtin"

    # --- Pydantic Model Configuration ---
    class Config:
        """Loads settings from the specified .env file."""
        env_file = ".env"
        env_file_encoding = 'utf-8'


# Create a single, globally accessible settings instance
settings = Settings()
