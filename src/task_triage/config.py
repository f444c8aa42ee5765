"""
Application configuration management.

This module handles configuration from environment variables using Pydantic Settings.
Keyword, action and pattern tables are compiled in and are not configurable here.
"""

from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application configuration from environment variables.

    All settings can be overridden via environment variables with the same name.
    """

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # CORS
    cors_allow_origins: List[str] = ["*"]
    cors_allow_methods: List[str] = ["GET", "POST", "PUT", "DELETE", "PATCH"]
    cors_allow_headers: List[str] = ["Content-Type", "Authorization"]

    # Response hardening
    enable_security_headers: bool = True

    # Request limits
    max_title_length: int = 500
    max_description_length: int = 10000
    max_batch_size: int = 100

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


# Global settings instance
settings = Settings()
