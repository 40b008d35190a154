"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Interface uvicorn binds to.
        port: Port uvicorn listens on.
        api_prefix: Path prefix all routers are mounted under.
        rate_limit_default: Default rate limit for all endpoints.
        max_request_size_bytes: Maximum allowed request body size.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "BenJerry Products API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080
    api_prefix: str = "/api"
    rate_limit_default: str = "60/minute"
    max_request_size_bytes: int = 1_048_576  # 1 MB


settings = Settings()
