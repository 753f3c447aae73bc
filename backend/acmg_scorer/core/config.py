"""Application configuration."""

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Logging Configuration
    log_level: str = "WARNING"

    # CLI Configuration
    output_format: Literal["text", "json"] = "text"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8080

    class Config:
        # Variables are read as ACMG_LOG_LEVEL, ACMG_PORT, ...
        # and from a .env file in the working directory.
        env_prefix = "ACMG_"
        env_file = ".env"
        case_sensitive = False


# Create a global settings instance for easy access across the application
settings = Settings()
