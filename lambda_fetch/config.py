"""Configuration management for the Lambda artifact downloader.

This module handles loading and validating configuration from environment
variables with sensible defaults. AWS credentials are not read here:
boto3 discovers them through its default provider chain.
"""

from typing import Optional
from pydantic import Field, AliasChoices
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for interactive use; they can be
    overridden via environment variables or a .env file.
    """

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        validation_alias=AliasChoices("LAMBDA_FETCH_LOG_LEVEL", "LOG_LEVEL")
    )
    default_dest: str = Field(
        default="output.zip",
        description="Destination path used when --dest is not given",
        validation_alias="LAMBDA_FETCH_DEST"
    )
    create_parents: bool = Field(
        default=False,
        description="Create missing parent directories of the destination",
        validation_alias="LAMBDA_FETCH_CREATE_PARENTS"
    )

    # Lambda API Configuration
    connect_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Connect timeout in seconds for Lambda API calls",
        validation_alias="LAMBDA_FETCH_CONNECT_TIMEOUT"
    )
    read_timeout: float = Field(
        default=60.0,
        gt=0,
        description="Read timeout in seconds for Lambda API calls",
        validation_alias="LAMBDA_FETCH_READ_TIMEOUT"
    )

    # Artifact download Configuration
    download_timeout: float = Field(
        default=300.0,
        gt=0,
        description="Timeout in seconds for the artifact HTTP GET",
        validation_alias="LAMBDA_FETCH_DOWNLOAD_TIMEOUT"
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def get_settings() -> Settings:
    """
    Load settings from environment variables and .env file.

    Returns:
        Settings instance with all configuration values
    """
    return Settings()


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def settings() -> Settings:
    """
    Get the global settings instance.

    Creates the settings instance on first call and caches it.

    Returns:
        Global Settings instance
    """
    global _settings
    if _settings is None:
        _settings = get_settings()
    return _settings
