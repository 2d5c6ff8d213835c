"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class NubanstackConfig(BaseSettings):
    """Nubanstack configuration"""

    model_config = SettingsConfigDict(
        env_prefix="NUBANSTACK_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Online bank directory configuration
    directory_base_url: str = "https://api.paystack.co"
    directory_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("nubanstack_directory_api_key", "paystack_secret_key"),
    )
    directory_timeout: float = 10.0

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text


# Global configuration instance
config = NubanstackConfig()


def get_config() -> NubanstackConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> NubanstackConfig:
    """Reload configuration from environment"""
    global config
    config = NubanstackConfig()
    return config
