"""Application configuration settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClassifierSettings(BaseSettings):
    """Carrier classifier configuration."""

    model_config = SettingsConfigDict(
        env_prefix="CLASSIFIER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Reject dotted groups above 255 instead of folding them into higher octets
    strict_octets: bool = False

    # Maximum addresses per batch lookup request
    max_batch_size: int = 100


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Mobile Carrier IP Classifier"
    debug: bool = False
    log_level: str = "INFO"
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # Sub-configurations
    classifier: ClassifierSettings = Field(default_factory=ClassifierSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
