# ABOUTME: Application configuration using Pydantic Settings for environment variables
# ABOUTME: Provides type-safe access to source URLs, pipeline limits, delivery and logging settings

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="LEXICON_HARVEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown environment variables
    )

    # Source Configuration
    corpus_url: str = Field(
        default="https://raw.githubusercontent.com/hermitdave/FrequencyWords/master/content/2018/es/es_50k.txt",
        description="Rank-ordered frequency list, one 'word count' pair per line",
    )
    wiktionary_api_url: str = Field(
        default="https://es.wiktionary.org/w/api.php", description="MediaWiki parse API for dictionary pages"
    )
    user_agent: str = Field(default="lexicon-harvest/0.1", description="User-Agent header for outgoing requests")
    http_timeout: float = Field(default=20.0, description="Timeout in seconds for HTTP requests")

    # Pipeline Configuration
    word_count: int = Field(default=1000, ge=1, description="Number of frequent words to look up")
    min_word_length: int = Field(
        default=2, ge=0, description="Words must be strictly longer than this to be looked up"
    )
    request_delay_ms: int = Field(default=50, ge=0, description="Pause after each word lookup in milliseconds")
    origin_marker: str = Field(default="latín", description="Language name searched for in 'del <marker> ...'")
    max_definitions: int = Field(default=5, ge=1, description="Maximum definitions kept per word")
    queue_path: Path = Field(default=Path("palabras.txt"), description="Record queue file")

    # Delivery Configuration
    delivery_endpoint: str = Field(default="", description="Backend URL receiving one record per POST")
    delivery_token: str = Field(default="", description="Bearer token for the delivery backend")
    delivery_origin_label: str = Field(
        default="desconocido", description="Constant 'origin' field sent with every record"
    )
    unknown_origin: str = Field(default="desconocido", description="Value sent when a record has no origin")
    delivery_max_attempts: int = Field(
        default=1, ge=1, description="Attempts per record on transport errors (1 disables retries)"
    )

    # Logging Configuration
    log_mode: Literal["interactive", "production"] = Field(default="interactive", description="Logging output mode")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging verbosity level"
    )

    log_file: Path | None = Field(default=None, description="Custom log file path (overrides default)")


# Global config instance - lazy loaded when first accessed
_config_instance: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Creates the config on first access, subsequent calls return the same instance.

    Returns:
        Config: The application configuration instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when environment variables change at runtime.

    Returns:
        Config: A fresh configuration instance
    """
    global _config_instance
    _config_instance = Config()
    return _config_instance
