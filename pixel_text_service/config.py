"""Configuration management using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the pixel text service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Service
    service_name: str = "pixel-text"
    service_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    # Staging
    staging_dir: str = "temp"
    hex_cache_enabled: bool = True
    hex_cache_path: str = "temp/hex-cache.txt"

    # Limits
    max_image_pixels: int | None = 4096 * 4096
    encode_timeout_seconds: float | None = 60.0

    # HTTP surface
    enable_docs: bool = False
    cors_allow_origins: list[str] = ["*"]
    cors_allow_methods: list[str] = ["POST"]
    cors_allow_headers: list[str] = ["*"]


# Global settings instance
settings = Settings()
