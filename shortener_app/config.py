from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """

    # Environment
    environment: str = "development"
    debug: bool = False

    # Application
    app_name: str = "URL Shortener"
    app_version: str = "1.0.0"

    # Server (PORT env var selects the listening port)
    host: str = "0.0.0.0"
    port: int = 8080

    # URL Shortener specific
    default_validity_minutes: int = 30
    fallback_host: str = "localhost:8080"  # Used when the request has no Host header

    # Short code generation strategy
    short_code_strategy: str = "hashids"  # Options: "hashids", "base62"
    hashids_salt: str = "url-shortener-salt"
    short_code_salt: int = 1256  # Integer salt for Base62 strategy
    short_code_min_length: int = 5

    # Storage
    storage_backend: str = "memory"  # Options: "memory"

    # Logging
    log_level: str = "INFO"

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
