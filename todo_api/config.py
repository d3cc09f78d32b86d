"""Application configuration management."""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Todo API"
    debug: bool = False
    log_level: str = "INFO"

    # Database
    database_url: str = "sqlite+aiosqlite:///./todos.db"

    # Tokens
    secret_key: str = "your-secret-key-change-in-production"
    token_expire_hours: int = 24
    token_max_clock_skew_seconds: int = 60

    # Password hashing
    bcrypt_rounds: int = 12

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    limit_concurrency: int = 100  # connections beyond this get 503
    timeout_keep_alive: int = 5

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
