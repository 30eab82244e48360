"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "credit-engine"
    log_level: str = "INFO"

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 4000
    reload: bool = False


settings = Settings()
