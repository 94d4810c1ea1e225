"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "cashflow-engine"
    log_level: str = "INFO"
    request_id_header: str = "X-Request-ID"

    # Generation bounds (per request)
    recurrence_max_instances: int = 24  # 2 years of monthly occurrences
    max_installments: int = 72


settings = Settings()
