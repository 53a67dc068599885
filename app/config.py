from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Brief Matching Engine"
    app_version: str = "1.0.0"
    app_env: str = "development"
    log_level: str = "INFO"

    # Matching
    algorithm_version: str = "v1.0-deterministic"
    default_max_results: int = 10

    # Success criteria at or above this weight count as high importance
    high_importance_criterion_weight: int = 7

    # Keyword tokens shorter than this are ignored
    min_keyword_length: int = 4

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
