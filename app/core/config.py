from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    PORT: int = 8000
    APP_NAME: str = "Kindred"
    APP_ENV: Literal["development", "production"] = "production"

    # Content sources
    GITHUB_TOKEN: str | None = None
    GITHUB_RESULTS_LIMIT: int = 20
    CURATED_RESULTS_LIMIT: int = 20
    CURATED_CACHE_TTL_SECONDS: int = 3600  # 1 hour
    SOURCE_TIMEOUT_SECONDS: float = 8.0

    # Scoring thresholds (see ScoringSettings)
    MIN_MESSAGES: int = 3
    MIN_CATEGORY_SCORE: int = 3
    CONTRIBUTION_OVERRIDE: int = 55
    SCORE_THRESHOLD: int = 25
    MIN_PER_BUCKET: int = 3
    MAX_PER_BUCKET: int = 7


settings = Settings()
