"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

import datetime
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "FitCoach program recommendation and session scheduling"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["FitCoach team"]
    PROJECT_URL: str = "https://github.com/fitcoach/fitcoach-engine"

    DEBUG: bool = False

    # Database
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = "postgres"
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "fitcoach"

    # Full URL override (e.g. sqlite:///./fitcoach.db for local runs)
    DATABASE_URL_OVERRIDE: Optional[str] = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    # Recommendation engine
    STATS_WINDOW_DAYS: int = 28
    RECOMMENDATION_LIMIT: int = 3
    GOAL_VOCABULARY: str = "ro"

    # Scheduling
    DEFAULT_PROGRAM_DURATION_WEEKS: int = 12
    MAX_SESSIONS_PER_DAY: int = 2
    MIN_SESSION_INTERVAL_HOURS: float = 2.0
    DEFAULT_SESSION_TIME: datetime.time = datetime.time(9, 0)

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}/{self.DATABASE_DBNAME}")


# Global settings instance
settings = Settings()
