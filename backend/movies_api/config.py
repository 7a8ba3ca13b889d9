"""
Movies API — Application Configuration
=======================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py, the validators, and the middleware.
When:  Loaded once at module import time.
"""

from typing import List, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development.
    Attributes are grouped by concern.
    """

    # ── Application ───────────────────────────────────────────────────────
    app_name: str = Field(default="Movies API")

    # What: Optional JSON file replacing the built-in seed list at startup
    # Format: a JSON array of movie objects, each with an integer "id"
    seed_file: Optional[str] = Field(default=None)

    # ── Movie Validation ──────────────────────────────────────────────────
    # What: Accepted range for the "year" field of created movies
    # 1888 is the year of the earliest surviving motion picture
    min_movie_year: int = Field(default=1888, ge=1800)
    max_movie_year: int = Field(default=2100, le=3000)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: Comma-separated URLs, or "*" for any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @model_validator(mode="after")
    def validate_year_range(self) -> "Settings":
        """The year window must not be empty."""
        if self.min_movie_year > self.max_movie_year:
            raise ValueError(
                f"min_movie_year ({self.min_movie_year}) is greater than "
                f"max_movie_year ({self.max_movie_year})"
            )
        return self

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # LOG_LEVEL and log_level both work
        "extra": "ignore",
    }


# Singleton instance, imported throughout the application
settings = Settings()
