"""Application configuration and settings management."""

from typing import Any, Literal

import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="TOUR_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Brute-Force Tour Solver API"
    api_prefix: str = "/api"
    report_improvements: bool = Field(
        default=True,
        description="Log a notice every time a shorter tour is found during enumeration.",
    )
    max_points: int = Field(
        default=9,
        ge=1,
        description="Largest point set accepted by the HTTP endpoint (the search is n!).",
    )
    sample_point_count: int = Field(
        default=8,
        ge=1,
        description="How many of the built-in sample points the CLI solves when none are given.",
    )
    grid_lower: float = Field(default=-1.0, description="Lower bound of both grid sweep axes.")
    grid_upper: float = Field(default=1.0, description="Upper bound of both grid sweep axes.")
    grid_single_precision: bool = Field(
        default=False,
        description="Step the grid sweep through single-precision values instead of doubles.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            # Try JSON first
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
