"""Application configuration."""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    cnf_data_path: Path = Path("data/cnf")
    food_group_file: str = "FOOD GROUP.csv"
    food_name_file: str = "FOOD NAME.csv"
    nutrient_amount_file: str = "NUTRIENT AMOUNT.csv"
    cnf_encoding: str = "latin-1"
    substitution_table_path: Path | None = None
    max_swaps_per_goal: int = Field(default=5, ge=1)
    min_impact_score: float = Field(default=0.1, ge=0.0, le=1.0)
    environment: str = _ENVIRONMENT
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
