"""API service configuration."""

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Churn engine service configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 5000

    # Scoring settings
    # YAML file with ScoringConfig overrides; defaults used if unset
    scoring_config_path: Optional[str] = None

    # Bulk recompute thread pool size
    bulk_max_workers: int = 4

    # Prediction history retention per customer (None = unbounded)
    history_limit: Optional[int] = None

    # Customers listed per risk bucket in analytics
    analytics_sample_size: int = 10

    # Sample data bootstrap (only when the store is empty)
    seed_sample_data: bool = False
    seed_count: int = 100

    # Logging
    log_level: str = "INFO"

    model_config = {"env_prefix": "CHURN_"}

    @field_validator("bulk_max_workers", "seed_count", "analytics_sample_size")
    @classmethod
    def validate_positive(cls, v):
        """Ensure counts are at least 1."""
        if v < 1:
            raise ValueError(f"must be >= 1, got {v}")
        return v

    @field_validator("history_limit")
    @classmethod
    def validate_history_limit(cls, v):
        if v is not None and v < 1:
            raise ValueError(f"history_limit must be >= 1, got {v}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log_level is a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()
