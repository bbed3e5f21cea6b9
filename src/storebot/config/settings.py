"""
Application settings using Pydantic.

This module provides runtime configuration with environment variable support.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from storebot.config.constants import (
    DEFAULT_MAX_FEATURES,
    DEFAULT_N_ESTIMATORS,
    DEFAULT_RANDOM_STATE,
    STABLE_LABELS,
)


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Settings can be overridden via environment variables prefixed with STOREBOT_
    For example: STOREBOT_N_ESTIMATORS=50
    """

    model_config = SettingsConfigDict(
        env_prefix="STOREBOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Allow other env vars without error
    )

    # Ensemble classifier
    n_estimators: int = Field(
        default=DEFAULT_N_ESTIMATORS,
        description="Number of trees in the bagged ensemble",
        ge=1,
        le=500,
    )

    max_features: float = Field(
        default=DEFAULT_MAX_FEATURES,
        description="Fraction of features considered per split",
        gt=0.0,
        le=1.0,
    )

    random_state: int = Field(
        default=DEFAULT_RANDOM_STATE,
        description="Seed for reproducible training",
        ge=0,
    )

    # Labels
    stable_labels: bool = Field(
        default=STABLE_LABELS,
        description="Keep label ids stable across retrains",
    )

    # Resolution
    fallback_seed: Optional[int] = Field(
        default=None,
        description="Seed for the fallback response picker (None = unseeded)",
    )

    # Runtime
    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )


# Global settings instance (can be overridden for testing)
settings = Settings()
