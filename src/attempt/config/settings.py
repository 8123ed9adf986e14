"""Environment-based defaults using pydantic-settings.

The values here seed every builder created with `Attempt.to`. Explicit
builder calls always win over the environment.

Example:
    >>> from attempt.config import get_settings
    >>> get_settings().max_tries
    10

    # Or with environment variables:
    # ATTEMPT_MAX_TRIES=3
    # ATTEMPT_INITIAL_DELAY=0.1
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from pydantic import Field, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict


class AttemptSettings(BaseSettings):
    """Default retry configuration, loaded from ATTEMPT_* variables."""
    
    model_config = SettingsConfigDict(
        env_prefix="ATTEMPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_default=True,
    )
    
    max_tries: PositiveInt = Field(default=10, description="Attempt ceiling for Attempt.to")
    initial_delay: Annotated[float, Field(ge=0.0, allow_inf_nan=False)] = Field(
        default=0.5, description="First inter-attempt delay in seconds",
    )
    delay_growth: Annotated[float, Field(ge=1.0, allow_inf_nan=False)] = Field(
        default=1.25, description="Delay multiplier applied after each retry; >= 1 keeps the schedule non-decreasing",
    )


@lru_cache(maxsize=1)
def get_settings() -> AttemptSettings:
    """Get the global settings instance (cached)."""
    return AttemptSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).
    
    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
