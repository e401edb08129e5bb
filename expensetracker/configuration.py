"""Mini README: Centralised configuration for the expense tracker.

Structure:
    * ExpenseTrackerSettings - Pydantic settings model read from the environment.
    * get_settings - cached accessor shared by the CLI and the web factory.

Usage:
    Variables use the ``EXPENSE_TRACKER_`` prefix (for example
    ``EXPENSE_TRACKER_INTERFACE_PORT=9000``) and may also live in a ``.env``
    file next to the working directory.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExpenseTrackerSettings(BaseSettings):
    """Runtime configuration for the tracker service."""

    model_config = SettingsConfigDict(
        env_prefix="EXPENSE_TRACKER_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        "development",
        description="Environment label reported by the health endpoint.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the web service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web service listens on.",
        ge=1,
        le=65535,
    )
    currency_symbol: str = Field(
        "$",
        description="Symbol prefixed to every formatted amount.",
        min_length=1,
    )
    seed_demo_data: bool = Field(
        False,
        description="Populate each new ledger with a handful of demo transactions.",
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level applied when the service starts.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        """Accept any casing but only names the logging module knows."""

        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache()
def get_settings() -> ExpenseTrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return ExpenseTrackerSettings()
