# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ObserverErrorPolicy = Literal["log", "raise"]


class AppSettings(BaseSettings, frozen=True):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    RIGHTCOLLECTION_LOG_LEVEL: str = "INFO"
    """Root log level applied by the command-line interface."""

    RIGHTCOLLECTION_OBSERVER_ERRORS: ObserverErrorPolicy = "log"
    """What an event channel does when a subscriber raises.

    ``log`` records the failure and keeps notifying the remaining
    subscribers; ``raise`` propagates it to the caller that mutated
    the collection.
    """

    @field_validator("RIGHTCOLLECTION_LOG_LEVEL", mode="before")
    def _normalize_log_level(cls, value: Any) -> str:
        value = str(value).upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level: {value}")
        return value

    @field_validator("RIGHTCOLLECTION_OBSERVER_ERRORS", mode="before")
    def _normalize_observer_errors(cls, value: Any) -> str:
        return str(value).lower()


settings = AppSettings()
