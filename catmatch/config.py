# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
CategoryMatch — Engine Configuration
All tunables are loaded from environment variables with marketplace
defaults. Override via .env or environment.

Every engine function also accepts explicit per-call overrides; these
settings are only the fallback when a caller passes None.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # ─── Decision Policy ─────────────────────────────────────────────────────
    # Minimum best score required to reuse an existing category
    similarity_threshold: float = Field(0.8, ge=0.0, le=1.0)

    # ─── Near-match Shortlist ────────────────────────────────────────────────
    shortlist_min_similarity: float = Field(0.5, ge=0.0, le=1.0)
    shortlist_size: int = Field(3, ge=0)

    # ─── Triage ──────────────────────────────────────────────────────────────
    # Confidence (percent) at or above which a non-create result is reused
    # outright instead of being sent to human review
    reuse_confidence: int = Field(80, ge=0, le=100)

    # ─── Name Validation ─────────────────────────────────────────────────────
    name_min_length: int = 3
    name_max_length: int = 50
    brand_keywords: tuple[str, ...] = (
        "iphone",
        "samsung",
        "nike",
        "adidas",
        "apple",
        "sony",
    )

    # ─── Logging ─────────────────────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached singleton Settings instance."""
    return Settings()
