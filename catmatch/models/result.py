# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
CategoryMatch — Result Models
Transient outputs of the engine: one MatchResult per suggestion, a
TriageReport per batch, one ValidationResult per candidate name.
All are created fresh per call and never cached.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from catmatch.models.category import Category


class SimilarityBreakdown(BaseModel):
    """
    Term-by-term view of one similarity score.
    `score` = min(1.0, base + sum(adjustments.values())), except for the
    exact and empty short-circuits where adjustments is empty.
    """
    base: float = Field(..., ge=0.0, le=1.0, description="1 - distance / max_len")
    adjustments: dict[str, float] = Field(
        default_factory=dict,
        description="adjustment name → bonus added, in application order",
    )
    score: float = Field(..., ge=0.0, le=1.0)


class SimilarCategory(BaseModel):
    """One near-match shown alongside the best match."""
    name: str
    similarity: int = Field(..., ge=0, le=100, description="Rounded percent")


class MatchResult(BaseModel):
    """
    Outcome of matching one suggested name against a category snapshot.

    `match` is reported even when it falls below the threshold, so
    should_create_new=True may co-occur with a non-null match.
    """
    match: Optional[Category] = None
    confidence: int = Field(0, ge=0, le=100)
    should_create_new: bool = True
    # Top near-matches (≥ shortlist floor), descending; independent of threshold
    similar_categories: list[SimilarCategory] = Field(default_factory=list)


class ReuseRecommendation(BaseModel):
    """A suggestion confidently matched to an existing category."""
    suggested: str
    existing: str


class ReviewItem(BaseModel):
    """A reuse decision whose confidence calls for a human check."""
    suggested: str
    confidence: int = Field(..., ge=0, le=100)


class TriageReport(BaseModel):
    """Match results partitioned into operator dashboard buckets."""
    should_create_new: list[str] = Field(default_factory=list)
    should_reuse: list[ReuseRecommendation] = Field(default_factory=list)
    needs_review: list[ReviewItem] = Field(default_factory=list)


class ValidationResult(BaseModel):
    """
    Outcome of validating a candidate category name.
    `suggestions` is None (not an empty list) when there is nothing to suggest.
    """
    valid: bool
    errors: list[str] = Field(default_factory=list)
    suggestions: Optional[list[str]] = None
