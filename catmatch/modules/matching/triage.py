# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
CategoryMatch — Recommendation Triage
Partitions a batch of match results into the three buckets shown on the
operator dashboard:

  should_create_new  : below threshold; a new category is recommended
  should_reuse       : above threshold and confidence ≥ reuse_confidence
  needs_review       : above threshold but confidence < reuse_confidence

Also computes summary confidence statistics for the same dashboard.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from catmatch.config import get_settings
from catmatch.models.result import (
    MatchResult,
    ReuseRecommendation,
    ReviewItem,
    TriageReport,
)
from catmatch.utils.logger import get_logger

log = get_logger(__name__)

# Reported in should_create_new when a result carries no match at all
UNKNOWN_CATEGORY = "Unknown"


def triage(
    results: Sequence[MatchResult],
    reuse_confidence: Optional[int] = None,
) -> TriageReport:
    """
    Bucket match results for human or automated follow-up.

    Args:
        results:          MatchResults, typically from batch_match().
        reuse_confidence: Percent at or above which a reuse decision needs
                          no review. Defaults to config REUSE_CONFIDENCE (80).

    Returns:
        TriageReport. Input order is preserved within each bucket.
    """
    if reuse_confidence is None:
        reuse_confidence = get_settings().reuse_confidence

    report = TriageReport()

    for result in results:
        if result.should_create_new:
            name = result.match.name if result.match else UNKNOWN_CATEGORY
            report.should_create_new.append(name)
        elif result.match is not None:
            if result.confidence >= reuse_confidence:
                report.should_reuse.append(
                    ReuseRecommendation(
                        suggested=result.match.name,
                        existing=result.match.name,
                    )
                )
            else:
                report.needs_review.append(
                    ReviewItem(
                        suggested=result.match.name,
                        confidence=result.confidence,
                    )
                )

    log.info(
        "triage_complete",
        total=len(results),
        create_new=len(report.should_create_new),
        reuse=len(report.should_reuse),
        review=len(report.needs_review),
        reuse_confidence=reuse_confidence,
    )

    return report


def summarize_confidence(results: Sequence[MatchResult]) -> dict:
    """
    Compute summary confidence statistics over a batch of results.

    Returns:
        Dict with keys: mean, min, max, std, create_new_count,
        create_new_fraction. Confidence values are percentages.
    """
    if not results:
        return {
            "mean": 0.0, "min": 0.0, "max": 0.0, "std": 0.0,
            "create_new_count": 0, "create_new_fraction": 0.0,
        }

    scores = np.array([r.confidence for r in results], dtype=np.float64)
    create_new = sum(1 for r in results if r.should_create_new)

    stats = {
        "mean": float(scores.mean()),
        "min": float(scores.min()),
        "max": float(scores.max()),
        "std": float(scores.std()),
        "create_new_count": create_new,
        "create_new_fraction": create_new / len(results),
    }

    log.info(
        "confidence_stats",
        mean=round(stats["mean"], 1),
        min=stats["min"],
        max=stats["max"],
        create_new=create_new,
        total=len(results),
    )

    return stats
