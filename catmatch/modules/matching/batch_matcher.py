# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
CategoryMatch — Batch Matcher
Matches a sequence of suggestions against one shared category snapshot.
Each suggestion is matched independently; results line up index-for-index
with the input.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from catmatch.models.category import Category
from catmatch.models.result import MatchResult
from catmatch.modules.matching.best_match import find_best_match
from catmatch.utils.logger import get_logger

log = get_logger(__name__)


def batch_match(
    suggestions: Sequence[str],
    candidates: Iterable[Category],
    threshold: Optional[float] = None,
) -> list[MatchResult]:
    """
    Run find_best_match() for every suggestion against the same snapshot.

    Args:
        suggestions: Suggested names, in caller order.
        candidates:  Category snapshot; materialised once so a generator
                     is not exhausted by the first suggestion.
        threshold:   Reuse threshold. Defaults to config SIMILARITY_THRESHOLD.

    Returns:
        One MatchResult per suggestion, same order. Duplicate suggestions
        yield identical results.
    """
    snapshot = tuple(candidates)

    log.info(
        "batch_match_start",
        n_suggestions=len(suggestions),
        n_candidates=len(snapshot),
    )

    results = [
        find_best_match(suggestion, snapshot, threshold=threshold)
        for suggestion in suggestions
    ]

    log.info(
        "batch_match_complete",
        n_results=len(results),
        create_new=sum(1 for r in results if r.should_create_new),
    )

    return results
