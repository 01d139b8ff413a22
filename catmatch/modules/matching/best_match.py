# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
CategoryMatch — Best-Match Searcher
Scans a category snapshot for the entry closest to a suggested name and
decides whether the suggestion should reuse it or become a new category.

Scan order:
  1. Exact match (case/whitespace-insensitive) → confidence 100, returned
     immediately. With duplicate names the first one in snapshot order wins.
  2. Otherwise every candidate is scored with score_similarity():
       - score ≥ shortlist floor → recorded as a near-match
       - strictly higher score → becomes the best match (ties keep the
         earlier candidate)
  3. Decision: should_create_new = best_score < threshold.

The best candidate is reported even below threshold so reviewers can see
what the suggestion nearly matched.

Every call logs one debug event. Applications embedding the engine
should run catmatch.utils.logger.configure_logging() so those events are
filtered by LOG_LEVEL instead of reaching stdout.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

from catmatch.config import get_settings
from catmatch.models.category import Category
from catmatch.models.result import MatchResult, SimilarCategory
from catmatch.modules.matching.similarity import normalise_label, score_similarity
from catmatch.utils.logger import get_logger

log = get_logger(__name__)


def to_confidence(score: float) -> int:
    """Convert a [0, 1] score to an integer percent, rounding halves up."""
    return int(math.floor(score * 100 + 0.5))


def find_best_match(
    suggested_name: str,
    candidates: Iterable[Category],
    threshold: Optional[float] = None,
    shortlist_min_similarity: Optional[float] = None,
    shortlist_size: Optional[int] = None,
) -> MatchResult:
    """
    Find the existing category that best matches a suggested name.

    Args:
        suggested_name:           Free-text name from a human or classifier.
                                  Need not be trimmed.
        candidates:               Snapshot of existing categories. Order
                                  matters only for exact-match and tie
                                  resolution.
        threshold:                Minimum best score to reuse an existing
                                  category. Defaults to config
                                  SIMILARITY_THRESHOLD (0.8).
        shortlist_min_similarity: Floor for near-match reporting. Defaults
                                  to config SHORTLIST_MIN_SIMILARITY (0.5).
        shortlist_size:           Max near-matches reported. Defaults to
                                  config SHORTLIST_SIZE (3).

    Returns:
        MatchResult. Never raises: a blank suggestion, an empty snapshot or
        a snapshot where nothing scores above zero all resolve to
        match=None, confidence=0, should_create_new=True.
    """
    settings = get_settings()
    if threshold is None:
        threshold = settings.similarity_threshold
    if shortlist_min_similarity is None:
        shortlist_min_similarity = settings.shortlist_min_similarity
    if shortlist_size is None:
        shortlist_size = settings.shortlist_size

    candidates = list(candidates)
    normalised_suggestion = normalise_label(suggested_name)

    if not normalised_suggestion or not candidates:
        log.debug(
            "best_match_skipped",
            blank_suggestion=not normalised_suggestion,
            n_candidates=len(candidates),
        )
        return MatchResult(match=None, confidence=0, should_create_new=True)

    best_match: Optional[Category] = None
    best_score = 0.0
    shortlist: list[SimilarCategory] = []

    for category in candidates:
        if normalise_label(category.name) == normalised_suggestion:
            log.debug(
                "exact_match_found",
                suggestion=suggested_name,
                match=category.name,
            )
            return MatchResult(
                match=category,
                confidence=100,
                should_create_new=False,
            )

        score = score_similarity(normalised_suggestion, category.name)

        if score >= shortlist_min_similarity:
            shortlist.append(
                SimilarCategory(name=category.name, similarity=to_confidence(score))
            )

        if score > best_score:
            best_score = score
            best_match = category

    # Stable sort: equal percentages keep snapshot order
    shortlist.sort(key=lambda s: s.similarity, reverse=True)
    shortlist = shortlist[:shortlist_size]

    if best_match is None:
        # Every candidate scored exactly 0: nothing usable to reuse
        should_create_new = True
    else:
        should_create_new = best_score < threshold

    result = MatchResult(
        match=best_match,
        confidence=to_confidence(best_score),
        should_create_new=should_create_new,
        similar_categories=shortlist,
    )

    log.debug(
        "best_match_found",
        suggestion=suggested_name,
        match=best_match.name if best_match else None,
        confidence=result.confidence,
        should_create_new=should_create_new,
        n_similar=len(shortlist),
        threshold=threshold,
    )

    return result
