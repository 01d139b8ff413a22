# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
CategoryMatch — Category Matching & Validation Engine
Decides whether a suggested category name reuses an existing taxonomy
entry or becomes a new one, and checks new names against naming rules.
"""

from catmatch.errors import CategoryMatchError, SnapshotLoadError
from catmatch.models.category import Category, generate_slug
from catmatch.models.result import (
    MatchResult,
    ReuseRecommendation,
    ReviewItem,
    SimilarCategory,
    SimilarityBreakdown,
    TriageReport,
    ValidationResult,
)
from catmatch.modules.matching import (
    batch_match,
    find_best_match,
    levenshtein_distance,
    score_similarity,
    similarity_breakdown,
    summarize_confidence,
    triage,
)
from catmatch.modules.validation import validate_name
from catmatch.utils.snapshot import load_category_snapshot

__version__ = "1.0.0"

__all__ = [
    # Models
    "Category",
    "MatchResult",
    "SimilarCategory",
    "SimilarityBreakdown",
    "TriageReport",
    "ReuseRecommendation",
    "ReviewItem",
    "ValidationResult",
    # Engine
    "score_similarity",
    "similarity_breakdown",
    "levenshtein_distance",
    "find_best_match",
    "batch_match",
    "triage",
    "summarize_confidence",
    "validate_name",
    # Helpers
    "generate_slug",
    "load_category_snapshot",
    # Errors
    "CategoryMatchError",
    "SnapshotLoadError",
]
