# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
CategoryMatch — Matching Engine Module
Public API for scoring, searching, batch matching and triage.
"""

from catmatch.modules.matching.batch_matcher import batch_match
from catmatch.modules.matching.best_match import find_best_match, to_confidence
from catmatch.modules.matching.similarity import (
    levenshtein_distance,
    normalise_label,
    score_similarity,
    similarity_breakdown,
)
from catmatch.modules.matching.triage import summarize_confidence, triage

__all__ = [
    # Similarity
    "normalise_label",
    "levenshtein_distance",
    "similarity_breakdown",
    "score_similarity",
    # Search
    "find_best_match",
    "to_confidence",
    # Batch
    "batch_match",
    # Triage
    "triage",
    "summarize_confidence",
]
