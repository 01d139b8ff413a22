# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
CategoryMatch — Label Similarity Scorer
Computes a bounded [0, 1] similarity between two short category labels.

Score = min(1.0, base + Σ adjustments)

  base        = 1 - levenshtein(a, b) / max(len(a), len(b))
  first_word  = +0.15 if both labels start with the same word
  containment = +0.10 if one label is a substring of the other
  word_overlap = +0.10 × fraction of the shorter label's words found
                 verbatim in the longer label

Comparison is on trimmed, lowercased labels. The adjustments are tuned
for category-style names of a few words, not for general prose.

The function is total: any pair of strings, including empty ones, yields
a score without raising.
"""

from __future__ import annotations

from typing import Callable, NamedTuple

from rapidfuzz.distance import Levenshtein

from catmatch.models.result import SimilarityBreakdown

_FIRST_WORD_BONUS = 0.15
_CONTAINMENT_BONUS = 0.10
_WORD_OVERLAP_WEIGHT = 0.10


class _LabelPair(NamedTuple):
    """Normalised labels plus their whitespace-split words."""
    a: str
    b: str
    words_a: list[str]
    words_b: list[str]


def normalise_label(label: str) -> str:
    """Comparison form of a label: surrounding whitespace stripped, lowercased."""
    return label.strip().lower()


def levenshtein_distance(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions and
    substitutions turning `a` into `b`.
    """
    return Levenshtein.distance(a, b)


# ─── Score Adjustments ───────────────────────────────────────────────────────

def _first_word_bonus(pair: _LabelPair) -> float:
    return _FIRST_WORD_BONUS if pair.words_a[0] == pair.words_b[0] else 0.0


def _containment_bonus(pair: _LabelPair) -> float:
    if pair.a in pair.b or pair.b in pair.a:
        return _CONTAINMENT_BONUS
    return 0.0


def _overlap_ratio(shorter: list[str], longer: list[str]) -> float:
    return sum(1 for w in shorter if w in longer) / len(shorter)


def _word_overlap_bonus(pair: _LabelPair) -> float:
    words_a, words_b = pair.words_a, pair.words_b
    if len(words_a) < len(words_b):
        ratio = _overlap_ratio(words_a, words_b)
    elif len(words_b) < len(words_a):
        ratio = _overlap_ratio(words_b, words_a)
    else:
        # Equal word counts: only repeated words make the two directions
        # differ; take the smaller so the score stays symmetric
        ratio = min(
            _overlap_ratio(words_a, words_b),
            _overlap_ratio(words_b, words_a),
        )
    return _WORD_OVERLAP_WEIGHT * ratio


# Applied in order on top of the distance-derived base score
SCORE_ADJUSTMENTS: tuple[tuple[str, Callable[[_LabelPair], float]], ...] = (
    ("first_word", _first_word_bonus),
    ("containment", _containment_bonus),
    ("word_overlap", _word_overlap_bonus),
)


# ─── Public API ──────────────────────────────────────────────────────────────

def similarity_breakdown(a: str, b: str) -> SimilarityBreakdown:
    """
    Score two labels and report each term that contributed.

    Args:
        a, b: Raw labels (any casing, surrounding whitespace allowed)

    Returns:
        SimilarityBreakdown with base score, per-adjustment bonuses and
        the final clamped score.
    """
    norm_a = normalise_label(a)
    norm_b = normalise_label(b)

    if norm_a == norm_b:
        return SimilarityBreakdown(base=1.0, score=1.0)
    if not norm_a or not norm_b:
        return SimilarityBreakdown(base=0.0, score=0.0)

    distance = levenshtein_distance(norm_a, norm_b)
    base = 1.0 - distance / max(len(norm_a), len(norm_b))

    pair = _LabelPair(norm_a, norm_b, norm_a.split(), norm_b.split())
    adjustments = {name: rule(pair) for name, rule in SCORE_ADJUSTMENTS}

    score = base
    for bonus in adjustments.values():
        score += bonus

    return SimilarityBreakdown(
        base=base,
        adjustments=adjustments,
        score=min(1.0, score),
    )


def score_similarity(a: str, b: str) -> float:
    """
    Similarity of two labels in [0, 1]; 1.0 means "treat as identical".

    Symmetric in its arguments. Returns 1.0 for labels equal after
    normalisation (including two empty labels) and 0.0 when exactly one
    label is empty.
    """
    return similarity_breakdown(a, b).score
