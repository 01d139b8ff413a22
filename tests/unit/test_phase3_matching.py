# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Phase 3 — Best-match searcher and batch matcher tests.
All tests use small in-memory snapshots; no files or configuration
overrides required.
"""

import pytest

from catmatch.models.category import Category


# ─── Helpers ─────────────────────────────────────────────────────────────────

def _cat(name: str, parent_id: str | None = None) -> Category:
    return Category.from_name(name, parent_id=parent_id)


@pytest.fixture
def marketplace_categories() -> list[Category]:
    return [
        _cat("Electronics"),
        _cat("Smartphones", parent_id="electronics"),
        _cat("Laptops", parent_id="electronics"),
        _cat("Clothing"),
        _cat("Men's Clothing", parent_id="clothing"),
        _cat("Women's Clothing", parent_id="clothing"),
        _cat("Home & Garden"),
        _cat("Furniture", parent_id="home-garden"),
    ]


@pytest.fixture
def two_categories() -> list[Category]:
    return [_cat("Electronics"), _cat("Smartphones", parent_id="electronics")]


# ─── Degenerate Input ────────────────────────────────────────────────────────

@pytest.mark.parametrize("suggestion", ["", "   ", "\t\n"])
def test_blank_suggestion_creates_new(suggestion, two_categories):
    from catmatch.modules.matching.best_match import find_best_match

    result = find_best_match(suggestion, two_categories)
    assert result.match is None
    assert result.confidence == 0
    assert result.should_create_new is True
    assert result.similar_categories == []


def test_empty_snapshot_creates_new():
    from catmatch.modules.matching.best_match import find_best_match

    result = find_best_match("Electronics", [])
    assert result.match is None
    assert result.confidence == 0
    assert result.should_create_new is True


def test_all_zero_scores_is_no_usable_match():
    from catmatch.modules.matching.best_match import find_best_match

    # Even a zero threshold must not "reuse" a candidate that scored 0
    result = find_best_match("abc", [_cat("xyz")], threshold=0.0)
    assert result.match is None
    assert result.confidence == 0
    assert result.should_create_new is True


# ─── Exact Matches ───────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "suggestion,expected",
    [
        ("Electronics", "Electronics"),
        ("electronics", "Electronics"),
        ("SMARTPHONES", "Smartphones"),
        ("  Laptops  ", "Laptops"),
    ],
)
def test_exact_match_is_full_confidence(suggestion, expected, marketplace_categories):
    from catmatch.modules.matching.best_match import find_best_match

    result = find_best_match(suggestion, marketplace_categories)
    assert result.match.name == expected
    assert result.confidence == 100
    assert result.should_create_new is False


def test_exact_match_preserves_category_object(marketplace_categories):
    from catmatch.modules.matching.best_match import find_best_match

    result = find_best_match("smartphones", marketplace_categories)
    assert result.match == marketplace_categories[1]
    assert result.match.parent_id == "electronics"


def test_first_exact_match_wins_with_duplicate_names():
    from catmatch.modules.matching.best_match import find_best_match

    first = Category(name="Toys", slug="toys-a")
    second = Category(name="toys", slug="toys-b")
    result = find_best_match("TOYS", [first, second])
    assert result.match.slug == "toys-a"


# ─── Fuzzy Matches ───────────────────────────────────────────────────────────

def test_close_match_is_reused(two_categories):
    from catmatch.modules.matching.best_match import find_best_match

    result = find_best_match("Smartphone", two_categories)
    assert result.match.name == "Smartphones"
    assert result.confidence > 80
    assert result.should_create_new is False


def test_unrelated_suggestion_creates_new(two_categories):
    from catmatch.modules.matching.best_match import find_best_match

    result = find_best_match("Totally Different Category", two_categories, threshold=0.8)
    assert result.should_create_new is True


def test_best_match_reported_below_threshold():
    from catmatch.modules.matching.best_match import find_best_match

    result = find_best_match("Laptop Computers", [_cat("Laptops")], threshold=0.9)
    assert result.match.name == "Laptops"
    assert result.confidence == 44
    assert result.should_create_new is True


def test_custom_threshold_changes_decision_only():
    from catmatch.modules.matching.best_match import find_best_match

    snapshot = [_cat("abd")]
    strict = find_best_match("abc", snapshot, threshold=0.8)
    lenient = find_best_match("abc", snapshot, threshold=0.5)
    assert strict.match == lenient.match
    assert strict.confidence == lenient.confidence == 67
    assert strict.should_create_new is True
    assert lenient.should_create_new is False


def test_zero_threshold_always_reuses():
    from catmatch.modules.matching.best_match import find_best_match

    result = find_best_match("abc", [_cat("abd")], threshold=0.0)
    assert result.match.name == "abd"
    assert result.should_create_new is False


def test_threshold_one_accepts_bonus_inflated_score(two_categories):
    from catmatch.modules.matching.best_match import find_best_match

    # 'Smartphone' vs 'Smartphones' is clamped to 1.0 by the containment bonus
    result = find_best_match("Smartphone", two_categories, threshold=1.0)
    assert result.confidence == 100
    assert result.should_create_new is False


def test_ties_keep_first_candidate():
    from catmatch.modules.matching.best_match import find_best_match

    result = find_best_match("abc", [_cat("abd"), _cat("abe")])
    assert result.match.name == "abd"


# ─── Near-match Shortlist ────────────────────────────────────────────────────

def test_shortlist_sorted_descending():
    from catmatch.modules.matching.best_match import find_best_match

    snapshot = [_cat("abxy"), _cat("xbcd"), _cat("abcde")]
    result = find_best_match("abcd", snapshot)

    assert [s.name for s in result.similar_categories] == ["abcde", "xbcd", "abxy"]
    assert [s.similarity for s in result.similar_categories] == [90, 75, 50]
    assert result.match.name == "abcde"
    assert result.confidence == 90
    assert result.should_create_new is False


def test_shortlist_truncated_to_three():
    from catmatch.modules.matching.best_match import find_best_match

    snapshot = [_cat("abce"), _cat("abcf"), _cat("abcg"), _cat("abch")]
    result = find_best_match("abcd", snapshot)

    assert len(result.similar_categories) == 3
    # Equal similarities keep snapshot order
    assert [s.name for s in result.similar_categories] == ["abce", "abcf", "abcg"]


def test_shortlist_excludes_weak_candidates():
    from catmatch.modules.matching.best_match import find_best_match

    result = find_best_match("abcd", [_cat("wxyz"), _cat("abxy")])
    assert [s.name for s in result.similar_categories] == ["abxy"]


def test_shortlist_overrides():
    from catmatch.modules.matching.best_match import find_best_match

    snapshot = [_cat("abce"), _cat("abcf"), _cat("abxy")]
    result = find_best_match(
        "abcd", snapshot, shortlist_min_similarity=0.6, shortlist_size=1
    )
    assert [s.name for s in result.similar_categories] == ["abce"]


def test_shortlist_present_for_related_suggestion(marketplace_categories):
    from catmatch.modules.matching.best_match import find_best_match

    result = find_best_match("Electronic Devices", marketplace_categories[:3])
    assert len(result.similar_categories) > 0
    assert result.similar_categories[0].name == "Electronics"


def test_shortlist_never_exceeds_three(marketplace_categories):
    from catmatch.modules.matching.best_match import find_best_match

    result = find_best_match("Clothes", marketplace_categories)
    assert len(result.similar_categories) <= 3
    sims = [s.similarity for s in result.similar_categories]
    assert sims == sorted(sims, reverse=True)


@pytest.mark.parametrize(
    "score,expected",
    [(0.0, 0), (0.004, 0), (0.125, 13), (0.5, 50), (0.875, 88), (1.0, 100)],
)
def test_to_confidence_rounds_half_up(score, expected):
    from catmatch.modules.matching.best_match import to_confidence
    assert to_confidence(score) == expected


# ─── Batch Matcher ───────────────────────────────────────────────────────────

def test_batch_match_preserves_order(two_categories):
    from catmatch.modules.matching.batch_matcher import batch_match

    results = batch_match(["smartphones", "", "Electronics"], two_categories)
    assert len(results) == 3
    assert results[0].match.name == "Smartphones"
    assert results[1].match is None
    assert results[2].match.name == "Electronics"


def test_batch_match_duplicates_are_identical(marketplace_categories):
    from catmatch.modules.matching.batch_matcher import batch_match

    results = batch_match(["Phone", "Gaming Consoles", "Phone"], marketplace_categories)
    assert results[0] == results[2]


def test_batch_match_empty_input(two_categories):
    from catmatch.modules.matching.batch_matcher import batch_match
    assert batch_match([], two_categories) == []


def test_batch_match_accepts_generator_snapshot():
    from catmatch.modules.matching.batch_matcher import batch_match

    snapshot = (c for c in [_cat("Electronics"), _cat("Laptops")])
    results = batch_match(["laptops", "electronics"], snapshot)
    assert [r.match.name for r in results] == ["Laptops", "Electronics"]


def test_batch_match_passes_threshold():
    from catmatch.modules.matching.batch_matcher import batch_match

    results = batch_match(["abc", "abc"], [_cat("abd")], threshold=0.5)
    assert all(r.should_create_new is False for r in results)


def test_batch_match_does_not_mutate_snapshot(marketplace_categories):
    from catmatch.modules.matching.batch_matcher import batch_match

    before = list(marketplace_categories)
    batch_match(["Clothes", "Furniture"], marketplace_categories)
    assert marketplace_categories == before
