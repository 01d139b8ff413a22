# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
CategoryMatch — Category Name Validator
Checks a candidate category name before it is admitted to the taxonomy.

Rules (evaluated in order, all of them, every time):
  1. Length within [name_min_length, name_max_length] (raw length)
  2. Only letters, digits, whitespace, hyphens and ampersands
  3. Title case (advisory: produces a suggestion, never an error)
  4. Brand-agnostic: no configured brand keyword as a substring

Unlike the matching functions this one is meant for names that will be
persisted, so every violation is reported at once and the caller can
show the full correction list in a single pass.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional

from catmatch.config import get_settings
from catmatch.models.result import ValidationResult
from catmatch.utils.logger import get_logger

log = get_logger(__name__)

_ALLOWED_CHARS = re.compile(r"[a-zA-Z0-9\s\-&]+")


def to_title_case(name: str) -> str:
    """Uppercase each space-separated word's first letter, lowercase the rest."""
    return " ".join(w[:1].upper() + w[1:].lower() for w in name.split(" "))


def _is_title_case(name: str) -> bool:
    # Empty words (double spaces) pass; so does a word starting with a digit
    return all(not w or w[0] == w[0].upper() for w in name.split(" "))


def validate_name(
    name: str,
    brand_keywords: Optional[Iterable[str]] = None,
) -> ValidationResult:
    """
    Validate a candidate category name.

    Args:
        name:           Proposed display name.
        brand_keywords: Lowercase brand terms that may not appear in the
                        name. Defaults to config BRAND_KEYWORDS.

    Returns:
        ValidationResult, valid iff no errors; suggestions is None when
        there is nothing to suggest.
    """
    settings = get_settings()
    if brand_keywords is None:
        brand_keywords = settings.brand_keywords

    min_len = settings.name_min_length
    max_len = settings.name_max_length

    errors: list[str] = []
    suggestions: list[str] = []

    # 1. Length
    if len(name) < min_len:
        errors.append(f"Category name must be at least {min_len} characters")
    if len(name) > max_len:
        errors.append(f"Category name must be at most {max_len} characters")

    # 2. Character set
    if not _ALLOWED_CHARS.fullmatch(name):
        errors.append(
            "Category name can only contain letters, numbers, spaces, "
            "hyphens, and ampersands"
        )

    # 3. Title case (advisory)
    if not _is_title_case(name):
        suggestions.append(f"Consider title case: {to_title_case(name)}")

    # 4. Brand keywords
    lower_name = name.lower()
    if any(brand.lower() in lower_name for brand in brand_keywords):
        errors.append(
            'Category names should be brand-agnostic '
            '(e.g., "Smartphones" not "iPhones")'
        )
        suggestions.append("Use generic terms instead of brand names")

    if errors:
        log.info("name_validation_failed", name=name, errors=len(errors))

    return ValidationResult(
        valid=not errors,
        errors=errors,
        suggestions=suggestions or None,
    )
