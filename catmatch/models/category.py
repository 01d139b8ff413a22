# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
CategoryMatch — Taxonomy Category Model
Read-only view of one persisted taxonomy entry, as supplied by the
caller's snapshot provider. The engine never mutates categories.
"""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

_NON_SLUG_CHARS = re.compile(r"[^\w\s-]", re.ASCII)
_WHITESPACE_RUN = re.compile(r"\s+")
_HYPHEN_RUN = re.compile(r"-+")


def generate_slug(name: str) -> str:
    """
    Derive a URL slug from a display name.

    'Home & Garden' → 'home-garden', 'Men's Clothing' → 'mens-clothing'.
    Only surrounding whitespace is trimmed; leading or trailing hyphens
    survive so the slug stays a faithful image of the name.
    """
    slug = name.lower()
    slug = _NON_SLUG_CHARS.sub("", slug)
    slug = _WHITESPACE_RUN.sub("-", slug)
    slug = _HYPHEN_RUN.sub("-", slug)
    return slug.strip()


class Category(BaseModel):
    """
    A single taxonomy entry. Only `name` takes part in matching;
    `slug` and `parent_id` are carried through to results untouched.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., description="Display name, original casing preserved")
    slug: str = Field("", description="Stable identifier, unused by matching")
    parent_id: Optional[str] = Field(
        None,
        alias="parentId",
        description="Parent category reference, unused by matching",
    )

    @classmethod
    def from_name(cls, name: str, parent_id: Optional[str] = None) -> Category:
        """Build a category for a brand-new name, deriving its slug."""
        return cls(name=name, slug=generate_slug(name), parent_id=parent_id)
