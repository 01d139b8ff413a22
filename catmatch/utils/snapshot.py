# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
CategoryMatch — Category Snapshot Loader
Reads a taxonomy snapshot exported as JSON, either a bare list of
categories or an object with a "categories" list:

    [{"name": "Electronics", "slug": "electronics"},
     {"name": "Smartphones", "slug": "smartphones", "parentId": "electronics"}]

Entries without a slug get one derived from their name.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from catmatch.errors import SnapshotLoadError
from catmatch.models.category import Category, generate_slug
from catmatch.utils.logger import get_logger

log = get_logger(__name__)

_CATEGORY_LIST = TypeAdapter(list[Category])


def load_category_snapshot(path: Path) -> list[Category]:
    """
    Load and validate a category snapshot file.

    Args:
        path: Path to a JSON snapshot.

    Returns:
        Categories in file order.

    Raises:
        SnapshotLoadError: If the file is missing, not valid JSON, or does
                           not describe a list of categories.
    """
    if not path.is_file():
        raise SnapshotLoadError(f"Category snapshot not found at path: {path}")

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SnapshotLoadError(
            f"Category snapshot {path} is not valid JSON: {e}"
        ) from e

    if isinstance(raw, dict):
        raw = raw.get("categories")

    try:
        categories = _CATEGORY_LIST.validate_python(raw)
    except ValidationError as e:
        raise SnapshotLoadError(
            f"Category snapshot {path} is malformed: "
            f"{e.error_count()} validation error(s)"
        ) from e

    categories = [
        c if c.slug else c.model_copy(update={"slug": generate_slug(c.name)})
        for c in categories
    ]

    log.info("category_snapshot_loaded", path=str(path), n_categories=len(categories))
    return categories
