# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
CategoryMatch — Error Types
The matching and validation functions never raise; these exceptions are
only used at the I/O edge (loading snapshots from disk).
"""


class CategoryMatchError(Exception):
    """Base class for all CategoryMatch errors."""


class SnapshotLoadError(CategoryMatchError, ValueError):
    """Raised when a category snapshot file is missing or malformed."""
