# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
CategoryMatch — Validation Module
Public API for category name validation.
"""

from catmatch.modules.validation.name_validator import to_title_case, validate_name

__all__ = [
    "validate_name",
    "to_title_case",
]
