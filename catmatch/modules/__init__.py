# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
CategoryMatch — Engine Modules
matching:   similarity scoring, best-match search, batch matching, triage
validation: category name rules
"""
