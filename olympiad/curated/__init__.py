"""Curated question bank: row mapping and curation checks."""
from olympiad.curated.mapper import map_curated_row, store_id_of
from olympiad.curated.validator import (
    CurationIssue,
    CurationReport,
    IssueCode,
    find_answer_index,
    validate_curated_row,
)

__all__ = [
    "CurationIssue",
    "CurationReport",
    "IssueCode",
    "find_answer_index",
    "map_curated_row",
    "store_id_of",
    "validate_curated_row",
]
