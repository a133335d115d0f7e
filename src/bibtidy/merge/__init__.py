"""Merge resolution for duplicate entries."""

from bibtidy.merge.processor import process_duplicate
from bibtidy.merge.strategies import (
    MERGE_STRATEGIES,
    MergeStrategy,
    merge_entries,
    parse_strategy,
)

__all__ = [
    "MergeStrategy",
    "MERGE_STRATEGIES",
    "merge_entries",
    "parse_strategy",
    "process_duplicate",
]
