"""Shared data types for bibtidy.

This package contains the item union produced by the parser and mutated by
the tidy passes, plus the warning types the pipeline reports.
"""

from bibtidy.models.items import (
    Comment,
    Entry,
    Item,
    NormalizedField,
    Preamble,
    RawField,
    StringDef,
    ValueKind,
)
from bibtidy.models.warnings import (
    DuplicateCriterion,
    DuplicateEntryWarning,
    DuplicateKeyWarning,
    MissingKeyWarning,
    TidyWarning,
    WarningCode,
)

__all__ = [
    # Items
    "Item",
    "Entry",
    "Comment",
    "Preamble",
    "StringDef",
    "RawField",
    "NormalizedField",
    "ValueKind",
    # Warnings
    "TidyWarning",
    "MissingKeyWarning",
    "DuplicateKeyWarning",
    "DuplicateEntryWarning",
    "WarningCode",
    "DuplicateCriterion",
]
