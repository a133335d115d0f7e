"""Warnings reported by the tidy pipeline.

Warnings are plain output: they are collected in processing order and never
raised.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, ClassVar

from bibtidy.models.items import Entry

__all__ = [
    "WarningCode",
    "DuplicateCriterion",
    "TidyWarning",
    "MissingKeyWarning",
    "DuplicateKeyWarning",
    "DuplicateEntryWarning",
]


class WarningCode(StrEnum):
    """Stable warning identifiers."""

    MISSING_KEY = "MISSING_KEY"
    DUPLICATE_KEY = "DUPLICATE_KEY"
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"


class DuplicateCriterion(StrEnum):
    """Equivalence criteria used to detect duplicate entries.

    Attributes
    ----------
    KEY : str
        Identical citation keys.
    DOI : str
        Identical DOIs (alphanumeric, case-folded).
    CITATION : str
        Same first author surname and title prefix.
    ABSTRACT : str
        Same abstract prefix.
    """

    KEY = "key"
    DOI = "doi"
    CITATION = "citation"
    ABSTRACT = "abstract"


@dataclass
class TidyWarning:
    """Base warning attached to one entry."""

    code: ClassVar[WarningCode]

    entry: Entry
    message: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        return {
            "code": str(self.code),
            "message": self.message,
            "key": self.entry.key,
        }


@dataclass
class MissingKeyWarning(TidyWarning):
    """Entry has no citation key."""

    code: ClassVar[WarningCode] = WarningCode.MISSING_KEY


@dataclass
class DuplicateKeyWarning(TidyWarning):
    """Entry reuses a citation key seen earlier and was left in place."""

    code: ClassVar[WarningCode] = WarningCode.DUPLICATE_KEY


@dataclass
class DuplicateEntryWarning(TidyWarning):
    """Entry duplicates an earlier one.

    Attributes
    ----------
    duplicate_of : Entry
        Earlier entry that matched.
    criterion : DuplicateCriterion
        Criterion that matched.
    merged : bool
        True when the entry was merged into ``duplicate_of`` and dropped.
    """

    code: ClassVar[WarningCode] = WarningCode.DUPLICATE_ENTRY

    duplicate_of: Entry
    criterion: DuplicateCriterion
    merged: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary."""
        data = super().to_dict()
        data["duplicate_of"] = self.duplicate_of.key
        data["criterion"] = str(self.criterion)
        data["merged"] = self.merged
        return data
