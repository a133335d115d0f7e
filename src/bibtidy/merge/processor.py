"""Apply duplicate matches: merge where enabled, warn otherwise."""

from bibtidy.duplicates import DuplicateMatch
from bibtidy.merge.strategies import MergeStrategy, merge_entries
from bibtidy.models import (
    DuplicateCriterion,
    DuplicateEntryWarning,
    DuplicateKeyWarning,
    Entry,
    TidyWarning,
)

__all__ = ["process_duplicate"]


def process_duplicate(
    entry: Entry,
    match: DuplicateMatch,
    strategy: MergeStrategy,
) -> TidyWarning:
    """Resolve a duplicate match and build the matching warning.

    Parameters
    ----------
    entry : Entry
        Entry classified as a duplicate.
    match : DuplicateMatch
        Classification result.
    strategy : MergeStrategy
        Strategy used when the criterion is merge-enabled.

    Returns
    -------
    TidyWarning
        ``DuplicateEntryWarning`` for merged (or warn-only non-key) matches,
        ``DuplicateKeyWarning`` for warn-only key matches.
    """
    kept = match.duplicate_of

    if match.merge:
        merge_entries(kept, entry, strategy)
        return DuplicateEntryWarning(
            entry=entry,
            message=f"{entry.key} appears to be a duplicate of {kept.key} and was removed.",
            duplicate_of=kept,
            criterion=match.criterion,
        )

    if match.criterion == DuplicateCriterion.KEY:
        return DuplicateKeyWarning(
            entry=entry,
            message=f"{entry.key} is a duplicate entry key.",
        )

    return DuplicateEntryWarning(
        entry=entry,
        message=f"{entry.key} appears to be a duplicate of {kept.key}.",
        duplicate_of=kept,
        criterion=match.criterion,
        merged=False,
    )
