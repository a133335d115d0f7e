"""Merge strategies for duplicate entries.

New strategies are added by extending ``MERGE_STRATEGIES``.
"""

from collections.abc import Callable
from enum import StrEnum

from bibtidy.models import Entry

__all__ = ["MergeStrategy", "MERGE_STRATEGIES", "merge_entries", "parse_strategy"]


class MergeStrategy(StrEnum):
    """How an absorbed duplicate's fields flow into the kept entry.

    Attributes
    ----------
    FIRST : str
        Keep the first entry untouched.
    LAST : str
        Replace the kept entry's fields with the duplicate's.
    COMBINE : str
        Add fields the kept entry does not have yet.
    OVERWRITE : str
        Add all fields, replacing existing values.
    """

    FIRST = "first"
    LAST = "last"
    COMBINE = "combine"
    OVERWRITE = "overwrite"


def _merge_first(kept: Entry, absorbed: Entry) -> None:
    return None


def _merge_last(kept: Entry, absorbed: Entry) -> None:
    # The absorbed map was normalized from these same raw fields
    kept.fields = list(absorbed.fields)
    kept.field_map = dict(absorbed.field_map)


def _merge_combine(kept: Entry, absorbed: Entry) -> None:
    for name, value in absorbed.field_map.items():
        if name not in kept.field_map:
            kept.field_map[name] = value


def _merge_overwrite(kept: Entry, absorbed: Entry) -> None:
    for name, value in absorbed.field_map.items():
        kept.field_map[name] = value


MERGE_STRATEGIES: dict[MergeStrategy, Callable[[Entry, Entry], None]] = {
    MergeStrategy.FIRST: _merge_first,
    MergeStrategy.LAST: _merge_last,
    MergeStrategy.COMBINE: _merge_combine,
    MergeStrategy.OVERWRITE: _merge_overwrite,
}


def parse_strategy(name: str | MergeStrategy) -> MergeStrategy:
    """Convert a strategy name to :class:`MergeStrategy`.

    Raises
    ------
    ValueError
        If *name* is not a known strategy.
    """
    try:
        return MergeStrategy(str(name).strip().lower())
    except ValueError:
        valid = ", ".join(s.value for s in MergeStrategy)
        raise ValueError(f"Unknown merge strategy: {name!r}. Valid strategies: {valid}") from None


def merge_entries(kept: Entry, absorbed: Entry, strategy: MergeStrategy) -> Entry:
    """Merge *absorbed* into *kept* and flag *absorbed* as dropped.

    Parameters
    ----------
    kept : Entry
        Earlier entry that survives.
    absorbed : Entry
        Duplicate entry; it stays in the entry list but is not serialized.
    strategy : MergeStrategy
        Merge strategy.

    Returns
    -------
    Entry
        The kept entry.
    """
    MERGE_STRATEGIES[strategy](kept, absorbed)
    absorbed.dropped_as_duplicate = True
    return kept
