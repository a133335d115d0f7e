"""Duplicate index: classify entries as unique or duplicates of earlier ones."""

from collections.abc import Iterable
from dataclasses import dataclass

from bibtidy.models import DuplicateCriterion, Entry

from .criteria import SIGNATURES

__all__ = ["DuplicateMatch", "DuplicateIndex"]


@dataclass(frozen=True)
class DuplicateMatch:
    """Outcome of classifying a duplicate entry.

    Attributes
    ----------
    criterion : DuplicateCriterion
        Criterion whose signature matched.
    duplicate_of : Entry
        First entry registered with that signature.
    merge : bool
        Whether the criterion is merge-enabled.
    """

    criterion: DuplicateCriterion
    duplicate_of: Entry
    merge: bool


class DuplicateIndex:
    """Per-run signature maps, one per criterion.

    The key criterion is always checked first, merge-enabled only when it was
    requested. Requested criteria follow in their configured order.

    Parameters
    ----------
    criteria : Iterable[DuplicateCriterion], optional
        Criteria requested by the caller.
    merge : bool, optional
        Whether requested criteria merge duplicates (True) or only warn.
    """

    def __init__(
        self,
        criteria: Iterable[DuplicateCriterion] = (),
        *,
        merge: bool = False,
    ) -> None:
        requested = list(dict.fromkeys(criteria))

        self._checks: list[tuple[DuplicateCriterion, bool]] = [
            (DuplicateCriterion.KEY, merge and DuplicateCriterion.KEY in requested)
        ]
        self._checks.extend(
            (criterion, merge) for criterion in requested if criterion != DuplicateCriterion.KEY
        )

        self._maps: dict[DuplicateCriterion, dict[str, Entry]] = {
            criterion: {} for criterion, _ in self._checks
        }

    @property
    def checks(self) -> tuple[tuple[DuplicateCriterion, bool], ...]:
        """Criteria in check order, each paired with whether a match merges."""
        return tuple(self._checks)

    def classify(self, entry: Entry) -> DuplicateMatch | None:
        """Check *entry* against every criterion in priority order.

        The first criterion that matches wins and later criteria are not
        consulted. For every criterion checked without a match, *entry*
        becomes the representative of its signature.

        Parameters
        ----------
        entry : Entry
            Normalized entry.

        Returns
        -------
        DuplicateMatch | None
            Match details, or None if the entry is unique.
        """
        for criterion, merge in self._checks:
            signature = SIGNATURES[criterion](entry)
            if signature is None:
                continue

            seen = self._maps[criterion]
            duplicate_of = seen.get(signature)
            if duplicate_of is None:
                seen[signature] = entry
                continue

            return DuplicateMatch(criterion=criterion, duplicate_of=duplicate_of, merge=merge)

        return None
