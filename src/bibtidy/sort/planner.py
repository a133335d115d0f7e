"""Entry ordering.

Entries are ordered by one or more sort keys. Comments, ``@string`` and
``@preamble`` items travel with the entry that follows them in the source.
Items after the last entry keep their place at the end.

Architecture
------------
* Each entry gets a signature: one case-folded value per sort key, None
  where the entry has no value.
* Non-entry items borrow the signature of the next entry.
* One stable sort per key, from the last key to the first, gives the same
  order as a single comparison over all keys in priority order.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from bibtidy.models import Entry, Item

__all__ = ["SortKey", "parse_sort_keys", "entry_sort_value", "plan_order", "sort_items"]

Signature = tuple[str | None, ...]


@dataclass(frozen=True)
class SortKey:
    """One sort criterion.

    Attributes
    ----------
    name : str
        ``key``, ``type`` or a lower-cased field name.
    descending : bool
        Reverse order for this key. Missing values still sort last.
    """

    name: str
    descending: bool = False

    @classmethod
    def parse(cls, spec: str) -> "SortKey":
        """Parse ``name`` or ``-name`` (descending)."""
        spec = spec.strip()
        descending = spec.startswith("-")
        name = spec[1:] if descending else spec
        return cls(name=name.strip().lower(), descending=descending)


def parse_sort_keys(specs: Sequence[str]) -> list[SortKey]:
    """Parse sort key specifications, skipping blanks."""
    return [SortKey.parse(spec) for spec in specs if spec.strip().lstrip("-")]


def entry_sort_value(entry: Entry, name: str) -> str | None:
    """Case-folded sort value of *entry* for key *name*, None if absent."""
    if name == "key":
        value = entry.key
    elif name == "type":
        value = entry.type
    else:
        value = entry.get_value(name)

    if value is None:
        return None
    return value.casefold()


def _assign_signatures(items: Sequence[Item], keys: Sequence[SortKey]) -> list[Signature | None]:
    signatures: list[Signature | None] = [None] * len(items)
    pending: list[int] = []

    for position, item in enumerate(items):
        if not isinstance(item, Entry):
            pending.append(position)
            continue

        signature = tuple(entry_sort_value(item, key.name) for key in keys)
        signatures[position] = signature

        # Preceding comments, strings and preambles move with this entry
        for meta_position in pending:
            signatures[meta_position] = signature
        pending.clear()

    return signatures


def plan_order(items: Sequence[Item], keys: Sequence[SortKey]) -> list[int]:
    """Compute the sorted order of *items*.

    Parameters
    ----------
    items : Sequence[Item]
        Items in source order (after duplicate merging).
    keys : Sequence[SortKey]
        Sort keys in priority order.

    Returns
    -------
    list[int]
        Positions into *items*, in output order.
    """
    signatures = _assign_signatures(items, keys)
    order = list(range(len(items)))

    def value(position: int, key_index: int) -> str | None:
        signature = signatures[position]
        return signature[key_index] if signature is not None else None

    for key_index in range(len(keys) - 1, -1, -1):
        values = {p: value(p, key_index) for p in order}
        order.sort(key=lambda p: values[p] or "", reverse=keys[key_index].descending)
        order.sort(key=lambda p: values[p] is None)

    return order


def sort_items(items: Sequence[Item], keys: Sequence[SortKey]) -> list[Item]:
    """Return *items* reordered by *keys*; the input is left untouched."""
    if not keys:
        return list(items)
    return [items[position] for position in plan_order(items, keys)]
