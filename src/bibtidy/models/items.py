"""Item data models for parsed BibTeX documents.

A document is an ordered list of items. Entries are mutated in place by the
tidy passes (field maps populated and merged, duplicate flags set); every
other item type is passed through untouched.
"""

from dataclasses import dataclass, field
from enum import StrEnum

__all__ = [
    "ValueKind",
    "RawField",
    "NormalizedField",
    "StringDef",
    "Preamble",
    "Comment",
    "Entry",
    "Item",
]


class ValueKind(StrEnum):
    """How a field value was delimited in the source text.

    Attributes
    ----------
    BRACED : str
        ``{...}`` value.
    QUOTED : str
        ``"..."`` value.
    BARE : str
        Unquoted number or macro name (e.g. ``1998``, ``mar``).
    CONCATENATED : str
        ``#`` concatenation of several parts, kept as raw expression text.
    """

    BRACED = "braced"
    QUOTED = "quoted"
    BARE = "bare"
    CONCATENATED = "concatenated"


@dataclass(frozen=True)
class RawField:
    """Field as produced by the parser.

    Attributes
    ----------
    name : str
        Field name with its original casing.
    value : str
        Value without its outer delimiters. For concatenated values this is
        the raw expression, e.g. ``"Journal of " # jtea``.
    datatype : ValueKind
        Delimiter kind of the value.
    """

    name: str
    value: str
    datatype: ValueKind


@dataclass(frozen=True)
class NormalizedField:
    """Normalized field value stored in an entry's field map."""

    value: str
    datatype: ValueKind


@dataclass
class StringDef:
    """``@string{name = raw}`` definition, passed through verbatim."""

    name: str
    raw: str


@dataclass
class Preamble:
    """``@preamble{raw}`` block, passed through verbatim."""

    raw: str


@dataclass
class Comment:
    """Free text between blocks, including explicit ``@comment`` blocks."""

    text: str


@dataclass(eq=False)
class Entry:
    """Bibliographic entry.

    Entries compare by identity so they can be used as dictionary keys by the
    sort planner and referenced from warnings.

    Attributes
    ----------
    type : str
        Entry type as written (``article``, ``Book``...). May be empty.
    key : str | None
        Citation key, None when the entry has none.
    fields : list[RawField]
        Raw fields in source order, repeats included.
    field_map : dict[str, NormalizedField]
        Normalized values keyed by lower-cased field name, in first-seen
        order. Populated by the field normalizer.
    dropped_as_duplicate : bool
        Set when the entry was merged into an earlier one. Dropped entries
        are not serialized.
    """

    type: str
    key: str | None
    fields: list[RawField] = field(default_factory=list)
    field_map: dict[str, NormalizedField] = field(default_factory=dict)
    dropped_as_duplicate: bool = False

    def get_value(self, name: str) -> str | None:
        """Return the normalized value of field *name*, if present."""
        normalized = self.field_map.get(name.lower())
        return normalized.value if normalized is not None else None


Item = StringDef | Preamble | Comment | Entry
