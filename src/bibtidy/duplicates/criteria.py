"""Signature functions for duplicate-detection criteria.

Each criterion maps an entry to a signature string, or to None when the
entry lacks the data the criterion needs. Two entries with equal
signatures under the same criterion are duplicates.
"""

import re
from collections.abc import Callable

from bibtidy.models import DuplicateCriterion, Entry

__all__ = [
    "SIGNATURES",
    "DEFAULT_CRITERIA",
    "alpha_num",
    "key_signature",
    "doi_signature",
    "citation_signature",
    "abstract_signature",
    "parse_criterion",
]

NON_ALNUM_RE = re.compile(r"[^0-9A-Za-z]")
AUTHOR_SPLIT_RE = re.compile(r",| and ")

TITLE_PREFIX_LEN = 50
ABSTRACT_PREFIX_LEN = 100

DEFAULT_CRITERIA: tuple[DuplicateCriterion, ...] = (
    DuplicateCriterion.DOI,
    DuplicateCriterion.CITATION,
    DuplicateCriterion.ABSTRACT,
)


def alpha_num(text: str | None) -> str | None:
    """Keep ASCII letters and digits only, lower-cased.

    Returns None when *text* is None so callers can tell a missing value
    from an empty signature.
    """
    if text is None:
        return None
    return NON_ALNUM_RE.sub("", text).lower()


def key_signature(entry: Entry) -> str | None:
    """Citation key verbatim; entries without a key never match."""
    return entry.key or None


def doi_signature(entry: Entry) -> str | None:
    """Alphanumeric, case-folded DOI."""
    return alpha_num(entry.get_value("doi")) or None


def citation_signature(entry: Entry) -> str | None:
    """First author token and title prefix, e.g. ``sweig:theimpossiblebook``.

    The first author is everything before the first comma or `` and ``.
    Entries missing an author or a title have no signature.
    """
    title = entry.get_value("title")
    author = entry.get_value("author")
    if not title or not author:
        return None

    first_author = AUTHOR_SPLIT_RE.split(author, maxsplit=1)[0]
    return f"{alpha_num(first_author)}:{alpha_num(title)[:TITLE_PREFIX_LEN]}"


def abstract_signature(entry: Entry) -> str | None:
    """First 100 alphanumeric, case-folded characters of the abstract."""
    abstract = alpha_num(entry.get_value("abstract"))
    if not abstract:
        return None
    return abstract[:ABSTRACT_PREFIX_LEN]


SIGNATURES: dict[DuplicateCriterion, Callable[[Entry], str | None]] = {
    DuplicateCriterion.KEY: key_signature,
    DuplicateCriterion.DOI: doi_signature,
    DuplicateCriterion.CITATION: citation_signature,
    DuplicateCriterion.ABSTRACT: abstract_signature,
}


def parse_criterion(name: str | DuplicateCriterion) -> DuplicateCriterion:
    """Convert a criterion name to :class:`DuplicateCriterion`.

    Raises
    ------
    ValueError
        If *name* is not a known criterion.
    """
    try:
        return DuplicateCriterion(str(name).strip().lower())
    except ValueError:
        valid = ", ".join(c.value for c in DuplicateCriterion)
        raise ValueError(
            f"Unknown duplicate criterion: {name!r}. Valid criteria: {valid}"
        ) from None
