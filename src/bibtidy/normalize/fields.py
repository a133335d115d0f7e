"""Field value normalization.

Builds an entry's field map from its raw fields. The transformation order is
fixed: brace stripping runs before the all-caps check, URL encoding runs
before escaping, page ranges and months come last.
"""

from collections.abc import Collection

from bibtidy.models import Entry, NormalizedField, RawField, ValueKind

from ._helpers import (
    ALL_CAPS_RE,
    DOUBLE_BRACE_RE,
    PAGE_DASH_RE,
    URL_UNDERSCORE_RE,
    collapse_whitespace,
    title_case,
)
from .escape import escape_special_characters
from .months import to_month_macro

__all__ = ["normalize_field", "normalize_entry"]


def normalize_field(
    name: str,
    raw: RawField,
    *,
    strip_enclosing_braces: bool = False,
    drop_all_caps: bool = False,
    encode_urls: bool = False,
    escape: bool = True,
    abbreviate_months: bool = False,
) -> NormalizedField:
    """Normalize a single raw field value.

    Parameters
    ----------
    name : str
        Lower-cased field name.
    raw : RawField
        Field as parsed.
    strip_enclosing_braces : bool, optional
        Remove one extra brace pair wrapping the whole value.
    drop_all_caps : bool, optional
        Title-case values that contain no lowercase letter.
    encode_urls : bool, optional
        Percent-encode underscores in ``url`` fields.
    escape : bool, optional
        Escape special characters, by default True.
    abbreviate_months : bool, optional
        Turn recognised ``month`` values into bare three-letter macros.

    Returns
    -------
    NormalizedField
        Trimmed value with its datatype.
    """
    datatype = raw.datatype

    if datatype == ValueKind.CONCATENATED:
        # Macro expressions must not be touched
        return NormalizedField(value=raw.value.strip(), datatype=datatype)

    value = collapse_whitespace(raw.value)

    if strip_enclosing_braces:
        value = DOUBLE_BRACE_RE.sub(r"\1", value)

    if drop_all_caps and ALL_CAPS_RE.match(value):
        value = title_case(value)

    if name == "url" and encode_urls:
        value = URL_UNDERSCORE_RE.sub(r"\\%5F", value)

    if escape:
        value = escape_special_characters(value)

    if name == "pages":
        value = PAGE_DASH_RE.sub(r"\1--\2", value)

    if name == "month" and abbreviate_months:
        macro = to_month_macro(value)
        if macro is not None:
            value, datatype = macro, ValueKind.BARE

    return NormalizedField(value=value.strip(), datatype=datatype)


def normalize_entry(
    entry: Entry,
    *,
    omit: Collection[str] = frozenset(),
    strip_enclosing_braces: bool = False,
    drop_all_caps: bool = False,
    encode_urls: bool = False,
    escape: bool = True,
    abbreviate_months: bool = False,
) -> Entry:
    """Populate ``entry.field_map`` from ``entry.fields``.

    Field names are lower-cased. Omitted fields are skipped and, when a name
    repeats within the entry, the first occurrence wins.

    Parameters
    ----------
    entry : Entry
        Entry to normalize in place.
    omit : Collection[str], optional
        Lower-cased field names to drop.
    strip_enclosing_braces, drop_all_caps, encode_urls, escape, abbreviate_months
        Forwarded to :func:`normalize_field`.

    Returns
    -------
    Entry
        The same entry, for chaining.
    """
    entry.field_map = {}

    for raw in entry.fields:
        name = raw.name.lower()
        if name in omit or name in entry.field_map:
            continue
        entry.field_map[name] = normalize_field(
            name,
            raw,
            strip_enclosing_braces=strip_enclosing_braces,
            drop_all_caps=drop_all_caps,
            encode_urls=encode_urls,
            escape=escape,
            abbreviate_months=abbreviate_months,
        )

    return entry
