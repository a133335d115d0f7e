"""Canonical BibTeX rendering.

Output is deterministic: the same items and settings always produce the
same text, ending in exactly one newline.
"""

import re
from collections.abc import Sequence

from bibtidy.models import Comment, Entry, Item, NormalizedField, Preamble, StringDef, ValueKind
from bibtidy.normalize import MONTH_SET

__all__ = ["render_value", "render_entry", "render_comment", "serialize"]

NUMERIC_RE = re.compile(r"^[1-9][0-9]*$")
COMMENT_EDGE_RE = re.compile(r"\A[ \t]*\n|[ \t]*\Z")


def render_value(name: str, field: NormalizedField, *, numeric: bool, curly: bool) -> str:
    """Render a field value with the delimiters it should carry.

    Parameters
    ----------
    name : str
        Lower-cased field name.
    field : NormalizedField
        Normalized value.
    numeric : bool
        Emit integers and month macros unquoted.
    curly : bool
        Force braces around every value not emitted unquoted by *numeric*.

    Returns
    -------
    str
        Rendered value.
    """
    value = field.value
    month = value[:3].lower()

    if numeric and NUMERIC_RE.match(value):
        return value
    if numeric and name == "month" and month in MONTH_SET:
        return month
    if field.datatype == ValueKind.BRACED or curly:
        return f"{{{value}}}"
    if field.datatype == ValueKind.QUOTED:
        return f'"{value}"'
    return value


def render_entry(
    entry: Entry,
    *,
    indent: str = "  ",
    align: int = 14,
    field_order: Sequence[str] = (),
    numeric: bool = False,
    curly: bool = False,
) -> str:
    """Render one entry.

    Fields named in *field_order* come first in that order, followed by the
    entry's remaining fields in first-seen order.
    """
    parts = [f"@{entry.type.lower()}{{"]
    if entry.key:
        parts.append(entry.key)

    names = dict.fromkeys([*field_order, *entry.field_map])
    for name in names:
        field = entry.field_map.get(name)
        if field is None:
            continue
        rendered = render_value(name, field, numeric=numeric, curly=curly)
        parts.append(f",\n{indent}{name.ljust(align - 1)} = {rendered}")

    parts.append("\n}\n")
    return "".join(parts)


def render_comment(comment: Comment, *, tidy: bool = True) -> str:
    """Render a comment, trimmed to one trailing newline when *tidy*."""
    if tidy:
        text = comment.text.strip()
        return f"{text}\n" if text else ""
    # Keep comment whitespace from running into the next entry's first line
    return COMMENT_EDGE_RE.sub("", comment.text)


def serialize(
    items: Sequence[Item],
    *,
    indent: str = "  ",
    align: int = 14,
    field_order: Sequence[str] = (),
    numeric: bool = False,
    curly: bool = False,
    strip_comments: bool = False,
    tidy_comments: bool = True,
) -> str:
    """Render items to BibTeX text.

    Entries flagged as dropped duplicates are skipped.

    Parameters
    ----------
    items : Sequence[Item]
        Items in output order.
    indent : str, optional
        Field indentation, by default two spaces.
    align : int, optional
        Column width used to pad field names, by default 14.
    field_order : Sequence[str], optional
        Field names rendered first, in this order.
    numeric : bool, optional
        Emit integers and month macros unquoted.
    curly : bool, optional
        Force braces around values.
    strip_comments : bool, optional
        Drop comments entirely.
    tidy_comments : bool, optional
        Trim whitespace around comments, by default True.

    Returns
    -------
    str
        Document text ending with exactly one newline.
    """
    chunks: list[str] = []

    for item in items:
        if isinstance(item, StringDef):
            chunks.append(f"@string{{{item.name} = {item.raw}}}\n")
        elif isinstance(item, Preamble):
            chunks.append(f"@preamble{{{item.raw}}}\n")
        elif isinstance(item, Comment):
            if not strip_comments:
                chunks.append(render_comment(item, tidy=tidy_comments))
        elif not item.dropped_as_duplicate:
            chunks.append(
                render_entry(
                    item,
                    indent=indent,
                    align=align,
                    field_order=field_order,
                    numeric=numeric,
                    curly=curly,
                )
            )

    text = "".join(chunks)
    return text.rstrip("\n") + "\n"
