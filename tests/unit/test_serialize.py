"""Tests for BibTeX serialization."""

from collections.abc import Callable

import pytest

from bibtidy.models import Comment, Entry, NormalizedField, Preamble, StringDef, ValueKind
from bibtidy.serialize import render_comment, render_entry, render_value, serialize

# ---------------------------------------------------------------------------
# render_value
# ---------------------------------------------------------------------------


def _field(value: str, datatype: ValueKind) -> NormalizedField:
    return NormalizedField(value=value, datatype=datatype)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("name", "field", "numeric", "curly", "expected"),
    [
        ("year", _field("1942", ValueKind.BRACED), True, False, "1942"),
        ("year", _field("1942", ValueKind.BRACED), False, False, "{1942}"),
        ("year", _field("0042", ValueKind.QUOTED), True, False, '"0042"'),
        ("month", _field("March", ValueKind.BRACED), True, False, "mar"),
        ("month", _field("Spring", ValueKind.BRACED), True, False, "{Spring}"),
        ("note", _field("March", ValueKind.BRACED), True, False, "{March}"),
        ("title", _field("Tea", ValueKind.QUOTED), False, False, '"Tea"'),
        ("title", _field("Tea", ValueKind.QUOTED), False, True, "{Tea}"),
        ("month", _field("mar", ValueKind.BARE), False, False, "mar"),
        ("month", _field("mar", ValueKind.BARE), False, True, "{mar}"),
        ("journal", _field('"J. " # jtea', ValueKind.CONCATENATED), False, False, '"J. " # jtea'),
        ("journal", _field('"J. " # jtea', ValueKind.CONCATENATED), False, True, '{"J. " # jtea}'),
    ],
)
def test_render_value_rules(
    name: str,
    field: NormalizedField,
    numeric: bool,
    curly: bool,
    expected: str,
) -> None:
    """Test value delimiters follow the rendering rules in order."""
    assert render_value(name, field, numeric=numeric, curly=curly) == expected


# ---------------------------------------------------------------------------
# render_entry
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_render_entry_alignment(make_entry: Callable[..., Entry]) -> None:
    """Test names are padded so values start at the alignment column."""
    entry = make_entry("sweig42", entry_type="Book", title="The impossible book")

    assert render_entry(entry, indent="  ", align=14) == (
        "@book{sweig42,\n  title         = {The impossible book}\n}\n"
    )


@pytest.mark.unit
def test_render_entry_without_alignment(make_entry: Callable[..., Entry]) -> None:
    """Test align=1 puts one space between name and '='."""
    entry = make_entry("a", title="T", year=("2000", ValueKind.BARE))

    assert render_entry(entry, indent="\t", align=1) == (
        "@article{a,\n\ttitle = {T},\n\tyear = 2000\n}\n"
    )


@pytest.mark.unit
def test_render_entry_long_names_not_truncated(make_entry: Callable[..., Entry]) -> None:
    """Test names longer than the column are kept whole."""
    entry = make_entry("a", verylongfieldname="x")

    assert "  verylongfieldname = {x}" in render_entry(entry, align=5)


@pytest.mark.unit
def test_render_entry_without_key(make_entry: Callable[..., Entry]) -> None:
    """Test entries without a key render an empty key slot."""
    entry = make_entry(None, title="T")

    assert render_entry(entry).startswith("@article{,\n")


@pytest.mark.unit
def test_render_entry_field_order(make_entry: Callable[..., Entry]) -> None:
    """Test ordered fields come first, then the rest in first-seen order."""
    entry = make_entry("a", note="N", year="2000", title="T", pages="1--2")

    rendered = render_entry(entry, align=1, field_order=("title", "author", "year"))

    names = [line.split(" = ")[0].strip() for line in rendered.splitlines()[1:-1]]
    assert names == ["title", "year", "note", "pages"]


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_render_comment_tidy() -> None:
    """Test tidy comments are trimmed to one trailing newline."""
    assert render_comment(Comment("\n\n  % hello  \n\n")) == "% hello\n"
    assert render_comment(Comment("\n \n")) == ""


@pytest.mark.unit
def test_render_comment_verbatim() -> None:
    """Test untidy comments keep their inner whitespace."""
    assert render_comment(Comment("\n% hello\n\n"), tidy=False) == "% hello\n\n"


# ---------------------------------------------------------------------------
# serialize
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_serialize_passthrough_items(make_entry: Callable[..., Entry]) -> None:
    """Test strings and preambles keep their original wrapper."""
    items = [
        StringDef("jtea", "{Journal of Tea}"),
        Preamble('"\\newcommand{\\noop}[1]{}"'),
        make_entry("a", journal=("jtea", ValueKind.BARE)),
    ]

    assert serialize(items, align=1) == (
        "@string{jtea = {Journal of Tea}}\n"
        '@preamble{"\\newcommand{\\noop}[1]{}"}\n'
        "@article{a,\n  journal = jtea\n}\n"
    )


@pytest.mark.unit
def test_serialize_skips_dropped_entries(make_entry: Callable[..., Entry]) -> None:
    """Test dropped duplicates are not rendered."""
    kept = make_entry("kept")
    dropped = make_entry("dropped")
    dropped.dropped_as_duplicate = True

    text = serialize([kept, dropped])

    assert "@article{kept" in text
    assert "dropped" not in text


@pytest.mark.unit
def test_serialize_comments(make_entry: Callable[..., Entry]) -> None:
    """Test comments are kept, trimmed or stripped."""
    items = [Comment("% header\n\n"), make_entry("a")]

    assert serialize(items).startswith("% header\n@article{a")
    assert serialize(items, tidy_comments=False).startswith("% header\n\n@article{a")
    assert serialize(items, strip_comments=True).startswith("@article{a")


@pytest.mark.unit
def test_serialize_single_trailing_newline(make_entry: Callable[..., Entry]) -> None:
    """Test the document ends with exactly one newline."""
    items = [make_entry("a"), Comment("\n% end\n\n\n")]

    text = serialize(items, tidy_comments=False)

    assert text.endswith("% end\n")
    assert not text.endswith("\n\n")


@pytest.mark.unit
def test_serialize_empty_document() -> None:
    """Test an empty item list renders a lone newline."""
    assert serialize([]) == "\n"
