"""Month macros recognised by BibTeX."""

MONTH_MACROS: tuple[str, ...] = (
    "jan",
    "feb",
    "mar",
    "apr",
    "may",
    "jun",
    "jul",
    "aug",
    "sep",
    "oct",
    "nov",
    "dec",
)

MONTH_SET = frozenset(MONTH_MACROS)

# Case-folded month spellings → macro
MONTH_CONVERSIONS: dict[str, str] = {
    **{str(number): macro for number, macro in enumerate(MONTH_MACROS, start=1)},
    **{f"{number:02d}": macro for number, macro in enumerate(MONTH_MACROS, start=1)},
    **{macro: macro for macro in MONTH_MACROS},
    "january": "jan",
    "february": "feb",
    "march": "mar",
    "april": "apr",
    "june": "jun",
    "july": "jul",
    "august": "aug",
    "september": "sep",
    "october": "oct",
    "november": "nov",
    "december": "dec",
}


def to_month_macro(value: str) -> str | None:
    """Return the three-letter macro for a month spelling, or None."""
    return MONTH_CONVERSIONS.get(value.strip().casefold().rstrip("."))
