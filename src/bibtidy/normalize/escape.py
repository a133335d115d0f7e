"""LaTeX escaping of special characters in field values."""

from collections.abc import Mapping

from ._latex_table import SPECIAL_CHARACTERS

__all__ = ["escape_special_characters"]


def escape_special_characters(
    text: str,
    table: Mapping[int, str] = SPECIAL_CHARACTERS,
) -> str:
    """Replace characters by their LaTeX escape sequence.

    Every character is looked up by code point in *table*. A backslash is
    copied as-is and the character right after it is copied verbatim, so an
    existing sequence such as ``\\&`` is never escaped twice.

    Parameters
    ----------
    text : str
        Field value.
    table : Mapping[int, str], optional
        Code point to escape sequence mapping, by default the bundled table.

    Returns
    -------
    str
        Escaped value.

    Examples
    --------
        >>> escape_special_characters("Tea # Biscuits")
        'Tea \\\\# Biscuits'
        >>> escape_special_characters("Tea \\\\& Biscuits")
        'Tea \\\\& Biscuits'
    """
    out: list[str] = []
    escaped = False

    for char in text:
        if escaped:
            escaped = False
            out.append(char)
            continue

        if char == "\\":
            escaped = True
            out.append(char)
            continue

        out.append(table.get(ord(char), char))

    return "".join(out)
