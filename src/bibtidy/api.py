"""Public API for tidying BibTeX documents.

This module provides the main public API for bibtidy, enabling:
- Parsing BibTeX text into items
- Tidying text or files with keyword options
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from bibtidy.models import Item
from bibtidy.parse import parse_bibtex, read_bibtex_file

if TYPE_CHECKING:
    from bibtidy.engine.runner import TidyResult

__all__ = [
    "parse",
    "tidy",
    "tidy_file",
]


def parse(text: str) -> list[Item]:
    """Parse BibTeX text into an ordered item list.

    Parameters
    ----------
    text : str
        BibTeX document.

    Returns
    -------
    list[Item]
        Strings, preambles, comments and entries in source order.

    Raises
    ------
    BibTeXSyntaxError
        If the text is not structurally valid.
    """
    return parse_bibtex(text)


def tidy(text: str, **options: Any) -> TidyResult:
    """Tidy BibTeX text.

    Parameters
    ----------
    text : str
        BibTeX document.
    **options : Any
        Any :class:`~bibtidy.engine.TidyOptions` field.

    Returns
    -------
    TidyResult
        Tidied text, warnings and entries.

    Raises
    ------
    ConfigError
        If an option is invalid.
    BibTeXSyntaxError
        If the text is not structurally valid.

    Examples
    --------
    Sort and merge duplicates:

        >>> from bibtidy import tidy
        >>> result = tidy(text, sort=True, duplicates=["doi"], merge=True)
        >>> for warning in result.warnings:
        ...     print(warning.message)
    """
    from bibtidy.engine import TidyOptions, run_tidy

    return run_tidy(text, TidyOptions(**options))


def tidy_file(
    path: str | Path,
    *,
    modify: bool = False,
    **options: Any,
) -> TidyResult:
    """Tidy a BibTeX file.

    Parameters
    ----------
    path : str | Path
        Path to the .bib file.
    modify : bool, optional
        Write the tidied text back to *path*, by default False.
    **options : Any
        Any :class:`~bibtidy.engine.TidyOptions` field.

    Returns
    -------
    TidyResult
        Tidied text, warnings and entries.

    Raises
    ------
    FileNotFoundError
        If file does not exist.

    Examples
    --------
        >>> from bibtidy import tidy_file
        >>> result = tidy_file("references.bib", modify=True, curly=True)
    """
    file_path = Path(path)
    text = read_bibtex_file(file_path)

    result = tidy(text, **options)

    if modify:
        file_path.write_text(result.bibtex, encoding="utf-8", newline="\n")

    return result
