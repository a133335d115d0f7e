"""BibTeX parsing.

Main entry points:
- parse_bibtex: Parse BibTeX text into an ordered item list
- read_bibtex_file: Read and decode a .bib file
"""

from bibtidy.parse.base import BibTeXSyntaxError, read_bibtex_file
from bibtidy.parse.bibtex import parse_bibtex

__all__ = [
    "BibTeXSyntaxError",
    "parse_bibtex",
    "read_bibtex_file",
]
