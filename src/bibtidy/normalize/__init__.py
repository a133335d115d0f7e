"""Field normalization and LaTeX escaping.

Main entry points:
- normalize_entry: Build an entry's normalized field map
- escape_special_characters: Escape characters using the code point table
"""

from .escape import escape_special_characters
from .fields import normalize_entry, normalize_field
from .months import MONTH_SET, to_month_macro

__all__ = [
    "normalize_entry",
    "normalize_field",
    "escape_special_characters",
    "MONTH_SET",
    "to_month_macro",
]
