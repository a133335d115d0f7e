"""Tidy BibTeX citation databases.

This package provides:
- Data models (bibtidy.models): items, fields and warnings
- Parsing (bibtidy.parse): BibTeX text to items
- Normalization (bibtidy.normalize): field values and character escaping
- Duplicates (bibtidy.duplicates): duplicate criteria and index
- Merge (bibtidy.merge): duplicate merge strategies
- Sort (bibtidy.sort): entry ordering
- Serialize (bibtidy.serialize): items to BibTeX text
- Engine (bibtidy.engine): pipeline orchestration and options
- Audit (bibtidy.audit): JSONL event logging
- CLI (bibtidy.cli): command-line interface
- Public API (bibtidy.api): high-level convenience functions
"""

__version__ = "0.1.0"
__license__ = "MIT"

from bibtidy.api import parse, tidy, tidy_file
from bibtidy.engine import ConfigError, TidyOptions, TidyResult
from bibtidy.parse import BibTeXSyntaxError

__all__ = [
    "__version__",
    "__license__",
    "parse",
    "tidy",
    "tidy_file",
    "TidyOptions",
    "TidyResult",
    "ConfigError",
    "BibTeXSyntaxError",
]
