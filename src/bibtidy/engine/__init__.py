"""Pipeline orchestration engine.

This package provides the main entry points for tidying a BibTeX document,
including options and result types.
"""

from bibtidy.engine.config import (
    DEFAULT_FIELD_ORDER,
    ConfigError,
    TidyOptions,
    load_options,
)
from bibtidy.engine.runner import TidyResult, run_tidy, tidy_items

__all__ = [
    "ConfigError",
    "DEFAULT_FIELD_ORDER",
    "TidyOptions",
    "TidyResult",
    "load_options",
    "run_tidy",
    "tidy_items",
]
