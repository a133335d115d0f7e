"""Tidy options and configuration file loading."""

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import jsonschema

from bibtidy.duplicates import DEFAULT_CRITERIA, parse_criterion
from bibtidy.merge import MergeStrategy, parse_strategy
from bibtidy.models import DuplicateCriterion
from bibtidy.sort import SortKey, parse_sort_keys

__all__ = [
    "ConfigError",
    "DEFAULT_ALIGN",
    "DEFAULT_FIELD_ORDER",
    "DEFAULT_SORT",
    "TidyOptions",
    "load_options",
]

DEFAULT_ALIGN = 14

DEFAULT_SORT = ("key",)

DEFAULT_FIELD_ORDER = (
    "title",
    "shorttitle",
    "author",
    "year",
    "month",
    "day",
    "journal",
    "booktitle",
    "location",
    "on",
    "publisher",
    "address",
    "series",
    "volume",
    "number",
    "pages",
    "doi",
    "isbn",
    "issn",
    "url",
    "urldate",
    "copyright",
    "category",
    "note",
    "metadata",
)


class ConfigError(ValueError):
    """Invalid tidy options or configuration file."""


_BOOL_OPTIONS = (
    "curly",
    "numeric",
    "tab",
    "merge",
    "strip_enclosing_braces",
    "drop_all_caps",
    "escape",
    "encode_urls",
    "strip_comments",
    "tidy_comments",
    "abbreviate_months",
)


def _check_flag_list(name: str, value: Any) -> None:
    if isinstance(value, bool):
        return
    if not isinstance(value, list | tuple) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{name} must be a boolean or a list of strings, got {value!r}")


@dataclass
class TidyOptions:
    """Options controlling one tidy run.

    Attributes
    ----------
    omit : list[str]
        Field names to drop from every entry.
    curly : bool
        Wrap every non-numeric value in braces.
    numeric : bool
        Emit integers and month macros unquoted.
    tab : bool
        Indent fields with a tab instead of spaces.
    space : int
        Number of spaces to indent with (default: 2).
    align : int | bool
        Column width for field values. False disables alignment, True means
        the default width of 14.
    sort : bool | list[str]
        Sort entries. True sorts by key; a list names the sort keys, each
        optionally prefixed with ``-`` for descending order.
    sort_fields : bool | list[str]
        Order fields within each entry. True uses ``DEFAULT_FIELD_ORDER``.
    duplicates : bool | list[str]
        Criteria used to detect duplicate entries. True checks doi, citation
        and abstract.
    merge : bool
        Merge duplicates instead of only warning about them.
    merge_strategy : str
        One of first, last, combine, overwrite (default: combine).
    strip_enclosing_braces : bool
        Remove one redundant brace pair around whole values.
    drop_all_caps : bool
        Title-case values written entirely in capitals.
    escape : bool
        Escape special characters (default: True).
    encode_urls : bool
        Percent-encode underscores in url fields.
    strip_comments : bool
        Remove comments from the output.
    tidy_comments : bool
        Trim whitespace around comments (default: True).
    abbreviate_months : bool
        Rewrite month names and numbers as three-letter macros.
    """

    omit: list[str] = field(default_factory=list)
    curly: bool = False
    numeric: bool = False
    tab: bool = False
    space: int = 2
    align: int | bool = DEFAULT_ALIGN
    sort: bool | list[str] = False
    sort_fields: bool | list[str] = False
    duplicates: bool | list[str] = False
    merge: bool = False
    merge_strategy: str = MergeStrategy.COMBINE.value
    strip_enclosing_braces: bool = False
    drop_all_caps: bool = False
    escape: bool = True
    encode_urls: bool = False
    strip_comments: bool = False
    tidy_comments: bool = True
    abbreviate_months: bool = False

    def __post_init__(self) -> None:
        """Normalize and validate."""
        omit_ok = isinstance(self.omit, list | tuple) and all(isinstance(n, str) for n in self.omit)
        if not omit_ok:
            raise ConfigError(f"omit must be a list of strings, got {self.omit!r}")
        self.omit = [name.strip().lower() for name in self.omit if name.strip()]

        for name in _BOOL_OPTIONS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigError(f"{name} must be a boolean, got {value!r}")

        if isinstance(self.space, bool) or not isinstance(self.space, int) or self.space < 0:
            raise ConfigError(f"space must be a non-negative integer, got {self.space!r}")

        if not isinstance(self.align, int):
            raise ConfigError(f"align must be a boolean or an integer, got {self.align!r}")
        if not isinstance(self.align, bool) and self.align < 1:
            raise ConfigError(f"align must be at least 1, got {self.align}")

        for name in ("sort", "sort_fields", "duplicates"):
            _check_flag_list(name, getattr(self, name))

        try:
            self._resolve_criteria()
            self.merge_strategy = parse_strategy(self.merge_strategy).value
        except ValueError as e:
            raise ConfigError(str(e)) from e

    def _resolve_criteria(self) -> tuple[DuplicateCriterion, ...]:
        if self.duplicates is True:
            return DEFAULT_CRITERIA
        if self.duplicates is False:
            # Merging alone checks the default criteria
            return DEFAULT_CRITERIA if self.merge else ()
        return tuple(dict.fromkeys(parse_criterion(name) for name in self.duplicates))

    @property
    def indent(self) -> str:
        """Indentation string placed before each field."""
        return "\t" if self.tab else " " * self.space

    @property
    def align_width(self) -> int:
        """Column width used to pad field names."""
        if self.align is True:
            return DEFAULT_ALIGN
        if self.align is False:
            return 1
        return self.align

    @property
    def sort_keys(self) -> list[SortKey]:
        """Parsed sort keys, empty when sorting is disabled."""
        if self.sort is True:
            return parse_sort_keys(DEFAULT_SORT)
        if self.sort is False:
            return []
        return parse_sort_keys(self.sort)

    @property
    def field_order(self) -> tuple[str, ...]:
        """Field names rendered first, in order."""
        if self.sort_fields is True:
            return DEFAULT_FIELD_ORDER
        if self.sort_fields is False:
            return ()
        return tuple(name.strip().lower() for name in self.sort_fields if name.strip())

    @property
    def duplicate_criteria(self) -> tuple[DuplicateCriterion, ...]:
        """Duplicate criteria to check besides the entry key."""
        return self._resolve_criteria()

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


_OPTIONS_SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "tidy_options.schema.json"


def _load_schema() -> dict[str, Any]:
    return json.loads(_OPTIONS_SCHEMA_PATH.read_text(encoding="utf-8"))


def load_options(path: Path, **overrides: Any) -> TidyOptions:
    """Load tidy options from a JSON configuration file.

    Parameters
    ----------
    path : Path
        JSON file holding an object keyed by option name.
    **overrides : Any
        Option values that take precedence over the file. None values are
        ignored.

    Returns
    -------
    TidyOptions
        Validated options.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    ConfigError
        If the file is not valid JSON or violates the options schema.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}") from e

    try:
        jsonschema.validate(instance=data, schema=_load_schema())
    except jsonschema.ValidationError as e:
        location = ".".join(str(p) for p in e.absolute_path) or "<root>"
        raise ConfigError(f"Invalid config {path} at {location}: {e.message}") from e

    data.update({k: v for k, v in overrides.items() if v is not None})
    return TidyOptions(**data)
