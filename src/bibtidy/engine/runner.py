"""End-to-end tidy pipeline runner.

Chains the tidy passes over a parsed item list:

    Stage 1: Entries        (normalization, missing keys, duplicate merge)
    Stage 2: Sort           (entries reordered, comments travel with them)
    Stage 3: Serialize      (BibTeX text)

Items are mutated in place; duplicates are flagged rather than removed so
that they stay visible in the returned entry list.
"""

import time
from dataclasses import dataclass, field
from typing import Any

from bibtidy.audit.logger import AuditLogger
from bibtidy.duplicates import DuplicateIndex
from bibtidy.engine.config import TidyOptions
from bibtidy.merge import parse_strategy, process_duplicate
from bibtidy.models import Entry, Item, MissingKeyWarning, TidyWarning
from bibtidy.normalize import normalize_entry
from bibtidy.parse import BibTeXSyntaxError, parse_bibtex
from bibtidy.serialize import serialize
from bibtidy.sort import sort_items
from bibtidy.utils import calculate_string_sha256

__all__ = ["TidyResult", "run_tidy", "tidy_items"]


@dataclass
class TidyResult:
    """Result of a tidy run.

    Attributes
    ----------
    bibtex : str
        Tidied document text.
    warnings : list[TidyWarning]
        Warnings in processing order.
    entries : list[Entry]
        Every entry in output order, dropped duplicates included.
    """

    bibtex: str
    warnings: list[TidyWarning] = field(default_factory=list)
    entries: list[Entry] = field(default_factory=list)

    @property
    def count(self) -> int:
        """Number of entries written to the output."""
        return sum(1 for entry in self.entries if not entry.dropped_as_duplicate)

    def to_dict(self) -> dict[str, Any]:
        """Summary without the document text."""
        return {
            "entries": len(self.entries),
            "written": self.count,
            "warnings": [warning.to_dict() for warning in self.warnings],
        }


# ---------------------------------------------------------------------------
# Individual stage functions
# ---------------------------------------------------------------------------


def _emit(
    warning: TidyWarning,
    warnings: list[TidyWarning],
    logger: AuditLogger | None,
) -> None:
    warnings.append(warning)
    if logger:
        logger.warning_emitted(warning)


def _stage_entries(
    entries: list[Entry],
    options: TidyOptions,
    warnings: list[TidyWarning],
    logger: AuditLogger | None,
) -> dict[str, int]:
    """Stage 1: Normalize each entry, then classify it against earlier ones.

    Warnings follow entry order. An entry is fully normalized before it is
    indexed, so merges always combine normalized values.
    """
    omit = frozenset(options.omit)
    index = DuplicateIndex(options.duplicate_criteria, merge=options.merge)
    strategy = parse_strategy(options.merge_strategy)
    missing = 0
    duplicates = 0

    for entry in entries:
        if not entry.key:
            missing += 1
            _emit(MissingKeyWarning(entry, "Entry does not have an entry key."), warnings, logger)

        normalize_entry(
            entry,
            omit=omit,
            strip_enclosing_braces=options.strip_enclosing_braces,
            drop_all_caps=options.drop_all_caps,
            encode_urls=options.encode_urls,
            escape=options.escape,
            abbreviate_months=options.abbreviate_months,
        )

        match = index.classify(entry)
        if match is None:
            continue
        duplicates += 1
        _emit(process_duplicate(entry, match, strategy), warnings, logger)

    dropped = sum(1 for entry in entries if entry.dropped_as_duplicate)
    return {
        "entries": len(entries),
        "missing_keys": missing,
        "duplicates": duplicates,
        "dropped": dropped,
    }


def _stage_sort(items: list[Item], options: TidyOptions) -> tuple[list[Item], dict[str, int]]:
    """Stage 2: Reorder items by the configured sort keys."""
    keys = options.sort_keys
    ordered = sort_items(items, keys)
    return ordered, {"items": len(ordered), "sort_keys": len(keys)}


def _stage_serialize(items: list[Item], options: TidyOptions) -> tuple[str, dict[str, int]]:
    """Stage 3: Render the document."""
    text = serialize(
        items,
        indent=options.indent,
        align=options.align_width,
        field_order=options.field_order,
        numeric=options.numeric,
        curly=options.curly,
        strip_comments=options.strip_comments,
        tidy_comments=options.tidy_comments,
    )
    return text, {"bytes": len(text.encode("utf-8"))}


# ---------------------------------------------------------------------------
# Pipeline runner
# ---------------------------------------------------------------------------


def tidy_items(
    items: list[Item],
    options: TidyOptions | None = None,
    logger: AuditLogger | None = None,
) -> TidyResult:
    """Tidy a parsed item list.

    Content problems never raise; they are reported as warnings.

    Parameters
    ----------
    items : list[Item]
        Items in source order. Entries are mutated in place.
    options : TidyOptions | None, optional
        Tidy options. If None, uses defaults.
    logger : AuditLogger | None, optional
        Audit logger for tracking. If None, no logging.

    Returns
    -------
    TidyResult
        Rendered text, warnings and the full entry list.
    """
    if options is None:
        options = TidyOptions()

    warnings: list[TidyWarning] = []
    entries = [item for item in items if isinstance(item, Entry)]

    def run_stage(name: str, func: Any, *args: Any) -> Any:
        if logger:
            logger.stage_started(name)
        started = time.perf_counter()
        result = func(*args)
        counters = result if isinstance(result, dict) else result[1]
        if logger:
            logger.stage_finished(name, time.perf_counter() - started, counters)
        return result

    run_stage("entries", _stage_entries, entries, options, warnings, logger)
    ordered, _ = run_stage("sort", _stage_sort, items, options)
    text, _ = run_stage("serialize", _stage_serialize, ordered, options)

    return TidyResult(
        bibtex=text,
        warnings=warnings,
        entries=[item for item in ordered if isinstance(item, Entry)],
    )


def run_tidy(
    text: str,
    options: TidyOptions | None = None,
    logger: AuditLogger | None = None,
) -> TidyResult:
    """Parse and tidy BibTeX text.

    Parameters
    ----------
    text : str
        BibTeX document.
    options : TidyOptions | None, optional
        Tidy options. If None, uses defaults.
    logger : AuditLogger | None, optional
        Audit logger for tracking. If None, no logging.

    Returns
    -------
    TidyResult
        Tidy run result.

    Raises
    ------
    BibTeXSyntaxError
        If *text* is not structurally valid BibTeX.

    Examples
    --------
        >>> from bibtidy.engine import TidyOptions, run_tidy
        >>> result = run_tidy("@article{a, title={A}}", TidyOptions(curly=True))
        >>> print(result.bibtex)
        @article{a,
          title         = {A}
        }
    """
    if options is None:
        options = TidyOptions()

    start_time = time.perf_counter()
    if logger:
        logger.run_started(options.to_dict())
        logger.stage_started("parse")

    try:
        items = parse_bibtex(text)
    except BibTeXSyntaxError as e:
        if logger:
            logger.error(type(e).__name__, str(e), stage="parse")
            logger.run_finished("failed", time.perf_counter() - start_time)
        raise

    if logger:
        entry_count = sum(1 for item in items if isinstance(item, Entry))
        logger.stage_finished(
            "parse",
            time.perf_counter() - start_time,
            {"items": len(items), "entries": entry_count},
        )

    result = tidy_items(items, options, logger)

    if logger:
        logger.run_finished(
            "success",
            time.perf_counter() - start_time,
            entries_processed=len(result.entries),
            output_sha256=calculate_string_sha256(result.bibtex),
        )

    return result
