"""Command-line interface for bibtidy.

Provides CLI commands for tidying and checking BibTeX files.
"""

import importlib.metadata
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
from click.core import ParameterSource

from bibtidy.audit import AuditLogger, generate_run_id
from bibtidy.engine import TidyOptions, TidyResult, load_options, run_tidy
from bibtidy.parse import BibTeXSyntaxError, read_bibtex_file

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("bibtidy")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development

# Value given to optional-value flags used without "="
_FLAG_ON = "true"

_OPTION_DECORATORS = [
    click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False),
        help="JSON file with tidy options; flags override it",
    ),
    click.option("--omit", type=str, default=None, help="Comma-separated fields to remove"),
    click.option("--curly", is_flag=True, help="Enclose all values in braces"),
    click.option("--numeric", is_flag=True, help="Leave integers and month macros unquoted"),
    click.option("--tab", is_flag=True, help="Indent fields with a tab"),
    click.option(
        "--space",
        type=click.IntRange(min=0),
        default=2,
        show_default=True,
        help="Indent fields with this many spaces",
    ),
    click.option(
        "--align",
        type=click.IntRange(min=1),
        default=14,
        show_default=True,
        help="Column at which field values start",
    ),
    click.option("--no-align", is_flag=True, help="Do not align field values"),
    click.option(
        "--sort",
        is_flag=False,
        flag_value=_FLAG_ON,
        default=None,
        help="Sort entries, optionally by keys: --sort=-year,key",
    ),
    click.option(
        "--sort-fields",
        is_flag=False,
        flag_value=_FLAG_ON,
        default=None,
        help="Order fields in entries, optionally: --sort-fields=title,author",
    ),
    click.option(
        "--duplicates",
        is_flag=False,
        flag_value=_FLAG_ON,
        default=None,
        help="Check for duplicates, optionally by criteria: --duplicates=doi,key",
    ),
    click.option(
        "--merge",
        is_flag=False,
        flag_value=_FLAG_ON,
        default=None,
        help="Merge duplicates, optionally with a strategy: --merge=last",
    ),
    click.option(
        "--strip-enclosing-braces",
        is_flag=True,
        help="Remove a redundant brace pair around values",
    ),
    click.option("--drop-all-caps", is_flag=True, help="Title-case values in all capitals"),
    click.option(
        "--escape/--no-escape",
        default=True,
        show_default=True,
        help="Escape special characters",
    ),
    click.option("--encode-urls", is_flag=True, help="Percent-encode underscores in URLs"),
    click.option("--strip-comments", is_flag=True, help="Remove comments"),
    click.option(
        "--tidy-comments/--no-tidy-comments",
        default=True,
        show_default=True,
        help="Trim whitespace around comments",
    ),
    click.option(
        "--abbreviate-months",
        is_flag=True,
        help="Rewrite months as three-letter macros",
    ),
]


def tidy_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the shared tidy option flags to a command."""
    for decorator in reversed(_OPTION_DECORATORS):
        func = decorator(func)
    return func


def _flag_or_list(value: str) -> bool | list[str]:
    if value == _FLAG_ON:
        return True
    return [part.strip() for part in value.split(",") if part.strip()]


def _options_from_flags(ctx: click.Context, params: dict[str, Any]) -> dict[str, Any]:
    """Map CLI flag values onto TidyOptions keyword arguments."""
    kwargs: dict[str, Any] = {
        "curly": params["curly"],
        "numeric": params["numeric"],
        "tab": params["tab"],
        "space": params["space"],
        "align": False if params["no_align"] else params["align"],
        "strip_enclosing_braces": params["strip_enclosing_braces"],
        "drop_all_caps": params["drop_all_caps"],
        "escape": params["escape"],
        "encode_urls": params["encode_urls"],
        "strip_comments": params["strip_comments"],
        "tidy_comments": params["tidy_comments"],
        "abbreviate_months": params["abbreviate_months"],
    }

    if params["omit"] is not None:
        kwargs["omit"] = [name.strip() for name in params["omit"].split(",")]
    for name in ("sort", "sort_fields", "duplicates"):
        if params[name] is not None:
            kwargs[name] = _flag_or_list(params[name])
    if params["merge"] is not None:
        kwargs["merge"] = True
        if params["merge"] != _FLAG_ON:
            kwargs["merge_strategy"] = params["merge"]

    if params["config_path"] is None:
        return kwargs

    # With a config file only flags given on the command line override it
    sources = {
        "align": ("align", "no_align"),
        "omit": ("omit",),
        "merge": ("merge",),
        "merge_strategy": ("merge",),
    }
    explicit: dict[str, Any] = {}
    for key, value in kwargs.items():
        names = sources.get(key, (key,))
        if any(ctx.get_parameter_source(n) == ParameterSource.COMMANDLINE for n in names):
            explicit[key] = value
    return explicit


def _build_options(ctx: click.Context, params: dict[str, Any]) -> TidyOptions:
    kwargs = _options_from_flags(ctx, params)
    if params["config_path"] is not None:
        return load_options(Path(params["config_path"]), **kwargs)
    return TidyOptions(**kwargs)


def _read_input(input_path: str) -> str:
    if input_path == "-":
        return click.get_text_stream("stdin").read()
    return read_bibtex_file(Path(input_path))


def _run(input_path: str, options: TidyOptions, log_path: str | None) -> tuple[str, TidyResult]:
    text = _read_input(input_path)
    if log_path is None:
        return text, run_tidy(text, options)
    with AuditLogger(generate_run_id(), Path(log_path)) as logger:
        return text, run_tidy(text, options, logger=logger)


def _report_warnings(result: TidyResult) -> None:
    for warning in result.warnings:
        click.secho(f"Warning: {warning.message}", fg="yellow", err=True)


@click.group()
@click.version_option(version=__version__, prog_name="bibtidy")
def cli() -> None:
    """Tidy BibTeX files: normalize, deduplicate, sort and reformat.

    Use 'bibtidy COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the tidied file here instead of stdout",
)
@click.option(
    "--modify",
    "-m",
    is_flag=True,
    help="Overwrite INPUT_PATH with the tidied text",
)
@click.option(
    "--log",
    "log_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Append JSONL audit events to this file",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Do not print warnings",
)
@tidy_options
@click.pass_context
def tidy(
    ctx: click.Context,
    input_path: str,
    output: str | None,
    modify: bool,
    log_path: str | None,
    quiet: bool,
    **params: Any,
) -> None:
    """Tidy the BibTeX file INPUT_PATH ('-' reads stdin).

    Optional-value flags take their value after '=' so they are not
    confused with INPUT_PATH.

    Examples
    --------
        bibtidy tidy references.bib -o tidy.bib
        bibtidy tidy references.bib --modify --curly --numeric
        bibtidy tidy references.bib --sort=-year,key --duplicates --merge=last
    """
    if modify and input_path == "-":
        click.secho("Error: --modify cannot be used with stdin", fg="red", err=True)
        sys.exit(1)

    try:
        options = _build_options(ctx, params)
        _, result = _run(input_path, options, log_path)

        if modify:
            Path(input_path).write_text(result.bibtex, encoding="utf-8", newline="\n")
        elif output is not None:
            Path(output).write_text(result.bibtex, encoding="utf-8", newline="\n")
        else:
            click.echo(result.bibtex, nl=False)

    except (BibTeXSyntaxError, OSError, ValueError) as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    if not quiet:
        _report_warnings(result)
        if modify or output is not None:
            target = input_path if modify else output
            click.secho(f"✓ Tidied {result.count} entries to {target}", fg="green", err=True)


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, allow_dash=True))
@tidy_options
@click.pass_context
def check(ctx: click.Context, input_path: str, **params: Any) -> None:
    """Exit with status 1 if INPUT_PATH is not already tidy.

    Uses the same options as 'bibtidy tidy'.

    Examples
    --------
        bibtidy check references.bib
        bibtidy check references.bib --config bibtidy.json
    """
    try:
        options = _build_options(ctx, params)
        text, result = _run(input_path, options, None)
    except (BibTeXSyntaxError, OSError, ValueError) as e:
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    if result.bibtex != text:
        click.secho(f"✗ {input_path} is not tidy", fg="red", err=True)
        sys.exit(1)

    click.secho(f"✓ {input_path} is tidy", fg="green")


if __name__ == "__main__":
    cli()
