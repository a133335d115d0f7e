"""Pre-compiled regex patterns and small text helpers for normalization."""

import re

WHITESPACE_RE = re.compile(r"\s+")
DOUBLE_BRACE_RE = re.compile(r"^\{([^{}]*)\}$")
ALL_CAPS_RE = re.compile(r"^[^a-z]+$")
TITLE_WORD_RE = re.compile(r"(\w)(\S*)")
URL_UNDERSCORE_RE = re.compile(r"\\?_")
PAGE_DASH_RE = re.compile(r"(\d)\s*-\s*(\d)")


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs (newlines included) and trim."""
    return WHITESPACE_RE.sub(" ", text).strip()


def title_case(text: str) -> str:
    """Upper-case the first character of each word and lower-case the rest.

    Parameters
    ----------
    text : str
        Input text.

    Returns
    -------
    str
        Naively title-cased text (``JOURNAL OF TEA`` → ``Journal Of Tea``).
    """
    return TITLE_WORD_RE.sub(lambda m: m.group(1).upper() + m.group(2).lower(), text)
