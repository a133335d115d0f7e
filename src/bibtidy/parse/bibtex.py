"""BibTeX structural parser.

Blocks: @<type>{...} or @<type>(...)
- @string{name = value} → StringDef
- @preamble{...} → Preamble
- @comment{...} and any text outside blocks → Comment
- everything else → Entry with ordered raw fields
Reference: http://www.bibtex.org/Format/
"""

import re

from bibtidy.models import Comment, Entry, Item, Preamble, RawField, StringDef, ValueKind
from bibtidy.parse.base import BibTeXSyntaxError

__all__ = ["parse_bibtex"]

BLOCK_START_RE = re.compile(r"@[ \t]*([A-Za-z_][\w\-]*)\s*([{(])")
FIELD_NAME_RE = re.compile(r"([^\s=,{}()\"#]+)\s*=")
BARE_VALUE_RE = re.compile(r"[^\s,#{}\"]+")


def parse_bibtex(text: str) -> list[Item]:
    """Parse BibTeX text into items, in source order.

    Parameters
    ----------
    text : str
        Complete document.

    Returns
    -------
    list[Item]
        Comments, string definitions, preambles and entries.

    Raises
    ------
    BibTeXSyntaxError
        If a block is unclosed or a field cannot be read.
    """
    items: list[Item] = []
    pending_comment: list[str] = []

    pos = 0
    while True:
        at = text.find("@", pos)
        if at == -1:
            pending_comment.append(text[pos:])
            break

        match = BLOCK_START_RE.match(text, at)
        if not match:
            # Stray @ in free text
            pending_comment.append(text[pos : at + 1])
            pos = at + 1
            continue

        block_type, opener = match.groups()
        closer = "}" if opener == "{" else ")"
        body_start = match.end()
        body_end = _find_block_end(text, body_start, closer)
        if body_end == -1:
            raise BibTeXSyntaxError(f"Unclosed @{block_type} block", line=_line_at(text, at))

        kind = block_type.lower()
        if kind == "comment":
            pending_comment.append(text[pos : body_end + 1])
            pos = body_end + 1
            continue

        pending_comment.append(text[pos:at])
        _flush_comment(items, pending_comment)

        body = text[body_start:body_end]
        if kind == "string":
            items.append(_parse_string(body, text, body_start))
        elif kind == "preamble":
            items.append(Preamble(raw=body.strip()))
        else:
            items.append(_parse_entry(block_type, body, text, body_start))

        pos = body_end + 1

    _flush_comment(items, pending_comment)
    return items


def _line_at(text: str, index: int) -> int:
    return text.count("\n", 0, index) + 1


def _flush_comment(items: list[Item], pending: list[str]) -> None:
    comment = "".join(pending)
    pending.clear()
    if comment:
        items.append(Comment(text=comment))


def _find_block_end(text: str, start: int, closer: str) -> int:
    brace_depth = 0
    in_quotes = False
    escape_next = False

    for i in range(start, len(text)):
        char = text[i]
        if escape_next:
            escape_next = False
            continue

        if char == "\\":
            escape_next = True
        elif char == "{":
            brace_depth += 1
        elif char == "}":
            if brace_depth == 0 and closer == "}":
                return i
            brace_depth -= 1
        elif char == '"' and brace_depth == 0:
            in_quotes = not in_quotes
        elif char == ")" and closer == ")" and brace_depth == 0 and not in_quotes:
            return i

    return -1


def _skip_whitespace(body: str, pos: int) -> int:
    while pos < len(body) and body[pos].isspace():
        pos += 1
    return pos


def _match_braced(body: str, start: int) -> int:
    brace_depth = 0
    escape_next = False

    for i in range(start, len(body)):
        char = body[i]
        if escape_next:
            escape_next = False
        elif char == "\\":
            escape_next = True
        elif char == "{":
            brace_depth += 1
        elif char == "}":
            brace_depth -= 1
            if brace_depth == 0:
                return i

    return -1


def _match_quoted(body: str, start: int) -> int:
    brace_depth = 0
    escape_next = False

    for i in range(start + 1, len(body)):
        char = body[i]
        if escape_next:
            escape_next = False
        elif char == "\\":
            escape_next = True
        elif char == "{":
            brace_depth += 1
        elif char == "}":
            brace_depth -= 1
        elif char == '"' and brace_depth == 0:
            return i

    return -1


def _parse_value(body: str, pos: int, text: str, offset: int) -> tuple[str, ValueKind, int]:
    """Read a (possibly concatenated) value starting at *pos*.

    Returns the value without outer delimiters, its kind and the position
    just after it.
    """
    parts: list[tuple[ValueKind, str]] = []
    start = pos

    while True:
        pos = _skip_whitespace(body, pos)
        if pos >= len(body):
            raise BibTeXSyntaxError("Missing field value", line=_line_at(text, offset + pos))

        char = body[pos]
        if char == "{":
            end = _match_braced(body, pos)
            if end == -1:
                raise BibTeXSyntaxError(
                    "Unterminated braced value", line=_line_at(text, offset + pos)
                )
            parts.append((ValueKind.BRACED, body[pos + 1 : end]))
            pos = end + 1
        elif char == '"':
            end = _match_quoted(body, pos)
            if end == -1:
                raise BibTeXSyntaxError(
                    "Unterminated quoted value", line=_line_at(text, offset + pos)
                )
            parts.append((ValueKind.QUOTED, body[pos + 1 : end]))
            pos = end + 1
        else:
            bare = BARE_VALUE_RE.match(body, pos)
            if not bare:
                raise BibTeXSyntaxError(
                    f"Unexpected character {char!r} in value", line=_line_at(text, offset + pos)
                )
            parts.append((ValueKind.BARE, bare.group()))
            pos = bare.end()

        pos = _skip_whitespace(body, pos)
        if pos < len(body) and body[pos] == "#":
            pos += 1
            continue
        break

    if len(parts) == 1:
        kind, value = parts[0]
        return value, kind, pos

    return body[start:pos].strip(), ValueKind.CONCATENATED, pos


def _parse_string(body: str, text: str, offset: int) -> StringDef:
    name_match = FIELD_NAME_RE.match(body, _skip_whitespace(body, 0))
    if not name_match:
        raise BibTeXSyntaxError("Malformed @string definition", line=_line_at(text, offset))
    return StringDef(name=name_match.group(1), raw=body[name_match.end() :].strip())


def _parse_entry(entry_type: str, body: str, text: str, offset: int) -> Entry:
    comma = body.find(",")
    head = body if comma == -1 else body[:comma]

    if "=" in head:
        key = None
        pos = 0
    else:
        key = head.strip() or None
        pos = len(body) if comma == -1 else comma + 1

    fields: list[RawField] = []
    while True:
        while pos < len(body) and (body[pos].isspace() or body[pos] == ","):
            pos += 1
        if pos >= len(body):
            break

        name_match = FIELD_NAME_RE.match(body, pos)
        if not name_match:
            raise BibTeXSyntaxError(
                f"Expected field name in @{entry_type}{{{key or ''}}}",
                line=_line_at(text, offset + pos),
            )

        value, kind, pos = _parse_value(body, name_match.end(), text, offset)
        fields.append(RawField(name=name_match.group(1), value=value, datatype=kind))

        pos = _skip_whitespace(body, pos)
        if pos < len(body) and body[pos] != ",":
            raise BibTeXSyntaxError(
                f"Expected ',' after field {name_match.group(1)!r}",
                line=_line_at(text, offset + pos),
            )

    return Entry(type=entry_type, key=key, fields=fields)
