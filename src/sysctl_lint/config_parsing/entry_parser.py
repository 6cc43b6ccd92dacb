"""Entry parsing for single `key = value` lines."""

from __future__ import annotations

from .document_models import Entry, LogicalLine
from .parse_faults import SyntaxFault, SyntaxFaultReason

SEPARATOR = "="
ESCAPE = "\\"


def parse_entry(line: LogicalLine) -> Entry:
    """Split one logical line at its first unescaped `=`.

    The value is kept verbatim apart from trimming; interpreting it is left to
    validation, which knows the expected type.

    Raises:
      SyntaxFault: If the separator is missing or the key is empty or contains
        unescaped whitespace.
    """
    separator_index = _find_separator(line.text)
    if separator_index is None:
        raise SyntaxFault(SyntaxFaultReason.MISSING_SEPARATOR, line=line.number, text=line.text)

    raw_key = _trim_key(line.text[:separator_index])
    value = line.text[separator_index + 1 :].strip()
    if not raw_key:
        raise SyntaxFault(SyntaxFaultReason.EMPTY_KEY, line=line.number, text=line.text)

    key = _unescape_key(raw_key)
    if key is None:
        raise SyntaxFault(SyntaxFaultReason.WHITESPACE_IN_KEY, line=line.number, text=line.text)
    return Entry(key=key, value=value, line=line.number)


def _find_separator(text: str) -> int | None:
    escaped = False
    for index, char in enumerate(text):
        if escaped:
            escaped = False
        elif char == ESCAPE:
            escaped = True
        elif char == SEPARATOR:
            return index
    return None


def _trim_key(raw_key: str) -> str:
    """Strip surrounding whitespace, keeping a trailing character that is escaped."""
    stripped = raw_key.strip()
    trailing_escapes = len(stripped) - len(stripped.rstrip(ESCAPE))
    if trailing_escapes % 2:
        stripped = raw_key.lstrip()[: len(stripped) + 1]
    return stripped


def _unescape_key(raw_key: str) -> str | None:
    """Resolve backslash escapes; None signals unescaped whitespace."""
    chars: list[str] = []
    escaped = False
    for char in raw_key:
        if escaped:
            chars.append(char)
            escaped = False
        elif char == ESCAPE:
            escaped = True
        elif char.isspace():
            return None
        else:
            chars.append(char)
    return "".join(chars)
