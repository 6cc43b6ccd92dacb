"""Fatal faults raised while parsing configuration and schema text."""

from __future__ import annotations

from enum import Enum


class ParseFault(Exception):
    """Base class for faults that abort a parse run."""

    def __init__(self, message: str, *, line: int) -> None:
        super().__init__(f"line {line}: {message}")
        self.line = line


class SyntaxFaultReason(str, Enum):
    """Reasons a configuration line cannot be parsed into an entry."""

    MISSING_SEPARATOR = "missing_separator"
    EMPTY_KEY = "empty_key"
    WHITESPACE_IN_KEY = "whitespace_in_key"


_SYNTAX_MESSAGES = {
    SyntaxFaultReason.MISSING_SEPARATOR: "expected 'key = value' but found no '=' separator",
    SyntaxFaultReason.EMPTY_KEY: "key before '=' is empty",
    SyntaxFaultReason.WHITESPACE_IN_KEY: "key contains unescaped whitespace",
}


class SyntaxFault(ParseFault):
    """Raised when a configuration line is not a valid `key = value` entry."""

    def __init__(self, reason: SyntaxFaultReason, *, line: int, text: str) -> None:
        super().__init__(f"{_SYNTAX_MESSAGES[reason]}: {text!r}", line=line)
        self.reason = reason
        self.text = text


class DuplicateKeyFault(ParseFault):
    """Raised when the same key is defined twice under the reject policy."""

    def __init__(self, key: str, *, first_line: int, second_line: int) -> None:
        super().__init__(
            f"duplicate key '{key}' (first defined on line {first_line})",
            line=second_line,
        )
        self.key = key
        self.first_line = first_line
        self.second_line = second_line
