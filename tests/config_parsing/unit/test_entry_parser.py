"""Entry parser tests."""

from __future__ import annotations

import pytest
from sysctl_lint.config_parsing.document_models import Entry, LogicalLine
from sysctl_lint.config_parsing.entry_parser import parse_entry
from sysctl_lint.config_parsing.parse_faults import SyntaxFault, SyntaxFaultReason


def _line(text: str, number: int = 1) -> LogicalLine:
    return LogicalLine(number=number, text=text)


def test_splits_on_first_separator_and_trims() -> None:
    entry = parse_entry(_line("net.ipv4.ip_forward   =   1", number=3))

    assert entry == Entry(key="net.ipv4.ip_forward", value="1", line=3)


def test_value_keeps_later_separators_verbatim() -> None:
    entry = parse_entry(_line("kernel.core_pattern = |/usr/bin/dump a=b %p"))

    assert entry.value == "|/usr/bin/dump a=b %p"


def test_empty_value_is_legal() -> None:
    entry = parse_entry(_line("kernel.hostname ="))

    assert entry.value == ""


def test_escaped_separator_belongs_to_key() -> None:
    entry = parse_entry(_line(r"odd\=key = 1"))

    assert entry.key == "odd=key"
    assert entry.value == "1"


def test_escaped_whitespace_is_allowed_in_key() -> None:
    entry = parse_entry(_line(r"odd\ key = 1"))

    assert entry.key == "odd key"


def test_escaped_trailing_whitespace_survives_trimming() -> None:
    entry = parse_entry(_line("a\\  = 1"))

    assert entry.key == "a "
    assert entry.value == "1"


def test_escaped_backslash_before_trailing_whitespace_is_not_an_escape() -> None:
    entry = parse_entry(_line("a\\\\ = 1"))

    assert entry.key == "a\\"


def test_missing_separator_fault() -> None:
    with pytest.raises(SyntaxFault) as excinfo:
        parse_entry(_line("net.ipv4.ip_forward 1", number=7))

    assert excinfo.value.reason == SyntaxFaultReason.MISSING_SEPARATOR
    assert excinfo.value.line == 7
    assert "line 7" in str(excinfo.value)


def test_only_escaped_separator_counts_as_missing() -> None:
    with pytest.raises(SyntaxFault) as excinfo:
        parse_entry(_line(r"key \= value"))

    assert excinfo.value.reason == SyntaxFaultReason.MISSING_SEPARATOR


def test_empty_key_fault() -> None:
    with pytest.raises(SyntaxFault) as excinfo:
        parse_entry(_line("= 1", number=2))

    assert excinfo.value.reason == SyntaxFaultReason.EMPTY_KEY
    assert excinfo.value.line == 2


def test_unescaped_whitespace_in_key_fault() -> None:
    with pytest.raises(SyntaxFault) as excinfo:
        parse_entry(_line("net ipv4 = 1"))

    assert excinfo.value.reason == SyntaxFaultReason.WHITESPACE_IN_KEY
