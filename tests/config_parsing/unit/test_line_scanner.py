"""Line scanner tests."""

from __future__ import annotations

from sysctl_lint.config_parsing.document_models import LogicalLine
from sysctl_lint.config_parsing.line_scanner import scan_lines


def test_skips_blank_and_comment_lines_but_keeps_numbering() -> None:
    text = (
        "# header\n"
        "\n"
        "   \n"
        "; other comment\n"
        "kernel.panic = 10\n"
        "  # indented comment\n"
        "vm.swappiness=60\n"
    )

    assert list(scan_lines(text)) == [
        LogicalLine(number=5, text="kernel.panic = 10"),
        LogicalLine(number=7, text="vm.swappiness=60"),
    ]


def test_handles_crlf_and_bare_cr_line_endings() -> None:
    text = "a = 1\r\nb = 2\rc = 3"

    assert [(line.number, line.text) for line in scan_lines(text)] == [
        (1, "a = 1"),
        (2, "b = 2"),
        (3, "c = 3"),
    ]


def test_inline_comment_markers_are_not_stripped() -> None:
    lines = list(scan_lines("kernel.hostname = web#01 ; primary\n"))

    assert lines == [LogicalLine(number=1, text="kernel.hostname = web#01 ; primary")]


def test_empty_text_yields_nothing() -> None:
    assert list(scan_lines("")) == []
    assert list(scan_lines("\n\n")) == []


def test_scan_is_lazy_and_restartable() -> None:
    text = "a = 1\nb = 2\n"
    iterator = scan_lines(text)

    assert next(iterator).text == "a = 1"
    assert [line.text for line in scan_lines(text)] == ["a = 1", "b = 2"]
