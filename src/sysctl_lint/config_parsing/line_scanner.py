"""Line scanning shared by configuration and schema parsing."""

from __future__ import annotations

import re
from collections.abc import Iterator

from .document_models import LogicalLine

COMMENT_MARKERS = ("#", ";")
_LINE_PATTERN = re.compile(r"([^\r\n]*)(\r\n|\r|\n|$)")


def scan_lines(text: str) -> Iterator[LogicalLine]:
    """Yield stripped, numbered lines, skipping blanks and full-line comments.

    Comment markers are only recognized at the start of a line, so a value
    such as `color = #fff` keeps its `#`.
    """
    number = 0
    for match in _LINE_PATTERN.finditer(text):
        raw, terminator = match.group(1), match.group(2)
        if not raw and not terminator:
            break
        number += 1
        stripped = raw.strip()
        if not stripped or stripped.startswith(COMMENT_MARKERS):
            continue
        yield LogicalLine(number=number, text=stripped)
