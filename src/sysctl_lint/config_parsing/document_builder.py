"""Document assembly service."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .document_models import Document, DuplicateKeyPolicy, Entry
from .entry_parser import parse_entry
from .line_scanner import scan_lines
from .parse_faults import DuplicateKeyFault

_LOGGER = logging.getLogger(__name__)


def build_document(
    entries: Iterable[Entry],
    *,
    duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.REJECT,
) -> Document:
    """Assemble entries into an ordered document.

    Args:
      entries: Parsed entries in file order.
      duplicate_keys: `REJECT` fails on a repeated key; `LAST_WINS` replaces
        the earlier entry in place with the later one.

    Returns:
      The immutable document.

    Raises:
      DuplicateKeyFault: If a key repeats under the `REJECT` policy.
    """
    ordered: list[Entry] = []
    position_by_key: dict[str, int] = {}
    for entry in entries:
        position = position_by_key.get(entry.key)
        if position is None:
            position_by_key[entry.key] = len(ordered)
            ordered.append(entry)
            continue
        previous = ordered[position]
        if duplicate_keys == DuplicateKeyPolicy.REJECT:
            raise DuplicateKeyFault(
                entry.key, first_line=previous.line, second_line=entry.line
            )
        _LOGGER.warning(
            "line %d: '%s' overrides the value from line %d",
            entry.line,
            entry.key,
            previous.line,
        )
        ordered[position] = entry
    return Document(entries=tuple(ordered))


def parse_document(
    text: str,
    *,
    duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.REJECT,
) -> Document:
    """Parse configuration text into a document, stopping at the first fault."""
    document = build_document(
        (parse_entry(line) for line in scan_lines(text)),
        duplicate_keys=duplicate_keys,
    )
    _LOGGER.debug("parsed %d entries", len(document))
    return document
