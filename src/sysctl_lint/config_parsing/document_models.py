"""Configuration document entities."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class DuplicateKeyPolicy(str, Enum):
    """How the document builder treats a key that appears more than once."""

    REJECT = "reject"
    LAST_WINS = "last_wins"


@dataclass(frozen=True)
class LogicalLine:
    """One non-blank, non-comment source line."""

    number: int
    text: str


@dataclass(frozen=True)
class Entry:
    """Parsed key/value pair plus its 1-based source line."""

    key: str
    value: str
    line: int


@dataclass(frozen=True)
class Document:
    """Ordered, duplicate-free collection of entries from one configuration file."""

    entries: tuple[Entry, ...] = ()
    keys: frozenset[str] = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "keys", frozenset(entry.key for entry in self.entries))

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.keys

    def get(self, key: str) -> Entry | None:
        """Return the entry for `key`, or None when the document lacks it."""
        if key not in self.keys:
            return None
        return next(entry for entry in self.entries if entry.key == key)

    def as_mapping(self) -> dict[str, str]:
        """Return an insertion-ordered key to value mapping."""
        return {entry.key: entry.value for entry in self.entries}
