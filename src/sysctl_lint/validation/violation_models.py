"""Validation outcome entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sysctl_lint.config_parsing.document_models import Entry
from sysctl_lint.schema_management.schema_models import SchemaRule


class ViolationReason(str, Enum):
    """Non-fatal validation failure kinds."""

    UNMATCHED_KEY = "unmatched_key"
    TYPE_MISMATCH = "type_mismatch"
    MISSING_KEY = "missing_key"


@dataclass(frozen=True)
class Violation:
    """One validation failure.

    `rule` is None for keys no schema rule matched. `entry` is None only for
    missing keys, where the line refers to the schema rule instead.
    """

    entry: Entry | None
    rule: SchemaRule | None
    reason: ViolationReason
    expected: str | None = None

    def __post_init__(self) -> None:
        if self.entry is None and self.rule is None:
            raise ValueError("A violation needs an entry, a rule, or both.")

    @property
    def line(self) -> int:
        """Return the config line, or the schema line for missing keys."""
        if self.entry is not None:
            return self.entry.line
        if self.rule is None:
            raise ValueError("A violation needs an entry, a rule, or both.")
        return self.rule.line

    @property
    def key(self) -> str:
        """Return the offending key, or the rule pattern for missing keys."""
        if self.entry is not None:
            return self.entry.key
        if self.rule is None:
            raise ValueError("A violation needs an entry, a rule, or both.")
        return self.rule.pattern
