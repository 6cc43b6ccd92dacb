"""Schema management entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

WILDCARD = "*"


class ValueKind(str, Enum):
    """Value types a schema rule can require."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ENUM = "enum"
    REGEX = "regex"


@dataclass(frozen=True)
class ValueConstraint:
    """Tagged value type; `members` is set for enums, `pattern` for regexes."""

    kind: ValueKind
    members: tuple[str, ...] = ()
    pattern: str | None = None

    def describe(self) -> str:
        """Return the constraint the way it is written in a schema file."""
        if self.kind == ValueKind.ENUM:
            return f"enum({','.join(self.members)})"
        if self.kind == ValueKind.REGEX:
            return f"regex({self.pattern})"
        if self.kind == ValueKind.INTEGER:
            return "int"
        if self.kind == ValueKind.BOOLEAN:
            return "bool"
        return "string"


@dataclass(frozen=True)
class SchemaRule:
    """Key pattern plus the value constraint it imposes."""

    pattern: str
    segments: tuple[str, ...]
    constraint: ValueConstraint
    line: int

    @property
    def has_wildcard(self) -> bool:
        """Return True when any segment is the `*` wildcard."""
        return WILDCARD in self.segments


@dataclass(frozen=True)
class Schema:
    """Ordered rules; the first rule matching a key takes precedence."""

    rules: tuple[SchemaRule, ...] = ()

    def __len__(self) -> int:
        return len(self.rules)
