"""Key pattern matching."""

from __future__ import annotations

from collections.abc import Sequence

from sysctl_lint.schema_management.schema_models import WILDCARD, Schema, SchemaRule


def key_matches(segments: Sequence[str], key: str) -> bool:
    """Return True when `key` fits the dotted pattern segments.

    A `*` segment stands for exactly one key segment, so the segment counts
    must be equal.
    """
    key_segments = key.split(".")
    if len(key_segments) != len(segments):
        return False
    return all(
        pattern_segment == WILDCARD or pattern_segment == key_segment
        for pattern_segment, key_segment in zip(segments, key_segments)
    )


def find_rule(schema: Schema, key: str) -> SchemaRule | None:
    """Return the first rule whose pattern matches `key`."""
    for rule in schema.rules:
        if key_matches(rule.segments, key):
            return rule
    return None
