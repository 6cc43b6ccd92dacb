"""Value checks for each schema value kind."""

from __future__ import annotations

import re
from collections.abc import Callable

from sysctl_lint.schema_management.schema_models import ValueConstraint, ValueKind

BOOLEAN_VALUES = frozenset({"0", "1", "true", "false"})
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def value_conforms(constraint: ValueConstraint, value: str) -> bool:
    """Interpret `value` under `constraint` and report whether it conforms."""
    return _CHECKS[constraint.kind](constraint, value)


def _is_string(constraint: ValueConstraint, value: str) -> bool:
    return True


def _is_integer(constraint: ValueConstraint, value: str) -> bool:
    return _INTEGER_PATTERN.fullmatch(value) is not None


def _is_boolean(constraint: ValueConstraint, value: str) -> bool:
    return value in BOOLEAN_VALUES


def _is_enum_member(constraint: ValueConstraint, value: str) -> bool:
    return value in constraint.members


def _matches_regex(constraint: ValueConstraint, value: str) -> bool:
    if constraint.pattern is None:
        raise ValueError("A regex constraint needs a pattern.")
    return re.fullmatch(constraint.pattern, value) is not None


_CHECKS: dict[ValueKind, Callable[[ValueConstraint, str], bool]] = {
    ValueKind.STRING: _is_string,
    ValueKind.INTEGER: _is_integer,
    ValueKind.BOOLEAN: _is_boolean,
    ValueKind.ENUM: _is_enum_member,
    ValueKind.REGEX: _matches_regex,
}
