"""Document validation service."""

from __future__ import annotations

import logging

from sysctl_lint.config_parsing.document_models import Document, Entry
from sysctl_lint.schema_management.schema_models import Schema, SchemaRule, ValueKind

from .key_matching import find_rule
from .value_checks import BOOLEAN_VALUES, value_conforms
from .violation_models import Violation, ViolationReason

_LOGGER = logging.getLogger(__name__)


def validate_document(
    document: Document,
    schema: Schema,
    *,
    strict: bool,
    require_exact_keys: bool = False,
) -> tuple[Violation, ...]:
    """Check every entry against the first matching schema rule.

    All violations are collected in document order; an empty tuple means the
    document passes.

    Args:
      document: Parsed configuration document.
      schema: Ordered schema rules.
      strict: Report keys that no rule matches.
      require_exact_keys: Report wildcard-free rules no entry matched.
    """
    violations: list[Violation] = []
    matched_rules: set[SchemaRule] = set()
    for entry in document:
        rule = find_rule(schema, entry.key)
        if rule is None:
            if strict:
                violations.append(
                    Violation(entry=entry, rule=None, reason=ViolationReason.UNMATCHED_KEY)
                )
            continue
        matched_rules.add(rule)
        violation = _check_entry(entry, rule)
        if violation is not None:
            violations.append(violation)

    if require_exact_keys:
        violations.extend(
            Violation(entry=None, rule=rule, reason=ViolationReason.MISSING_KEY)
            for rule in schema.rules
            if not rule.has_wildcard and rule not in matched_rules and rule.pattern not in document
        )

    _LOGGER.debug(
        "validated %d entries against %d rules: %d violations",
        len(document),
        len(schema),
        len(violations),
    )
    return tuple(violations)


def _check_entry(entry: Entry, rule: SchemaRule) -> Violation | None:
    if value_conforms(rule.constraint, entry.value):
        return None
    return Violation(
        entry=entry,
        rule=rule,
        reason=ViolationReason.TYPE_MISMATCH,
        expected=_expected_description(rule),
    )


def _expected_description(rule: SchemaRule) -> str:
    constraint = rule.constraint
    if constraint.kind == ValueKind.INTEGER:
        return "a base-10 integer"
    if constraint.kind == ValueKind.BOOLEAN:
        return f"a boolean ({', '.join(sorted(BOOLEAN_VALUES))})"
    if constraint.kind == ValueKind.ENUM:
        return f"one of {', '.join(constraint.members)}"
    if constraint.kind == ValueKind.REGEX:
        return f"a value matching /{constraint.pattern}/"
    return "a string"
