"""Human-readable violation report lines."""

from __future__ import annotations

from collections.abc import Iterable

from sysctl_lint.validation.violation_models import Violation, ViolationReason


def format_violation(violation: Violation, *, source: str | None = None) -> str:
    """Return one report line citing the line number and key."""
    if violation.reason == ViolationReason.MISSING_KEY:
        return (
            f"schema line {violation.line}: key '{violation.key}' "
            "is missing from the configuration"
        )
    prefix = f"{source}:{violation.line}" if source else f"line {violation.line}"
    if violation.reason == ViolationReason.UNMATCHED_KEY:
        return f"{prefix}: '{violation.key}' is not declared in the schema"
    entry, rule = violation.entry, violation.rule
    if entry is None or rule is None:
        raise ValueError(f"Type mismatch without an entry and a rule: {violation!r}")
    return (
        f"{prefix}: '{entry.key}' expected {violation.expected} "
        f"(rule '{rule.pattern} {rule.constraint.describe()}'), "
        f"got {entry.value!r}"
    )


def format_violations(violations: Iterable[Violation], *, source: str | None = None) -> list[str]:
    """Format every violation, one line each, keeping their order."""
    return [format_violation(violation, source=source) for violation in violations]
