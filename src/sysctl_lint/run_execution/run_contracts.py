"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass, field

from sysctl_lint.config_parsing.document_models import Document
from sysctl_lint.configuration.runtime_settings import LintSettings
from sysctl_lint.validation.violation_models import Violation


@dataclass(frozen=True)
class LintRequest:
    """Input contract for one lint run; no `config_path` means standard input."""

    config_path: str | None = None
    schema_path: str | None = None
    settings: LintSettings = field(default_factory=LintSettings)


@dataclass(frozen=True)
class LintOutcome:
    """Output contract for one completed lint run."""

    source: str
    document: Document
    validated: bool
    violations: tuple[Violation, ...] = ()

    @property
    def is_ok(self) -> bool:
        """Return True when validation found nothing to report."""
        return not self.violations
