"""Lint run use-case service."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from pathlib import Path

from sysctl_lint.config_parsing import ParseFault, parse_document
from sysctl_lint.schema_management import load_schema
from sysctl_lint.validation import validate_document

from .run_contracts import LintOutcome, LintRequest

STDIN_SOURCE = "<stdin>"

_LOGGER = logging.getLogger(__name__)


class LintExecutionError(Exception):
    """Raised when a lint run cannot produce a document."""


def execute_lint_run(
    request: LintRequest,
    *,
    stdin_reader: Callable[[], str] | None = None,
) -> LintOutcome:
    """Parse the configuration and, when a schema is given, validate it.

    Parse faults abort the run before validation; violations are returned in
    the outcome for the caller to report.
    """
    settings = request.settings
    source, text = _read_configuration(request.config_path, stdin_reader or sys.stdin.read)
    try:
        document = parse_document(text, duplicate_keys=settings.duplicate_keys)
    except ParseFault as exc:
        raise LintExecutionError(f"{source}: {exc}") from exc

    schema_path = request.schema_path or settings.schema_path
    if schema_path is None:
        return LintOutcome(source=source, document=document, validated=False)

    try:
        schema = load_schema(schema_path)
    except ParseFault as exc:
        raise LintExecutionError(f"{schema_path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise LintExecutionError(f"Cannot read schema file {schema_path}: {exc}") from exc

    _LOGGER.debug("validating %s against %s (strict=%s)", source, schema_path, settings.strict)
    violations = validate_document(
        document,
        schema,
        strict=settings.strict,
        require_exact_keys=settings.require_exact_keys,
    )
    return LintOutcome(source=source, document=document, validated=True, violations=violations)


def _read_configuration(
    config_path: str | None, stdin_reader: Callable[[], str]
) -> tuple[str, str]:
    if config_path is None:
        _LOGGER.debug("reading configuration from standard input")
        try:
            return STDIN_SOURCE, stdin_reader()
        except (OSError, UnicodeDecodeError) as exc:
            raise LintExecutionError(f"Cannot read standard input: {exc}") from exc
    path = Path(config_path)
    try:
        return config_path, path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LintExecutionError(f"Cannot read configuration file {path}: {exc}") from exc
