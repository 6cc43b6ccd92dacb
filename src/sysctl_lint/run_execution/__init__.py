"""Run execution domain exports."""

from .lint_run_use_case import STDIN_SOURCE, LintExecutionError, execute_lint_run
from .run_contracts import LintOutcome, LintRequest

__all__ = [
    "LintRequest",
    "LintOutcome",
    "LintExecutionError",
    "STDIN_SOURCE",
    "execute_lint_run",
]
