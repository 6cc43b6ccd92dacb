"""Results writing exports."""

from .document_rendering import document_to_json_data, nest_keys, render_document
from .violation_report import format_violation, format_violations

__all__ = [
    "document_to_json_data",
    "nest_keys",
    "render_document",
    "format_violation",
    "format_violations",
]
