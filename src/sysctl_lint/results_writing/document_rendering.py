"""JSON rendering of parsed documents."""

from __future__ import annotations

import json
from typing import Any

from sysctl_lint.config_parsing.document_models import Document
from sysctl_lint.configuration.runtime_settings import OutputFormat


def render_document(document: Document, output_format: OutputFormat = OutputFormat.MAPPING) -> str:
    """Render a document as pretty-printed JSON in the requested layout."""
    return json.dumps(document_to_json_data(document, output_format), indent=2, ensure_ascii=False)


def document_to_json_data(document: Document, output_format: OutputFormat) -> Any:
    """Return the JSON-ready structure for one layout."""
    if output_format == OutputFormat.ENTRIES:
        return [
            {"key": entry.key, "value": entry.value, "line": entry.line} for entry in document
        ]
    if output_format == OutputFormat.NESTED:
        return nest_keys(document)
    return document.as_mapping()


def nest_keys(document: Document) -> dict[str, Any]:
    """Split dotted keys into nested objects.

    A later key replaces whatever sits at a conflicting path: a scalar turns
    into an object when a deeper key needs it, and an object is replaced by a
    scalar assigned to the same path.
    """
    root: dict[str, Any] = {}
    for entry in document:
        *parents, leaf = entry.key.split(".")
        current = root
        for segment in parents:
            child = current.get(segment)
            if not isinstance(child, dict):
                child = {}
                current[segment] = child
            current = child
        current[leaf] = entry.value
    return root
