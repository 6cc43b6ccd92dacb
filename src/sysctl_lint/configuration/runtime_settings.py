"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from sysctl_lint.config_parsing.document_models import DuplicateKeyPolicy


class OutputFormat(str, Enum):
    """JSON layouts for a rendered document."""

    MAPPING = "mapping"
    ENTRIES = "entries"
    NESTED = "nested"


@dataclass(frozen=True)
class LintSettings:
    """Normalized lint settings."""

    strict: bool = False
    duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.REJECT
    output_format: OutputFormat = OutputFormat.MAPPING
    require_exact_keys: bool = False
    schema_path: Path | None = None
