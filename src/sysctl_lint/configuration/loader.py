"""Settings loader service."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from typing import Any, TypeVar

import yaml

from sysctl_lint.config_parsing.document_models import DuplicateKeyPolicy

from .runtime_settings import LintSettings, OutputFormat

_KNOWN_KEYS = frozenset(
    {"strict", "duplicate_keys", "output_format", "require_exact_keys", "schema"}
)
_EnumT = TypeVar("_EnumT", bound=Enum)


class ConfigurationError(Exception):
    """Raised when the settings file is invalid."""


def load_settings(settings_path: Path | str) -> LintSettings:
    """Load and validate a YAML (or JSON) settings file."""
    path = Path(settings_path)
    if not path.exists():
        raise ConfigurationError(f"Settings file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read settings file {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse settings file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Settings root must be a mapping.")

    unknown = sorted(str(key) for key in parsed if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown settings: {', '.join(unknown)}")

    return LintSettings(
        strict=_optional_bool(parsed.get("strict"), "strict", default=False),
        duplicate_keys=_optional_choice(
            parsed.get("duplicate_keys"),
            "duplicate_keys",
            DuplicateKeyPolicy,
            default=DuplicateKeyPolicy.REJECT,
        ),
        output_format=_optional_choice(
            parsed.get("output_format"),
            "output_format",
            OutputFormat,
            default=OutputFormat.MAPPING,
        ),
        require_exact_keys=_optional_bool(
            parsed.get("require_exact_keys"), "require_exact_keys", default=False
        ),
        schema_path=_optional_path(parsed.get("schema"), path.parent),
    )


def _optional_bool(value: Any, field_name: str, *, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _optional_choice(
    value: Any, field_name: str, choices: type[_EnumT], *, default: _EnumT
) -> _EnumT:
    if value is None:
        return default
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    try:
        return choices(value.strip().lower())
    except ValueError as exc:
        allowed = ", ".join(choice.value for choice in choices)
        raise ConfigurationError(f"{field_name} must be one of: {allowed}.") from exc


def _optional_path(value: Any, base_path: Path) -> Path | None:
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError("schema must be a non-empty path string.")
    return _resolve_path(base_path, value.strip())


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate
