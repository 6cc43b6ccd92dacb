"""Boundary tests for config_parsing internal dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_parsing_core_does_not_import_schema_or_validation() -> None:
    parsing_dir = _project_root() / "src" / "sysctl_lint" / "config_parsing"
    forbidden_import_fragments = (
        "sysctl_lint.schema_management",
        "sysctl_lint.validation",
        "sysctl_lint.configuration",
    )

    for module_path in sorted(parsing_dir.glob("*.py")):
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"
