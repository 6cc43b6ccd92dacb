"""Schema parsing service."""

from __future__ import annotations

import logging
import re
from enum import Enum
from pathlib import Path

from sysctl_lint.config_parsing.line_scanner import scan_lines
from sysctl_lint.config_parsing.parse_faults import ParseFault

from .schema_models import WILDCARD, Schema, SchemaRule, ValueConstraint, ValueKind

_LOGGER = logging.getLogger(__name__)

_RULE_PATTERN = re.compile(r"(?P<pattern>\S+?)(?:\s*->\s*|\s+)(?P<type>.*)")
_ENUM_PATTERN = re.compile(r"enum\((?P<body>.*)\)")
_REGEX_PATTERN = re.compile(r"regex\((?P<body>.*)\)")
_SCALAR_TYPES = {
    "string": ValueConstraint(kind=ValueKind.STRING),
    "int": ValueConstraint(kind=ValueKind.INTEGER),
    "bool": ValueConstraint(kind=ValueKind.BOOLEAN),
}


class SchemaFaultReason(str, Enum):
    """Reasons a schema line cannot be parsed into a rule."""

    UNKNOWN_TYPE = "unknown_type"
    MALFORMED_PATTERN = "malformed_pattern"
    INVALID_REGEX = "invalid_regex"


class SchemaSyntaxFault(ParseFault):
    """Raised for schema lines with a bad key pattern or type token."""

    def __init__(self, reason: SchemaFaultReason, detail: str, *, line: int, text: str) -> None:
        super().__init__(f"{detail}: {text!r}", line=line)
        self.reason = reason
        self.text = text


def load_schema(schema_path: Path | str) -> Schema:
    """Read and parse a schema file.

    Raises:
      OSError: If the file cannot be read.
      SchemaSyntaxFault: If a rule line is malformed.
    """
    path = Path(schema_path)
    return parse_schema(path.read_text(encoding="utf-8"))


def parse_schema(text: str) -> Schema:
    """Parse `pattern TYPE` (or `pattern -> TYPE`) lines into an ordered schema."""
    rules = []
    for line in scan_lines(text):
        match = _RULE_PATTERN.fullmatch(line.text)
        if match is None:
            raise SchemaSyntaxFault(
                SchemaFaultReason.UNKNOWN_TYPE,
                "missing type after key pattern",
                line=line.number,
                text=line.text,
            )
        pattern = match.group("pattern")
        segments = _parse_pattern(pattern, line=line.number, text=line.text)
        constraint = _parse_type(match.group("type").strip(), line=line.number, text=line.text)
        rules.append(
            SchemaRule(pattern=pattern, segments=segments, constraint=constraint, line=line.number)
        )
    _LOGGER.debug("parsed %d schema rules", len(rules))
    return Schema(rules=tuple(rules))


def _parse_pattern(pattern: str, *, line: int, text: str) -> tuple[str, ...]:
    segments = tuple(pattern.split("."))
    for segment in segments:
        if not segment:
            raise SchemaSyntaxFault(
                SchemaFaultReason.MALFORMED_PATTERN,
                f"key pattern '{pattern}' has an empty segment",
                line=line,
                text=text,
            )
        if WILDCARD in segment and segment != WILDCARD:
            raise SchemaSyntaxFault(
                SchemaFaultReason.MALFORMED_PATTERN,
                f"wildcard in '{pattern}' must occupy a whole segment",
                line=line,
                text=text,
            )
    return segments


def _parse_type(token: str, *, line: int, text: str) -> ValueConstraint:
    if not token:
        raise SchemaSyntaxFault(
            SchemaFaultReason.UNKNOWN_TYPE, "missing type after key pattern", line=line, text=text
        )
    scalar = _SCALAR_TYPES.get(token)
    if scalar is not None:
        return scalar

    enum_match = _ENUM_PATTERN.fullmatch(token)
    if enum_match:
        members = tuple(member.strip() for member in enum_match.group("body").split(","))
        if not all(members):
            raise SchemaSyntaxFault(
                SchemaFaultReason.UNKNOWN_TYPE,
                "enum values must be non-empty",
                line=line,
                text=text,
            )
        return ValueConstraint(kind=ValueKind.ENUM, members=members)

    regex_match = _REGEX_PATTERN.fullmatch(token)
    if regex_match:
        body = regex_match.group("body")
        try:
            re.compile(body)
        except re.error as exc:
            raise SchemaSyntaxFault(
                SchemaFaultReason.INVALID_REGEX,
                f"invalid regular expression ({exc})",
                line=line,
                text=text,
            ) from exc
        return ValueConstraint(kind=ValueKind.REGEX, pattern=body)

    raise SchemaSyntaxFault(
        SchemaFaultReason.UNKNOWN_TYPE,
        f"unknown type '{token}' (expected string, int, bool, enum(...) or regex(...))",
        line=line,
        text=text,
    )
